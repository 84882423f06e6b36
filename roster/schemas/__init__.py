"""Pydantic request/response schemas."""

from roster.schemas.auth import Credentials, MessageResponse, TokenResponse
from roster.schemas.health import HealthResponse
from roster.schemas.role import RoleCreate, RoleRead, RoleUpdate
from roster.schemas.user import UserCreate, UserRead, UserUpdate

__all__ = [
    "Credentials",
    "HealthResponse",
    "MessageResponse",
    "RoleCreate",
    "RoleRead",
    "RoleUpdate",
    "TokenResponse",
    "UserCreate",
    "UserRead",
    "UserUpdate",
]
