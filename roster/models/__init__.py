"""SQLAlchemy ORM models."""

from roster.models.base import Base
from roster.models.role import DEFAULT_ROLE, Role, RoleName
from roster.models.user import User

__all__ = ["Base", "DEFAULT_ROLE", "Role", "RoleName", "User"]
