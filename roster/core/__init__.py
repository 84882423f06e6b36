"""Core app configuration, database and security."""

from roster.core.config import Settings, get_settings
from roster.core.database import get_db
from roster.core.security import TokenClaims, TokenService

__all__ = ["Settings", "TokenClaims", "TokenService", "get_db", "get_settings"]
