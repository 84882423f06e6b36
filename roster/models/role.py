"""ORM model for roles, plus the closed set of role names checked by authorization."""

from enum import Enum

from sqlalchemy import Column, DateTime, Integer, String, func
from sqlalchemy.orm import relationship

from roster.models.base import Base


class RoleName(str, Enum):
    """Role names that carry meaning for authorization."""

    ADMIN = "ROLE_ADMIN"
    USER = "ROLE_USER"

    @classmethod
    def from_persisted(cls, name: str | None) -> "RoleName | None":
        """Map a stored role name to a member; unknown names map to None."""
        try:
            return cls(name)
        except ValueError:
            return None


# Role assigned to every account created through signup.
DEFAULT_ROLE = RoleName.USER


class Role(Base):
    """
    Named role. Every user references exactly one role.

    Deleting a role that users still reference fails at the database level.
    """

    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )

    users = relationship("User", back_populates="role", passive_deletes="all")
