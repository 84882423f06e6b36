"""Idempotent startup seed: default roles and the admin/user accounts."""

import logging
from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from roster.core.security import hash_password
from roster.models import Role, RoleName, User

logger = logging.getLogger(__name__)

DEFAULT_ROLES = (RoleName.ADMIN, RoleName.USER)

# (username, password, role) created when absent. Existing accounts are never touched.
DEFAULT_ACCOUNTS = (
    ("admin", "admin", RoleName.ADMIN),
    ("user", "user", RoleName.USER),
)


@dataclass
class SeedResult:
    """Names of the rows created by a seed run; empty lists mean nothing was missing."""

    roles_created: list[str] = field(default_factory=list)
    users_created: list[str] = field(default_factory=list)


def _find_or_create_role(db: Session, name: RoleName) -> tuple[Role, bool]:
    role = db.query(Role).filter(Role.name == name.value).first()
    if role is not None:
        return role, False
    role = Role(name=name.value)
    db.add(role)
    db.flush()
    return role, True


def seed_defaults(db: Session, rounds: int) -> SeedResult:
    """
    Find or create the default roles and accounts, then commit.

    Safe to run on every startup: a second run creates nothing.
    """
    result = SeedResult()
    roles: dict[RoleName, Role] = {}
    for name in DEFAULT_ROLES:
        role, created = _find_or_create_role(db, name)
        roles[name] = role
        if created:
            result.roles_created.append(name.value)

    for username, password, role_name in DEFAULT_ACCOUNTS:
        if db.query(User).filter(User.username == username).first() is not None:
            continue
        db.add(
            User(
                username=username,
                password=hash_password(password, rounds),
                role_id=roles[role_name].id,
            )
        )
        result.users_created.append(username)

    db.commit()
    logger.info(
        "Seed completed: roles_created=%s users_created=%s",
        result.roles_created,
        result.users_created,
    )
    return result
