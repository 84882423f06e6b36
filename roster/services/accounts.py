"""Signup and login: the only account operations with logic beyond plain CRUD."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from roster.core.security import TokenService, hash_password, verify_password
from roster.models import DEFAULT_ROLE, Role, User

logger = logging.getLogger(__name__)


class AccountError(Exception):
    """Base error for signup/login failures; message is safe to return to clients."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DefaultRoleMissingError(AccountError):
    """The role assigned to new signups does not exist; signup cannot proceed."""


class UsernameTakenError(AccountError):
    """Another user already holds the requested username."""


class InvalidCredentialsError(AccountError):
    """Unknown username or wrong password. Both cases are reported identically."""


def signup(db: Session, username: str, password: str, rounds: int) -> User:
    """
    Create a user with the default role.

    The password is hashed before the default role is looked up; a missing
    default role aborts the signup rather than creating a role-less user.
    """
    try:
        hashed = hash_password(password, rounds)
    except ValueError as e:
        raise AccountError(f"Could not hash password: {e}") from e

    default_role = db.query(Role).filter(Role.name == DEFAULT_ROLE.value).first()
    if default_role is None:
        logger.error("Signup rejected: default role %s not found", DEFAULT_ROLE.value)
        raise DefaultRoleMissingError("default user role not found")

    user = User(username=username, password=hashed, role_id=default_role.id)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise UsernameTakenError(f"Username '{username}' is already taken") from e
    db.refresh(user)
    logger.info("User signed up: id=%s username=%s", user.id, user.username)
    return user


def login(db: Session, username: str, password: str, token_service: TokenService) -> str:
    """Check credentials and return a bearer token embedding the user's id and role name."""
    user = db.query(User).filter(User.username == username).first()
    if user is None or not verify_password(password, user.password):
        logger.info("Login failed for username=%s", username)
        raise InvalidCredentialsError("Invalid credentials")
    return token_service.issue(user.id, user.role.name)
