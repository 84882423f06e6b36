"""User CRUD. Listing requires ROLE_ADMIN; other reads and writes require any valid token."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from roster.api.deps import get_app_settings
from roster.api.guard import Identity, get_current_identity, require_role
from roster.core.config import Settings
from roster.core.database import get_db
from roster.core.security import hash_password
from roster.models import Role, RoleName, User
from roster.schemas.user import UserCreate, UserRead, UserUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")


def _ensure_role_exists(db: Session, role_id: int) -> None:
    if db.query(Role).filter(Role.id == role_id).first() is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Role {role_id} does not exist",
        )


def _hash_or_400(password: str, rounds: int) -> str:
    try:
        return hash_password(password, rounds)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Could not hash password: {e}",
        ) from e


USER_CONSTRAINT_DETAIL = "User violates a uniqueness or role constraint"


def _commit_or_400(db: Session, detail: str = USER_CONSTRAINT_DETAIL) -> None:
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail) from e


@router.post("", status_code=status.HTTP_201_CREATED, response_model=UserRead)
def create_user(
    body: UserCreate,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> UserRead:
    """Create a user with an explicit role."""
    _ensure_role_exists(db, body.role_id)
    user = User(
        username=body.username,
        password=_hash_or_400(body.password, settings.BCRYPT_ROUNDS),
        role_id=body.role_id,
    )
    db.add(user)
    _commit_or_400(db)
    db.refresh(user)
    logger.info("User created: id=%s role_id=%s", user.id, user.role_id)
    return UserRead.model_validate(user)


@router.get("", response_model=list[UserRead])
def list_users(
    _admin: Annotated[Identity, Depends(require_role(RoleName.ADMIN))],
    db: Annotated[Session, Depends(get_db)],
) -> list[UserRead]:
    """List all users (admin only)."""
    users = db.query(User).order_by(User.id).all()
    return [UserRead.model_validate(u) for u in users]


@router.get("/{user_id}", response_model=UserRead)
def get_user(
    user_id: int,
    _identity: Annotated[Identity, Depends(get_current_identity)],
    db: Annotated[Session, Depends(get_db)],
) -> UserRead:
    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise _not_found()
    return UserRead.model_validate(user)


@router.put("/{user_id}", response_model=UserRead)
def update_user(
    user_id: int,
    body: UserUpdate,
    _identity: Annotated[Identity, Depends(get_current_identity)],
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> UserRead:
    """Update username, password and/or role. A new password is hashed before storage."""
    user = db.query(User).filter(User.id == user_id).first()
    if user is None:
        raise _not_found()

    changes = body.model_dump(exclude_unset=True, exclude_none=True)
    if "role_id" in changes:
        _ensure_role_exists(db, changes["role_id"])
    if "password" in changes:
        changes["password"] = _hash_or_400(changes["password"], settings.BCRYPT_ROUNDS)
    for name, value in changes.items():
        setattr(user, name, value)

    _commit_or_400(db)
    db.refresh(user)
    return UserRead.model_validate(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    _identity: Annotated[Identity, Depends(get_current_identity)],
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    deleted = db.query(User).filter(User.id == user_id).delete(synchronize_session=False)
    db.commit()
    if not deleted:
        raise _not_found()
    logger.info("User deleted: id=%s", user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
