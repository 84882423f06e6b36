"""Role CRUD. These routes perform no authentication, matching the existing deployment."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from roster.core.database import get_db
from roster.models import Role
from roster.schemas.role import RoleCreate, RoleRead, RoleUpdate

logger = logging.getLogger(__name__)

# TODO: guard writes with require_role(RoleName.ADMIN) once existing clients send tokens.
router = APIRouter()


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Role not found")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=RoleRead)
def create_role(body: RoleCreate, db: Annotated[Session, Depends(get_db)]) -> RoleRead:
    role = Role(name=body.name)
    db.add(role)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Role '{body.name}' already exists",
        ) from e
    db.refresh(role)
    logger.info("Role created: id=%s name=%s", role.id, role.name)
    return RoleRead.model_validate(role)


@router.get("", response_model=list[RoleRead])
def list_roles(db: Annotated[Session, Depends(get_db)]) -> list[RoleRead]:
    roles = db.query(Role).order_by(Role.id).all()
    return [RoleRead.model_validate(r) for r in roles]


@router.get("/{role_id}", response_model=RoleRead)
def get_role(role_id: int, db: Annotated[Session, Depends(get_db)]) -> RoleRead:
    role = db.query(Role).filter(Role.id == role_id).first()
    if role is None:
        raise _not_found()
    return RoleRead.model_validate(role)


@router.put("/{role_id}", response_model=RoleRead)
def update_role(
    role_id: int,
    body: RoleUpdate,
    db: Annotated[Session, Depends(get_db)],
) -> RoleRead:
    role = db.query(Role).filter(Role.id == role_id).first()
    if role is None:
        raise _not_found()
    if body.name is not None:
        role.name = body.name
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Role '{body.name}' already exists",
        ) from e
    db.refresh(role)
    return RoleRead.model_validate(role)


@router.delete("/{role_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_role(role_id: int, db: Annotated[Session, Depends(get_db)]) -> Response:
    """Delete a role. Fails with 400 while any user still references it."""
    try:
        deleted = db.query(Role).filter(Role.id == role_id).delete(synchronize_session=False)
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Role is still assigned to users",
        ) from e
    if not deleted:
        raise _not_found()
    logger.info("Role deleted: id=%s", role_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
