"""Request/response schemas for user CRUD. Password hashes are never serialized."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field

from roster.schemas.role import RoleRead


class UserCreate(BaseModel):
    """Administrative user creation: explicit role, password hashed before storage."""

    username: str
    password: str
    role_id: int = Field(
        ...,
        validation_alias=AliasChoices("roleId", "role_id"),
        serialization_alias="roleId",
    )


class UserUpdate(BaseModel):
    """Partial update; omitted fields are left unchanged."""

    username: str | None = None
    password: str | None = None
    role_id: int | None = Field(
        default=None,
        validation_alias=AliasChoices("roleId", "role_id"),
        serialization_alias="roleId",
    )


class UserRead(BaseModel):
    """User with its role, as returned by /me and /users."""

    id: int
    username: str
    role_id: int = Field(
        validation_alias=AliasChoices("role_id", "roleId"),
        serialization_alias="roleId",
    )
    role: RoleRead
    created_at: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )
    updated_at: datetime | None = Field(
        default=None,
        validation_alias=AliasChoices("updated_at", "updatedAt"),
        serialization_alias="updatedAt",
    )

    class Config:
        from_attributes = True
