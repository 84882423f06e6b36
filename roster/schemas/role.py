"""Request/response schemas for role CRUD."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field


class RoleCreate(BaseModel):
    name: str = Field(..., description="Unique role name, e.g. ROLE_ADMIN")


class RoleUpdate(BaseModel):
    name: str | None = Field(default=None, description="New unique role name")


class RoleRead(BaseModel):
    """Role as returned by the API."""

    id: int
    name: str
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
