"""Request/response schemas for signup, login and the current-user endpoint."""

from pydantic import BaseModel, Field


class Credentials(BaseModel):
    """Username and password, as sent to /signup and /login."""

    username: str = Field(..., description="Username")
    password: str = Field(..., description="Plain-text password; hashed before storage")


class TokenResponse(BaseModel):
    """Bearer token returned after successful login."""

    token: str = Field(..., description="Signed JWT; send as Authorization: Bearer <token>")


class MessageResponse(BaseModel):
    """Plain acknowledgement or error body."""

    message: str
