"""Signup, login and current-user endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from roster.api.deps import get_app_settings, get_token_service
from roster.api.guard import Identity, get_current_identity
from roster.core.config import Settings
from roster.core.database import get_db
from roster.core.security import TokenService
from roster.schemas.auth import Credentials, MessageResponse, TokenResponse
from roster.schemas.user import UserRead
from roster.services.accounts import (
    AccountError,
    DefaultRoleMissingError,
    InvalidCredentialsError,
    login,
    signup,
)

router = APIRouter()


@router.post("/signup", status_code=status.HTTP_201_CREATED, response_model=MessageResponse)
def post_signup(
    body: Credentials,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> MessageResponse:
    """Register a user with the default role."""
    try:
        signup(db, body.username, body.password, settings.BCRYPT_ROUNDS)
    except DefaultRoleMissingError as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=e.message
        ) from e
    except AccountError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
    return MessageResponse(message="User created successfully")


@router.post("/login", response_model=TokenResponse)
def post_login(
    body: Credentials,
    db: Annotated[Session, Depends(get_db)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> TokenResponse:
    """
    Authenticate with username and password; returns a bearer token.
    Include the token in the Authorization header as: Bearer <token>
    """
    try:
        token = login(db, body.username, body.password, token_service)
    except InvalidCredentialsError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message) from e
    return TokenResponse(token=token)


@router.get("/me", response_model=UserRead)
def get_me(identity: Annotated[Identity, Depends(get_current_identity)]) -> UserRead:
    """Return the authenticated user and role."""
    return UserRead.model_validate(identity.user)
