"""Dependencies exposing objects built once at startup and stored on app.state."""

from fastapi import Request

from roster.core.config import Settings
from roster.core.security import TokenService


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service
