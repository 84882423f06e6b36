"""HTTP routes."""

from fastapi import APIRouter

from roster.api import auth, health, roles, users

router = APIRouter()
router.include_router(auth.router, tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(roles.router, prefix="/roles", tags=["roles"])
router.include_router(health.router, prefix="/health", tags=["health"])
