"""Access guard: resolve a bearer token to a user (with role) and optionally require a role."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from roster.api.deps import get_token_service
from roster.core.database import get_db
from roster.core.security import TokenService
from roster.models import RoleName, User

security = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class Identity:
    """Authenticated caller. role is None when the stored role name is not a known RoleName."""

    user: User
    role: RoleName | None


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> Identity:
    """
    Dependency: require a valid Bearer token for an existing user. Raises 401 otherwise.

    The role comes from the user's current database row, not from the token claim.
    """
    if credentials is None:
        raise _unauthorized()
    claims = token_service.verify(credentials.credentials)
    if claims is None:
        raise _unauthorized()
    user = db.query(User).filter(User.id == claims.id).first()
    if user is None:
        raise _unauthorized()
    return Identity(user=user, role=RoleName.from_persisted(user.role.name))


def require_role(required: RoleName) -> Callable[..., Identity]:
    """Build a dependency that authenticates, then raises 403 unless the caller holds required."""

    def dependency(
        identity: Annotated[Identity, Depends(get_current_identity)],
    ) -> Identity:
        if identity.role is not required:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Access denied",
            )
        return identity

    return dependency
