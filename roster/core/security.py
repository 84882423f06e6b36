"""Password hashing and JWT issuance/verification for authentication."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

import bcrypt
import jwt

from roster.core.config import Settings

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of the password.
BCRYPT_MAX_BYTES = 72


def hash_password(plain_password: str, rounds: int) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash (constant-time inside bcrypt)."""
    pw_bytes = plain_password.encode("utf-8")[:BCRYPT_MAX_BYTES]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a verified token."""

    id: int
    role: str


class TokenService:
    """
    Issues and verifies signed bearer tokens carrying {id, role}.

    Tokens are issued without an exp claim, so they stay valid until the
    signing secret changes.
    """

    def __init__(self, secret: str, algorithm: str = "HS256") -> None:
        if not secret:
            raise ValueError("Token signing secret must be non-empty")
        self._secret = secret
        self._algorithm = algorithm

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(settings.JWT_SECRET.get_secret_value(), settings.JWT_ALGORITHM)

    def issue(self, user_id: int, role_name: str) -> str:
        payload: dict[str, Any] = {
            "id": user_id,
            "role": role_name,
            "iat": datetime.now(UTC),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> TokenClaims | None:
        """
        Validate signature and payload shape; return claims or None.

        Malformed, unsigned, tampered or foreign-key tokens all yield None.
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except jwt.PyJWTError as e:
            logger.debug("Token rejected: %s", e)
            return None
        user_id = payload.get("id")
        role = payload.get("role")
        # bool is an int subclass; reject it explicitly.
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            return None
        if not isinstance(role, str):
            return None
        return TokenClaims(id=user_id, role=role)
