import logging
from datetime import datetime, timedelta, timezone
from typing import Any

import bcrypt
import jwt

from app.exceptions.custom import InvalidInputError, InvalidTokenError

logger = logging.getLogger(__name__)

_BCRYPT_MAX_BYTES = 72


def hash_password(password: str, rounds: int = 12) -> str:
    """Salted bcrypt hash of ``password``, as text suitable for storage."""
    secret = password.encode("utf-8")
    if len(secret) > _BCRYPT_MAX_BYTES:
        raise InvalidInputError(f"Password must be at most {_BCRYPT_MAX_BYTES} bytes")
    return bcrypt.hashpw(secret, bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        # Malformed stored hash or oversize candidate
        return False


class TokenService:
    """Issues and verifies the signed bearer tokens handed out at login."""

    def __init__(self, secret: str, algorithm: str = "HS256", expire_minutes: int = 60):
        self._secret = secret
        self._algorithm = algorithm
        self._expire = timedelta(minutes=expire_minutes)

    def create_access_token(
        self, user_id: str, email: str, now: datetime | None = None,
    ) -> str:
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "id": user_id,
            "email": email,
            "iat": issued_at,
            "exp": issued_at + self._expire,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> dict[str, Any]:
        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "id"]},
            )
        except jwt.ExpiredSignatureError:
            logger.warning("Rejected expired token")
            raise InvalidTokenError("Token expired")
        except jwt.InvalidTokenError as exc:
            logger.warning("Rejected invalid token: %s", exc)
            raise InvalidTokenError()
        return claims
