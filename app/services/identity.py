import logging

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.db import USERS, parse_object_id, with_str_id
from app.exceptions.custom import InvalidTokenError, UnauthenticatedError, UnknownUserError
from app.schemas.user import User
from app.services.security import TokenService

logger = logging.getLogger(__name__)


def extract_bearer_token(authorization: str | None) -> str | None:
    """Second whitespace-delimited segment of an ``Authorization`` header."""
    if not authorization:
        return None
    parts = authorization.split()
    return parts[1] if len(parts) > 1 else None


class IdentityResolver:
    def __init__(self, db: AsyncIOMotorDatabase, tokens: TokenService):
        self._users = db[USERS]
        self._tokens = tokens

    async def resolve(self, authorization: str | None) -> User:
        """Map an ``Authorization`` header to the user its token was issued for.

        Raises UnauthenticatedError when no token is present, InvalidTokenError
        when the signature or expiry check fails, and UnknownUserError when the
        token's subject no longer exists.
        """
        token = extract_bearer_token(authorization)
        if token is None:
            raise UnauthenticatedError()

        claims = self._tokens.decode(token)
        user_id = parse_object_id(str(claims["id"]))
        if user_id is None:
            raise InvalidTokenError()

        doc = await self._users.find_one({"_id": user_id})
        if doc is None:
            logger.warning("Token subject %s not found", claims["id"])
            raise UnknownUserError()

        return User(**with_str_id(doc))
