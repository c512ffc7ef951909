import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from app.db import USERS, with_str_id
from app.exceptions.custom import DuplicateUserError, InvalidCredentialsError
from app.schemas.user import LoginRequest, SignupRequest, User
from app.services.security import TokenService, hash_password, verify_password

logger = logging.getLogger(__name__)


class AuthService:
    def __init__(self, db: AsyncIOMotorDatabase, tokens: TokenService, bcrypt_rounds: int = 12):
        self._users = db[USERS]
        self._tokens = tokens
        self._bcrypt_rounds = bcrypt_rounds

    async def signup(self, request: SignupRequest) -> str:
        """Register a user and return its id. Email and username must be unused."""
        existing = await self._users.find_one(
            {"$or": [{"email": request.email}, {"username": request.username}]}
        )
        if existing is not None:
            raise DuplicateUserError()

        doc = request.model_dump()
        doc["password"] = hash_password(request.password, rounds=self._bcrypt_rounds)
        try:
            result = await self._users.insert_one(doc)
        except DuplicateKeyError:
            # Lost a race with a concurrent signup; the unique index wins
            raise DuplicateUserError()

        logger.info("Registered user %s", request.username)
        return str(result.inserted_id)

    async def login(self, request: LoginRequest) -> tuple[str, User]:
        doc = await self._users.find_one({"email": request.email})
        if doc is None or not verify_password(request.password, doc.get("password", "")):
            logger.warning("Failed login for %s", request.email)
            raise InvalidCredentialsError()

        user = User(**with_str_id(doc))
        token = self._tokens.create_access_token(user.id, user.email)
        logger.info("User %s logged in", user.username)
        return token, user
