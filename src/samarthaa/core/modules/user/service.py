from typing import Any
from uuid import UUID

import bcrypt
import structlog
from pymongo.asynchronous.database import AsyncDatabase

from samarthaa.core.core import Service
from samarthaa.core.modules.user.models import User
from samarthaa.core.modules.user.validators import validate_email, validate_password
from samarthaa.errors import NotFoundError, ValidationError
from samarthaa.utils import normalize_email

logger = structlog.get_logger(__name__)


class UserService(Service):
    """Manages users with in-memory cache."""

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("users")
        self._users: dict[UUID, User] = {}

    def get_user(self, user_id: UUID) -> User:
        """Get user by ID from cache."""
        if user_id not in self._users:
            raise NotFoundError(f"User '{user_id}' not found")
        return self._users[user_id]

    def find_user_by_email(self, email: str) -> User | None:
        key = normalize_email(email)
        return next((u for u in self._users.values() if u.email == key), None)

    def get_user_by_email(self, email: str) -> User:
        """Get user by email from cache."""
        user = self.find_user_by_email(email)
        if user is None:
            raise NotFoundError(f"User '{email}' not found")
        return user

    def has_email(self, email: str) -> bool:
        return self.find_user_by_email(email) is not None

    async def create_user(self, email: str, password: str) -> User:
        """Create user with hashed password."""
        email = normalize_email(email)
        validate_email(email)
        if self.has_email(email):
            raise ValidationError(f"User '{email}' already exists")

        validate_password(password)
        password_hash = bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")
        res = await self._collection.insert_one(User(email=email, password_hash=password_hash).to_mongo())
        return await self.update_user_cache(res.inserted_id)

    def verify_password(self, email: str, password: str) -> bool:
        """Verify password against stored hash."""
        user = self.find_user_by_email(email)
        if user is None:
            return False
        return bcrypt.checkpw(password.encode("utf-8"), user.password_hash.encode("utf-8"))

    async def ensure_admin_user_exists(self) -> None:
        """Create the configured admin user if not exists."""
        if not self.has_email(self.core.config.admin_email):
            await self.create_user(self.core.config.admin_email, self.core.config.admin_password)
            logger.info("admin_user_created", email=normalize_email(self.core.config.admin_email))

    async def update_all_users_cache(self) -> None:
        """Reload all users cache from database."""
        users = await User.list_cursor(self._collection.find())
        self._users = {user.id: user for user in users}

    async def update_user_cache(self, user_id: UUID) -> User:
        """Reload a specific user cache from database."""
        user = User.from_mongo(await self._collection.find_one({"_id": user_id}))
        if user is None:
            raise NotFoundError(f"User '{user_id}' not found")
        self._users[user_id] = user
        return self._users[user_id]

    async def on_start(self) -> None:
        """Initialize indexes, cache, and admin user."""
        await self._collection.create_index([("email", 1)], unique=True)
        await self.update_all_users_cache()
        await self.ensure_admin_user_exists()
        logger.debug("user_service_started", user_count=len(self._users))
