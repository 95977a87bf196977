import secrets
from datetime import datetime
from typing import Any

import structlog
from pymongo.asynchronous.database import AsyncDatabase

from samarthaa.core.core import Service
from samarthaa.core.modules.session.models import InvalidReason, SessionRecord, SessionValidation
from samarthaa.utils import normalize_email, now

logger = structlog.get_logger(__name__)


def check_session(record: SessionRecord | None, token: str, at: datetime) -> SessionValidation:
    """Decide whether token owns the session described by record at the given time.

    Expiry is checked before the token, so an expired record reports
    session_expired even when the token differs too.
    """
    if record is None:
        return SessionValidation.rejected(InvalidReason.ENDED)
    if record.is_expired(at):
        return SessionValidation.rejected(InvalidReason.EXPIRED)
    if not secrets.compare_digest(record.owner_token.encode("utf-8"), token.encode("utf-8")):
        return SessionValidation.rejected(InvalidReason.DISPLACED)
    return SessionValidation.ok()


class SessionService(Service):
    """Registry of the single active session per user key.

    Each operation touches exactly one document, so MongoDB single-document
    atomicity is the only concurrency control: concurrent registrations for
    the same key resolve last-writer-wins.
    """

    def __init__(self, database: AsyncDatabase[dict[str, Any]]) -> None:
        super().__init__(database)
        self._collection = database.get_collection("session_registry")

    async def on_start(self) -> None:
        """Create indexes on startup."""
        await self._collection.create_index([("user_key", 1)], unique=True)
        # MongoDB sweeps records once expires_at has passed; validate still checks expiry itself
        # because the sweeper runs only about once a minute.
        await self._collection.create_index([("expires_at", 1)], expireAfterSeconds=0)

    async def register(self, user_key: str, token: str, device_label: str, ttl_days: float) -> SessionRecord:
        """Make token the owner of the session for user_key, displacing any previous owner."""
        record = SessionRecord.issue(normalize_email(user_key), token, device_label, ttl_days)
        await self._collection.update_one(
            {"user_key": record.user_key},
            {
                "$set": {
                    "owner_token": record.owner_token,
                    "device_label": record.device_label,
                    "created_at": record.created_at,
                    "expires_at": record.expires_at,
                },
                "$setOnInsert": {"_id": record.id},
            },
            upsert=True,
        )
        logger.info("session_registered", user_key=record.user_key, device=device_label, expires_at=record.expires_at)
        return record

    async def get_record(self, user_key: str) -> SessionRecord | None:
        return SessionRecord.from_mongo(await self._collection.find_one({"user_key": normalize_email(user_key)}))

    async def validate(self, user_key: str, token: str, at: datetime | None = None) -> SessionValidation:
        """Check whether token still owns the session for user_key."""
        record = await self.get_record(user_key)
        result = check_session(record, token, at or now())
        if not result.valid:
            logger.debug("session_rejected", user_key=normalize_email(user_key), reason=result.reason)
        return result

    async def logout(self, user_key: str) -> None:
        """Remove the session record for user_key if there is one."""
        key = normalize_email(user_key)
        result = await self._collection.delete_one({"user_key": key})
        logger.info("session_ended", user_key=key, deleted=result.deleted_count)
