"""Single active session registry models."""

from datetime import datetime, timedelta
from enum import StrEnum
from typing import Self

from pydantic import BaseModel, Field

from samarthaa.core.db import MongoModel
from samarthaa.utils import now

# Upper bound on a session lifetime, keeps expires_at within the datetime range
MAX_TTL_DAYS = 3650


class InvalidReason(StrEnum):
    """Why a presented owner token is no longer accepted."""

    DISPLACED = "session_displaced"  # Another device registered a newer token
    EXPIRED = "session_expired"  # Record TTL elapsed
    ENDED = "session_ended"  # No record (logged out, swept, never registered)


class SessionRecord(MongoModel):
    """The one record per user key naming the token that currently owns the session.

    Indexed on user_key - unique, expires_at (TTL, swept by MongoDB once elapsed).
    """

    user_key: str
    owner_token: str
    device_label: str = ""
    created_at: datetime = Field(default_factory=now)
    expires_at: datetime

    @classmethod
    def issue(cls, user_key: str, owner_token: str, device_label: str, ttl_days: float) -> Self:
        """Create a record starting now and expiring ttl_days later (zero or negative means already expired)."""
        created_at = now()
        ttl_days = max(-MAX_TTL_DAYS, min(ttl_days, MAX_TTL_DAYS))
        return cls(
            user_key=user_key,
            owner_token=owner_token,
            device_label=device_label,
            created_at=created_at,
            expires_at=created_at + timedelta(days=ttl_days),
        )

    def is_expired(self, at: datetime) -> bool:
        return at >= self.expires_at


class SessionValidation(BaseModel):
    """Outcome of a validate call; reason is set only when valid is false."""

    valid: bool = Field(..., description="Whether the presented token owns the session")
    reason: InvalidReason | None = Field(None, description="Why the token is not valid")

    @classmethod
    def ok(cls) -> Self:
        return cls(valid=True)

    @classmethod
    def rejected(cls, reason: InvalidReason) -> Self:
        return cls(valid=False, reason=reason)
