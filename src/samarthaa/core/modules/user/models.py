from datetime import datetime
from typing import Self
from uuid import UUID

from pydantic import BaseModel, Field

from samarthaa.core.db import MongoModel
from samarthaa.utils import now


class User(MongoModel):
    """Account allowed to sign in; the email doubles as the session registry user key."""

    email: str  # normalized, see utils.normalize_email
    password_hash: str  # bcrypt
    created_at: datetime = Field(default_factory=now)


class UserView(BaseModel):
    """Account as returned by /api/profile, without credentials."""

    id: UUID = Field(..., description="User ID")
    email: str = Field(..., description="Email address, also the session key")
    created_at: datetime = Field(..., description="When the account was created")

    @classmethod
    def from_domain(cls, user: User) -> Self:
        return cls(id=user.id, email=user.email, created_at=user.created_at)
