"""Authentication token models."""

from datetime import datetime
from typing import NewType
from uuid import UUID

from pydantic import BaseModel

AuthToken = NewType("AuthToken", str)


class TokenClaims(BaseModel):
    """Claims carried by an access token."""

    sub: str  # user email
    id: UUID
    exp: datetime
    iat: datetime
