from datetime import timedelta
from typing import Any

import structlog
from jose import JWTError, jwt
from pydantic import ValidationError as PydanticValidationError

from samarthaa.core.core import Service
from samarthaa.core.modules.auth.models import AuthToken, TokenClaims
from samarthaa.core.modules.user.models import User
from samarthaa.errors import AuthenticationError
from samarthaa.utils import normalize_email, now

logger = structlog.get_logger(__name__)

JWT_ALGORITHM = "HS256"


class AuthService(Service):
    """Issues and verifies stateless access tokens (JWT)."""

    def create_token(self, user: User) -> AuthToken:
        issued_at = now()
        payload: dict[str, Any] = {
            "sub": user.email,
            "id": str(user.id),
            "iat": issued_at,
            "exp": issued_at + timedelta(minutes=self.core.config.jwt_expire_minutes),
        }
        return AuthToken(jwt.encode(payload, self.core.config.jwt_secret, algorithm=JWT_ALGORITHM))

    def decode_token(self, auth_token: AuthToken) -> TokenClaims:
        """Verify signature and expiry, raise AuthenticationError otherwise."""
        try:
            payload = jwt.decode(auth_token, self.core.config.jwt_secret, algorithms=[JWT_ALGORITHM])
            return TokenClaims.model_validate(payload)
        except (JWTError, PydanticValidationError) as e:
            raise AuthenticationError("Invalid or expired token") from e

    async def login(self, email: str, password: str) -> AuthToken:
        """Check credentials and issue an access token."""
        if not self.core.services.user.verify_password(email, password):
            logger.info("login_rejected", email=normalize_email(email))
            raise AuthenticationError("Invalid credentials")
        user = self.core.services.user.get_user_by_email(email)
        logger.info("login_succeeded", email=user.email)
        return self.create_token(user)

    async def get_authenticated_user(self, auth_token: AuthToken) -> User:
        claims = self.decode_token(auth_token)
        user = self.core.services.user.find_user_by_email(claims.sub)
        if user is None or user.id != claims.id:
            raise AuthenticationError("Invalid or expired token")
        return user

    async def is_auth_token_valid(self, auth_token: AuthToken) -> bool:
        try:
            await self.get_authenticated_user(auth_token)
        except AuthenticationError:
            return False
        return True
