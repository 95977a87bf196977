"""Tests for AuthService."""

from datetime import timedelta
from types import SimpleNamespace

import pytest
from jose import jwt

from samarthaa.core.modules.auth.models import AuthToken
from samarthaa.core.modules.auth.service import JWT_ALGORITHM, AuthService
from samarthaa.core.modules.user.service import UserService
from samarthaa.errors import AuthenticationError
from samarthaa.utils import now


@pytest.fixture
def core(fake_database, config):
    core = SimpleNamespace(config=config, services=SimpleNamespace())
    core.services.user = UserService(fake_database)
    core.services.auth = AuthService(fake_database)
    core.services.user.set_core(core)
    core.services.auth.set_core(core)
    return core


@pytest.mark.asyncio
class TestAuthService:
    """Tests for login and token verification."""

    async def test_login_issues_token(self, core, config):
        user = await core.services.user.create_user("a@x.com", "secret1")

        token = await core.services.auth.login("A@x.com", "secret1")

        claims = core.services.auth.decode_token(token)
        assert claims.sub == "a@x.com"
        assert claims.id == user.id
        assert claims.exp - claims.iat == timedelta(minutes=config.jwt_expire_minutes)
        assert (await core.services.auth.get_authenticated_user(token)).id == user.id

    async def test_wrong_password(self, core):
        await core.services.user.create_user("a@x.com", "secret1")
        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            await core.services.auth.login("a@x.com", "nope123")

    async def test_unknown_user(self, core):
        with pytest.raises(AuthenticationError, match="Invalid credentials"):
            await core.services.auth.login("ghost@x.com", "secret1")

    async def test_garbage_token(self, core):
        assert await core.services.auth.is_auth_token_valid(AuthToken("not-a-jwt")) is False

    async def test_wrong_secret(self, core, config):
        user = await core.services.user.create_user("a@x.com", "secret1")
        issued = now()
        forged = jwt.encode(
            {"sub": user.email, "id": str(user.id), "iat": issued, "exp": issued + timedelta(minutes=5)},
            "other-secret",
            algorithm=JWT_ALGORITHM,
        )
        with pytest.raises(AuthenticationError, match="Invalid or expired token"):
            core.services.auth.decode_token(AuthToken(forged))

    async def test_expired_token(self, core, config):
        user = await core.services.user.create_user("a@x.com", "secret1")
        issued = now() - timedelta(hours=3)
        expired = jwt.encode(
            {"sub": user.email, "id": str(user.id), "iat": issued, "exp": issued + timedelta(minutes=120)},
            config.jwt_secret,
            algorithm=JWT_ALGORITHM,
        )
        assert await core.services.auth.is_auth_token_valid(AuthToken(expired)) is False

    async def test_token_for_deleted_user(self, core, fake_database):
        user = await core.services.user.create_user("a@x.com", "secret1")
        token = core.services.auth.create_token(user)
        fake_database.get_collection("users").docs.clear()
        await core.services.user.update_all_users_cache()

        assert await core.services.auth.is_auth_token_valid(token) is False
