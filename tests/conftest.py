"""Shared pytest fixtures."""

from copy import deepcopy
from types import SimpleNamespace
from typing import Any

import httpx
import pytest
from fastapi import FastAPI

from samarthaa.config import Config
from samarthaa.core.modules.session.models import SessionValidation
from samarthaa.core.modules.session.service import SessionService
from samarthaa.errors import UserError
from samarthaa.web.error_handlers import general_exception_handler, user_error_handler
from samarthaa.web.routers import session_router


class FakeCursor:
    def __init__(self, docs: list[dict[str, Any]]) -> None:
        self._docs = iter(docs)

    def __aiter__(self) -> "FakeCursor":
        return self

    async def __anext__(self) -> dict[str, Any]:
        try:
            return next(self._docs)
        except StopIteration:
            raise StopAsyncIteration from None


class FakeCollection:
    """In-memory stand-in for the few AsyncCollection calls the services make.

    Filters support top-level equality only.
    """

    def __init__(self) -> None:
        self.docs: list[dict[str, Any]] = []
        self.indexes: list[tuple[Any, dict[str, Any]]] = []

    @staticmethod
    def _matches(doc: dict[str, Any], query: dict[str, Any]) -> bool:
        return all(doc.get(key) == value for key, value in query.items())

    def find(self, query: dict[str, Any] | None = None) -> FakeCursor:
        return FakeCursor([deepcopy(d) for d in self.docs if self._matches(d, query or {})])

    async def create_index(self, keys: Any, **kwargs: Any) -> str:
        self.indexes.append((keys, kwargs))
        return "index"

    async def find_one(self, query: dict[str, Any]) -> dict[str, Any] | None:
        doc = next((d for d in self.docs if self._matches(d, query)), None)
        return deepcopy(doc) if doc is not None else None

    async def insert_one(self, doc: dict[str, Any]) -> SimpleNamespace:
        self.docs.append(deepcopy(doc))
        return SimpleNamespace(inserted_id=doc["_id"])

    async def update_one(self, query: dict[str, Any], update: dict[str, Any], upsert: bool = False) -> SimpleNamespace:
        doc = next((d for d in self.docs if self._matches(d, query)), None)
        if doc is None:
            if not upsert:
                return SimpleNamespace(matched_count=0, upserted_id=None)
            doc = {**deepcopy(query), **deepcopy(update.get("$setOnInsert", {}))}
            doc.update(deepcopy(update.get("$set", {})))
            self.docs.append(doc)
            return SimpleNamespace(matched_count=0, upserted_id=doc.get("_id"))
        doc.update(deepcopy(update.get("$set", {})))
        return SimpleNamespace(matched_count=1, upserted_id=None)

    async def delete_one(self, query: dict[str, Any]) -> SimpleNamespace:
        for i, doc in enumerate(self.docs):
            if self._matches(doc, query):
                del self.docs[i]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)


class FakeDatabase:
    def __init__(self) -> None:
        self.collections: dict[str, FakeCollection] = {}

    def get_collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())


class RegistryApp:
    """The session registry slice of the App facade, backed by a SessionService."""

    def __init__(self, service: SessionService, default_ttl_days: float = 1.0) -> None:
        self.service = service
        self.default_ttl_days = default_ttl_days

    async def register_session(self, user_key: str, token: str, device_label: str, ttl_days: float | None) -> None:
        await self.service.register(user_key, token, device_label, self.default_ttl_days if ttl_days is None else ttl_days)

    async def validate_session(self, user_key: str, token: str) -> SessionValidation:
        return await self.service.validate(user_key, token)

    async def logout_session(self, user_key: str, token: str) -> None:  # noqa: ARG002
        await self.service.logout(user_key)


@pytest.fixture
def config():
    """Application config that does not depend on the environment."""
    return Config(
        _env_file=None,
        database_url="mongodb://localhost:27017/samarthaa_test",
        jwt_secret="test-secret",
        admin_email="admin@just-law.tech",
        admin_password="admin-password",
        llm_api_key="test-llm-key",
        elevenlabs_api_key="test-tts-key",
        transcription_api_key="test-stt-key",
    )


@pytest.fixture
def fake_database():
    return FakeDatabase()


@pytest.fixture
def session_service(fake_database):
    return SessionService(fake_database)


@pytest.fixture
def registry_app(session_service):
    """FastAPI app exposing only the /session endpoints."""
    app = FastAPI()
    app.include_router(session_router)
    app.add_exception_handler(UserError, user_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)
    app.state.app = RegistryApp(session_service)
    return app


@pytest.fixture
def registry_transport(registry_app):
    return httpx.ASGITransport(app=registry_app)
