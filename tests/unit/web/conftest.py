"""An App wired to real services over the in-memory database, served through ASGITransport."""

from types import SimpleNamespace

import httpx
import pytest
import pytest_asyncio

from samarthaa.app import App
from samarthaa.core.modules.auth.service import AuthService
from samarthaa.core.modules.llm.service import LLMService
from samarthaa.core.modules.session.service import SessionService
from samarthaa.core.modules.speech.service import SpeechService
from samarthaa.core.modules.user.service import UserService
from samarthaa.web.server import create_fastapi_app


@pytest_asyncio.fixture
async def app_instance(fake_database, config):
    core = SimpleNamespace(config=config, services=SimpleNamespace())
    for name, service_class in [
        ("user", UserService),
        ("auth", AuthService),
        ("session", SessionService),
        ("llm", LLMService),
        ("speech", SpeechService),
    ]:
        service = service_class(fake_database)
        service.set_core(core)
        setattr(core.services, name, service)
    await core.services.user.on_start()

    app = App.__new__(App)
    app._core = core
    return app


@pytest.fixture
def web_app(app_instance, config):
    fastapi_app = create_fastapi_app(app_instance, config)
    fastapi_app.state.app = app_instance
    return fastapi_app


@pytest_asyncio.fixture
async def client(web_app):
    transport = httpx.ASGITransport(app=web_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http:
        yield http


@pytest_asyncio.fixture
async def auth_headers(client, config):
    response = await client.post("/api/login", json={"email": config.admin_email, "password": config.admin_password})
    return {"Authorization": f"Bearer {response.json()['token']}"}
