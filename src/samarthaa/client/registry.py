"""HTTP client for the single active session registry."""

from typing import Any, Self

import httpx
import structlog
from pydantic import ValidationError

from samarthaa.client.errors import RegistryUnavailableError
from samarthaa.core.modules.session.models import SessionValidation

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT = 20.0


class SessionRegistryClient:
    """Calls /session/register, /session/validate and /session/logout.

    Every failure to obtain a well-formed 2xx answer is raised as
    RegistryUnavailableError; callers decide whether that fails open or closed.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _post(self, path: str, body: dict[str, Any]) -> dict[str, Any]:
        try:
            response = await self._client.post(path, json=body)
        except httpx.HTTPError as e:
            raise RegistryUnavailableError(f"Session registry unreachable: {e!r}") from e

        if response.is_error:
            raise RegistryUnavailableError(f"Session registry answered {response.status_code} for {path}")

        try:
            data = response.json()
        except ValueError as e:
            raise RegistryUnavailableError(f"Session registry returned a non-JSON body for {path}") from e
        if not isinstance(data, dict):
            raise RegistryUnavailableError(f"Session registry returned an unexpected body for {path}")
        return data

    async def register(self, user_key: str, token: str, device_label: str, ttl_days: float) -> None:
        """Claim the session for user_key; displaces whichever device held it before."""
        await self._post(
            "/session/register",
            {"user_key": user_key, "token": token, "device": device_label, "expiryDays": ttl_days},
        )

    async def validate(self, user_key: str, token: str) -> SessionValidation:
        data = await self._post("/session/validate", {"user_key": user_key, "token": token})
        try:
            return SessionValidation.model_validate(data)
        except ValidationError as e:
            raise RegistryUnavailableError("Session registry returned an invalid validation body") from e

    async def logout(self, user_key: str, token: str) -> None:
        await self._post("/session/logout", {"user_key": user_key, "token": token})
