"""HTTP client for the backend's authentication endpoints."""

from typing import Self

import httpx

from samarthaa.client.errors import BackendError, LoginRejectedError

DEFAULT_TIMEOUT = 20.0


class BackendClient:
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

    async def login(self, email: str, password: str) -> str:
        """Exchange credentials for a JWT access token.

        Raises:
            LoginRejectedError: If the backend refuses the credentials
            BackendError: If the backend cannot be reached or fails
        """
        try:
            response = await self._client.post("/api/login", json={"email": email, "password": password})
        except httpx.HTTPError as e:
            raise BackendError(f"Login failed: {e!r}") from e

        if response.status_code in (400, 401):
            raise LoginRejectedError(_error_message(response, "Invalid credentials"), response.status_code)
        if response.is_error:
            raise BackendError(_error_message(response, "Login failed"), response.status_code)

        token = response.json().get("token")
        if not token:
            raise BackendError("Login response did not contain a token", response.status_code)
        return str(token)

    async def is_healthy(self) -> bool:
        try:
            response = await self._client.get("/api/health")
        except httpx.HTTPError:
            return False
        return response.is_success


def _error_message(response: httpx.Response, default: str) -> str:
    try:
        body = response.json()
    except ValueError:
        return default
    if isinstance(body, dict):
        return str(body.get("message") or default)
    return default
