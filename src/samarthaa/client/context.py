"""Client-side authentication state with single active session enforcement."""

import secrets
from collections.abc import Callable
from enum import StrEnum
from typing import Self

import structlog

from samarthaa.client.backend import BackendClient
from samarthaa.client.config import ClientConfig
from samarthaa.client.errors import RegistryUnavailableError, SessionActiveError
from samarthaa.client.registry import SessionRegistryClient
from samarthaa.client.storage import CredentialStore, StoredCredentials
from samarthaa.client.watcher import DEFAULT_POLL_INTERVAL, SessionWatcher
from samarthaa.core.modules.session.models import InvalidReason
from samarthaa.utils import normalize_email

logger = structlog.get_logger(__name__)

KICK_MESSAGES = {
    InvalidReason.DISPLACED: "You have been signed out because your account was signed in on another device.",
    InvalidReason.EXPIRED: "Your session has expired. Please sign in again.",
    InvalidReason.ENDED: "Your session has ended. Please sign in again.",
}


def kick_message(reason: InvalidReason) -> str:
    """User-facing explanation for a forced logout."""
    return KICK_MESSAGES.get(reason, KICK_MESSAGES[InvalidReason.ENDED])


class SessionState(StrEnum):
    UNAUTHENTICATED = "unauthenticated"
    VALIDATING = "validating"
    ACTIVE = "active"
    KICKED = "kicked"


class SessionContext:
    """Owns the credentials, the watcher and the session state machine.

    Registry failures are handled here and never raised to callers:
    - register at login fails open (proceed without cross-device locking),
    - validate while polling fails soft (keep polling),
    - validate while restoring fails closed (credentials purged, login required).
    """

    def __init__(
        self,
        backend: BackendClient,
        registry: SessionRegistryClient,
        store: CredentialStore,
        device_label: str = "python-client",
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        ttl_days: float = 1.0,
        on_kicked: Callable[[InvalidReason], None] | None = None,
    ) -> None:
        self._backend = backend
        self._registry = registry
        self._store = store
        self.device_label = device_label
        self.poll_interval = poll_interval
        self.ttl_days = ttl_days
        self.on_kicked = on_kicked

        self.state = SessionState.UNAUTHENTICATED
        self.kick_reason: InvalidReason | None = None
        # False after a fail-open login: the session is usable but not exclusive
        self.locked = False
        self._credentials: StoredCredentials | None = None
        self._watcher: SessionWatcher | None = None

    @classmethod
    def from_config(cls, config: ClientConfig, on_kicked: Callable[[InvalidReason], None] | None = None) -> Self:
        return cls(
            backend=BackendClient(config.backend_url, timeout=config.request_timeout),
            registry=SessionRegistryClient(config.registry_url, timeout=config.request_timeout),
            store=CredentialStore(config.credentials_path),
            device_label=config.device_label,
            poll_interval=config.poll_interval,
            ttl_days=config.session_ttl_days,
            on_kicked=on_kicked,
        )

    @property
    def access_token(self) -> str | None:
        """JWT for backend requests, only while the session is active."""
        if self.state != SessionState.ACTIVE or self._credentials is None:
            return None
        return self._credentials.token

    @property
    def user_key(self) -> str | None:
        return self._credentials.user_key if self._credentials else None

    @property
    def polling(self) -> bool:
        return self._watcher is not None and self._watcher.running

    async def login(self, email: str, password: str) -> None:
        """Sign in, claim the session for this device and start polling.

        Allowed only from the unauthenticated and kicked states; call logout first
        to switch accounts. A failed backend login leaves the context untouched.

        Raises:
            SessionActiveError: If a session is active or being restored
            LoginRejectedError: If the backend refuses the credentials
            BackendError: If the backend cannot be reached
        """
        if self.state not in (SessionState.UNAUTHENTICATED, SessionState.KICKED):
            raise SessionActiveError(f"Cannot log in while the session is {self.state}")

        access_token = await self._backend.login(email, password)
        await self._stop_watcher()

        user_key = normalize_email(email)
        owner_token = secrets.token_urlsafe(32)
        try:
            await self._registry.register(user_key, owner_token, self.device_label, self.ttl_days)
            self.locked = True
        except RegistryUnavailableError as e:
            # Fail open: the single-session guarantee is not enforced for this login
            logger.warning("session_register_failed", user_key=user_key, error=str(e))
            self.locked = False

        self._credentials = StoredCredentials(token=access_token, owner_token=owner_token, user_key=user_key)
        self._store.save(self._credentials)
        self.kick_reason = None
        self.state = SessionState.ACTIVE
        if self.locked:
            self._start_watcher()
        logger.info("session_started", user_key=user_key, locked=self.locked)

    async def restore(self) -> bool:
        """Resume a stored session if the registry confirms it is still ours."""
        if self.state == SessionState.ACTIVE:
            return True

        credentials = self._store.load()
        if credentials is None:
            self.state = SessionState.UNAUTHENTICATED
            return False

        self.state = SessionState.VALIDATING
        user_key, owner_token = str(credentials.user_key), str(credentials.owner_token)
        try:
            result = await self._registry.validate(user_key, owner_token)
        except RegistryUnavailableError as e:
            logger.warning("session_restore_failed", user_key=user_key, error=str(e))
            self._purge()
            return False

        if not result.valid:
            logger.info("session_restore_rejected", user_key=user_key, reason=result.reason)
            self._purge()
            return False

        self._credentials = credentials
        self.locked = True
        self.kick_reason = None
        self.state = SessionState.ACTIVE
        self._start_watcher()
        logger.info("session_restored", user_key=user_key)
        return True

    async def logout(self) -> None:
        """Stop polling, forget credentials and end the session at the registry (best-effort)."""
        await self._stop_watcher()
        credentials = self._credentials or self._store.load()
        self._purge()
        if credentials is None or not credentials.user_key or not credentials.owner_token:
            return
        try:
            await self._registry.logout(credentials.user_key, credentials.owner_token)
        except RegistryUnavailableError as e:
            logger.warning("session_logout_failed", user_key=credentials.user_key, error=str(e))

    async def teardown(self) -> None:
        """Stop polling when the hosting view goes away.

        Stored credentials are kept, so the next restore() re-validates them before
        the session becomes active and polled again.
        """
        await self._stop_watcher()
        self._credentials = None
        if self.state == SessionState.ACTIVE:
            self.state = SessionState.UNAUTHENTICATED

    async def _handle_kicked(self, reason: InvalidReason) -> None:
        await self._stop_watcher()
        self._purge()
        self.state = SessionState.KICKED
        self.kick_reason = reason
        logger.info("session_kicked", reason=reason)
        if self.on_kicked is None:
            return
        try:
            self.on_kicked(reason)
        except Exception:
            # Runs inside the watcher task, where nothing would retrieve the error
            logger.exception("kick_callback_failed", reason=reason)

    def _start_watcher(self) -> None:
        credentials = self._credentials
        if credentials is None or not credentials.user_key or not credentials.owner_token:
            return
        self._watcher = SessionWatcher(
            self._registry,
            credentials.user_key,
            credentials.owner_token,
            on_kicked=self._handle_kicked,
            interval=self.poll_interval,
        )
        self._watcher.start()

    async def _stop_watcher(self) -> None:
        watcher, self._watcher = self._watcher, None
        if watcher is not None:
            await watcher.stop()

    def _purge(self) -> None:
        self._credentials = None
        self._store.clear()
        self.locked = False
        self.state = SessionState.UNAUTHENTICATED
