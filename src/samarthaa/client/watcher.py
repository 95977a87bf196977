"""Periodic check that this client's owner token still owns its session."""

import asyncio
import contextlib
from collections.abc import Awaitable, Callable
from enum import StrEnum
from typing import Protocol

import structlog
from pydantic import BaseModel

from samarthaa.client.errors import RegistryUnavailableError
from samarthaa.core.modules.session.models import InvalidReason, SessionValidation

logger = structlog.get_logger(__name__)

DEFAULT_POLL_INTERVAL = 20.0
MAX_LOGGED_FAILURES = 3


class SessionValidator(Protocol):
    async def validate(self, user_key: str, token: str) -> SessionValidation: ...


class PollOutcome(StrEnum):
    VALID = "valid"
    KICKED = "kicked"  # Terminal: registry gave a definitive valid=false
    TRANSIENT_FAILURE = "transient_failure"  # No answer, assume still valid


class PollResult(BaseModel):
    outcome: PollOutcome
    reason: InvalidReason | None = None


class SessionWatcher:
    """Cancellable periodic validation task.

    Ticks run one after another: the next tick starts `interval` seconds after
    the previous one finished, so slow answers never make polls overlap.
    Only a definitive valid=false response stops polling; network failures are
    counted and polling continues indefinitely.
    """

    def __init__(
        self,
        registry: SessionValidator,
        user_key: str,
        owner_token: str,
        on_kicked: Callable[[InvalidReason], Awaitable[None]],
        interval: float = DEFAULT_POLL_INTERVAL,
    ) -> None:
        self._registry = registry
        self._user_key = user_key
        self._owner_token = owner_token
        self._on_kicked = on_kicked
        self.interval = interval
        self.consecutive_failures = 0
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name=f"session-watcher:{self._user_key}")

    async def stop(self) -> None:
        """Cancel polling and wait for the task to finish. Safe to call from the kick handler."""
        task, self._task = self._task, None
        if task is None or task.done() or task is asyncio.current_task():
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def poll_once(self) -> PollResult:
        """Run a single validation tick and classify its outcome."""
        try:
            result = await self._registry.validate(self._user_key, self._owner_token)
        except RegistryUnavailableError as e:
            self.consecutive_failures += 1
            if self.consecutive_failures <= MAX_LOGGED_FAILURES:
                logger.warning(
                    "session_poll_failed",
                    user_key=self._user_key,
                    consecutive_failures=self.consecutive_failures,
                    error=str(e),
                )
            return PollResult(outcome=PollOutcome.TRANSIENT_FAILURE)

        self.consecutive_failures = 0
        if result.valid:
            return PollResult(outcome=PollOutcome.VALID)
        return PollResult(outcome=PollOutcome.KICKED, reason=result.reason or InvalidReason.ENDED)

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            result = await self.poll_once()
            if result.outcome == PollOutcome.KICKED:
                self._task = None
                await self._on_kicked(result.reason or InvalidReason.ENDED)
                return
