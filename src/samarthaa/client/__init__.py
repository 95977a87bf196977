"""Session-aware client: login, restore and single active session polling."""

from samarthaa.client.backend import BackendClient
from samarthaa.client.config import ClientConfig
from samarthaa.client.context import SessionContext, SessionState, kick_message
from samarthaa.client.errors import BackendError, LoginRejectedError, RegistryUnavailableError, SessionActiveError
from samarthaa.client.registry import SessionRegistryClient
from samarthaa.client.storage import CredentialStore, StoredCredentials
from samarthaa.client.watcher import PollOutcome, SessionWatcher

__all__ = [
    "BackendClient",
    "BackendError",
    "ClientConfig",
    "CredentialStore",
    "LoginRejectedError",
    "PollOutcome",
    "RegistryUnavailableError",
    "SessionActiveError",
    "SessionContext",
    "SessionRegistryClient",
    "SessionState",
    "SessionWatcher",
    "StoredCredentials",
    "kick_message",
]
