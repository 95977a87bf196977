"""Persisted client-side credentials, surviving process restarts."""

import os
from pathlib import Path

import structlog
from pydantic import BaseModel, ValidationError

logger = structlog.get_logger(__name__)

FILE_MODE = 0o600


class StoredCredentials(BaseModel):
    """The three values needed to resume a session without logging in again."""

    token: str | None = None  # JWT for the backend API
    owner_token: str | None = None  # Session registry owner token
    user_key: str | None = None  # Key the owner token was registered under

    @property
    def is_complete(self) -> bool:
        return bool(self.token and self.owner_token and self.user_key)


class CredentialStore:
    """JSON file holding StoredCredentials, readable by the owner only."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def load(self) -> StoredCredentials | None:
        """Return stored credentials only when all three values are present.

        An unreadable or corrupt file counts as no credentials.
        """
        if not self.path.exists():
            return None
        try:
            credentials = StoredCredentials.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValidationError) as e:
            logger.warning("credentials_unreadable", path=str(self.path), error=str(e))
            return None
        if not credentials.is_complete:
            return None
        return credentials

    def save(self, credentials: StoredCredentials) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Written to a fresh owner-only file, then swapped in, so tokens are never readable under the umask
        tmp_path = self.path.with_name(f".{self.path.name}.tmp")
        tmp_path.unlink(missing_ok=True)
        fd = os.open(tmp_path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, FILE_MODE)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(credentials.model_dump_json())
        tmp_path.replace(self.path)

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)
