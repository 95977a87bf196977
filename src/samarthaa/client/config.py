from pathlib import Path

from pydantic_settings import BaseSettings


class ClientConfig(BaseSettings):
    """Settings for the session-aware client, loaded from environment variables."""

    backend_url: str = "http://localhost:5000"
    registry_url: str = "http://localhost:5000"  # Host serving /session/*, may differ from the backend
    credentials_path: Path = Path.home() / ".samarthaa" / "credentials.json"
    device_label: str = "python-client"
    poll_interval: float = 20.0  # Seconds between session validation polls
    request_timeout: float = 20.0
    session_ttl_days: float = 1.0

    model_config = {
        "env_file": [".env"],
        "env_prefix": "SAMARTHAA_CLIENT_",
        "extra": "ignore",
    }
