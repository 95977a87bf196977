from pydantic_settings import BaseSettings

DEFAULT_CORS_ORIGINS = [
    "https://legal-ai-2-tool-1.onrender.com",
    "http://localhost:3000",
    "http://localhost:5000",
    "http://127.0.0.1:5500",
    "https://samarthaa-legal.netlify.app",
]


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 5000
    debug: bool = False
    jwt_secret: str
    jwt_expire_minutes: int = 120
    cors_origins: list[str] = DEFAULT_CORS_ORIGINS
    admin_email: str = "admin@just-law.tech"
    admin_password: str  # Seed password for the admin account, created on first start
    llm_model: str = "anthropic/claude-sonnet-4-5"
    llm_api_key: str = ""
    llm_max_tokens: int = 8000  # Contract, research and opinion documents
    assistant_max_tokens: int = 1024  # Conversational assistant replies
    transcription_model: str = "whisper-1"
    transcription_api_key: str = ""
    elevenlabs_api_key: str = ""  # TTS is disabled when empty
    elevenlabs_voice_id: str = "EXAVITQu4vr4xnSDxMaL"
    session_ttl_days: float = 1.0  # Default TTL for single-session registry records
    # Build metadata injected during Docker build via environment variables
    git_commit_hash: str = "unknown"
    git_commit_date: str = "unknown"
    build_time: str = "unknown"

    model_config = {
        "env_file": [".env"],
        "env_prefix": "SAMARTHAA_",
        "extra": "ignore",
    }
