from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from samarthaa.config import Config
from samarthaa.core.core import Core
from samarthaa.core.modules.auth.models import AuthToken
from samarthaa.core.modules.document.pdf import render_pdf
from samarthaa.core.modules.document.printing import render_print_html
from samarthaa.core.modules.document.word import render_docx
from samarthaa.core.modules.llm.models import AssistantRequest, AssistantResponse, GenerateRequest, GenerateResponse
from samarthaa.core.modules.session.models import SessionValidation
from samarthaa.core.modules.user.models import UserView
from samarthaa.errors import ValidationError


class App:
    """Facade for all application operations, validates authentication before delegating to Core."""

    def __init__(self, config: Config) -> None:
        self._core = Core(config)

    @asynccontextmanager
    async def lifespan(self) -> AsyncGenerator[None]:
        """Application lifespan management - delegates to Core."""
        async with self._core.lifespan():
            yield

    @property
    def tts_enabled(self) -> bool:
        return self._core.services.speech.tts_enabled

    async def is_auth_token_valid(self, auth_token: AuthToken) -> bool:
        """Check if authentication token is valid."""
        return await self._core.services.auth.is_auth_token_valid(auth_token)

    async def login(self, email: str, password: str) -> AuthToken:
        """Authenticate user and issue an access token."""
        if not email.strip() or not password:
            raise ValidationError("Email and password are required")
        return await self._core.services.auth.login(email, password)

    async def get_current_user(self, auth_token: AuthToken) -> UserView:
        user = await self._core.services.auth.get_authenticated_user(auth_token)
        return UserView.from_domain(user)

    # === Single active session registry ===
    # The registry is addressed by user key and owner token only, it does not require an access token.
    async def register_session(self, user_key: str, token: str, device_label: str, ttl_days: float | None) -> None:
        """Make token the current owner of user_key's session, displacing any other device."""
        if ttl_days is None:
            ttl_days = self._core.config.session_ttl_days
        await self._core.services.session.register(user_key, token, device_label, ttl_days)

    async def validate_session(self, user_key: str, token: str) -> SessionValidation:
        """Check whether token still owns user_key's session."""
        return await self._core.services.session.validate(user_key, token)

    async def logout_session(self, user_key: str, token: str) -> None:  # noqa: ARG002
        """End user_key's session. The token is not checked: only its holder knows a token worth sending."""
        await self._core.services.session.logout(user_key)

    # === Generation ===
    async def generate_document(self, auth_token: AuthToken, request: GenerateRequest) -> GenerateResponse:
        """Draft a contract, research memo or opinion (authenticated only)."""
        user = await self._core.services.auth.get_authenticated_user(auth_token)
        return await self._core.services.llm.generate_document(request, user.id)

    async def ask_assistant(self, auth_token: AuthToken, request: AssistantRequest) -> AssistantResponse:
        """Answer a chat assistant message (authenticated only)."""
        user = await self._core.services.auth.get_authenticated_user(auth_token)
        return await self._core.services.llm.ask_assistant(request, user.id)

    # === Documents ===
    async def render_pdf(self, auth_token: AuthToken, content: str) -> bytes:
        await self._core.services.auth.get_authenticated_user(auth_token)
        return render_pdf(content)

    async def render_docx(self, auth_token: AuthToken, content: str) -> bytes:
        await self._core.services.auth.get_authenticated_user(auth_token)
        return render_docx(content)

    async def render_print_html(self, auth_token: AuthToken, content: str, locale: str) -> str:
        await self._core.services.auth.get_authenticated_user(auth_token)
        return render_print_html(content, locale)

    # === Speech ===
    async def synthesize_speech(self, auth_token: AuthToken, text: str) -> bytes:
        """Convert text to speech audio (authenticated only)."""
        user = await self._core.services.auth.get_authenticated_user(auth_token)
        return await self._core.services.speech.synthesize(text, user.email)

    async def transcribe_speech(self, auth_token: AuthToken, audio: bytes, filename: str) -> str:
        """Convert recorded speech to text (authenticated only)."""
        await self._core.services.auth.get_authenticated_user(auth_token)
        return await self._core.services.speech.transcribe(audio, filename)

    async def get_version(self) -> dict[str, str]:
        config = self._core.config
        return {
            "git_commit_hash": config.git_commit_hash,
            "git_commit_date": config.git_commit_date,
            "build_time": config.build_time,
        }
