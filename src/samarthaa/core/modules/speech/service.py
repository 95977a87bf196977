import httpx
import litellm
import structlog

from samarthaa.core.core import Service
from samarthaa.errors import ServiceUnavailableError, UpstreamError, ValidationError

logger = structlog.get_logger(__name__)

ELEVENLABS_API_URL = "https://api.elevenlabs.io/v1/text-to-speech"
ELEVENLABS_MODEL_ID = "eleven_multilingual_v2"
TTS_TEXT_LIMIT = 4900  # ElevenLabs accepts 5000 characters per request
TTS_TIMEOUT = 60.0
VOICE_SETTINGS = {
    "stability": 0.50,
    "similarity_boost": 0.75,
    "style": 0.25,
    "use_speaker_boost": True,
}


class SpeechService(Service):
    """Text-to-speech and speech-to-text through third-party APIs."""

    @property
    def tts_enabled(self) -> bool:
        return bool(self.core.config.elevenlabs_api_key)

    async def synthesize(self, text: str, requested_by: str) -> bytes:
        """Convert text to MPEG audio with ElevenLabs.

        Raises:
            ValidationError: If text is empty
            ServiceUnavailableError: If no ElevenLabs key is configured
            UpstreamError: If ElevenLabs rejects the request or cannot be reached
        """
        text = text.strip()
        if not text:
            raise ValidationError("No text provided")
        if not self.tts_enabled:
            raise ServiceUnavailableError("TTS service not configured on server")

        text = text[:TTS_TEXT_LIMIT]
        logger.info("tts_requested", email=requested_by, chars=len(text))

        try:
            async with httpx.AsyncClient(timeout=TTS_TIMEOUT) as client:
                response = await client.post(
                    f"{ELEVENLABS_API_URL}/{self.core.config.elevenlabs_voice_id}",
                    json={"text": text, "model_id": ELEVENLABS_MODEL_ID, "voice_settings": VOICE_SETTINGS},
                    headers={"Accept": "audio/mpeg", "xi-api-key": self.core.config.elevenlabs_api_key},
                )
        except httpx.HTTPError as e:
            logger.warning("tts_request_failed", error=str(e))
            raise UpstreamError(f"TTS request failed: {e}") from e

        if response.status_code != 200:
            detail = response.text[:300]
            logger.warning("tts_upstream_error", status_code=response.status_code, detail=detail)
            raise UpstreamError(f"ElevenLabs error {response.status_code}", status_code=response.status_code, detail=detail)

        return response.content

    async def transcribe(self, audio: bytes, filename: str) -> str:
        """Convert recorded speech to text."""
        if not audio:
            raise ValidationError("No audio provided")
        if not self.core.config.transcription_api_key:
            raise ServiceUnavailableError("Transcription service not configured on server")

        try:
            response = await litellm.atranscription(
                model=self.core.config.transcription_model,
                file=(filename, audio),
                api_key=self.core.config.transcription_api_key,
            )
        except Exception as e:
            logger.warning("transcription_failed", error=str(e))
            raise UpstreamError(f"Transcription failed: {e}") from e

        text = getattr(response, "text", "") or ""
        logger.info("transcription_completed", chars=len(text))
        return text
