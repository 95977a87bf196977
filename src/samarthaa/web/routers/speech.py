from typing import Annotated

from fastapi import APIRouter, File, UploadFile
from fastapi.responses import Response
from pydantic import BaseModel, Field

from samarthaa.web.deps import AppDep, AuthTokenDep
from samarthaa.web.openapi import ErrorResponse

router = APIRouter(tags=["speech"])


class TTSRequest(BaseModel):
    text: str = Field("", description="Text to speak, capped at 4900 characters")


class TranscriptionResponse(BaseModel):
    text: str = Field(..., description="Recognized speech")


@router.post(
    "/tts",
    summary="Text to speech",
    operation_id="textToSpeech",
    response_class=Response,
    responses={
        200: {"content": {"audio/mpeg": {}}, "description": "MPEG audio"},
        400: {"model": ErrorResponse, "description": "No text provided"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        502: {"model": ErrorResponse, "description": "TTS provider unreachable"},
        503: {"model": ErrorResponse, "description": "TTS not configured"},
    },
)
async def text_to_speech(request: TTSRequest, app: AppDep, auth_token: AuthTokenDep) -> Response:
    audio = await app.synthesize_speech(auth_token, request.text)
    return Response(content=audio, media_type="audio/mpeg")


@router.post(
    "/transcribe",
    summary="Speech to text",
    operation_id="transcribe",
    responses={
        200: {"description": "Transcribed text"},
        400: {"model": ErrorResponse, "description": "Empty audio"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        503: {"model": ErrorResponse, "description": "Transcription not configured"},
    },
)
async def transcribe(
    file: Annotated[UploadFile, File(description="Recorded audio")], app: AppDep, auth_token: AuthTokenDep
) -> TranscriptionResponse:
    audio = await file.read()
    text = await app.transcribe_speech(auth_token, audio, file.filename or "audio.webm")
    return TranscriptionResponse(text=text)
