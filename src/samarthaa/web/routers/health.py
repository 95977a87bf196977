from datetime import datetime

from fastapi import APIRouter
from pydantic import BaseModel

from samarthaa.utils import now
from samarthaa.web.deps import AppDep, AuthTokenDep

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    status: str
    message: str
    tts: bool
    timestamp: datetime


@router.get("/health", summary="Health check", operation_id="healthCheck")
async def health_check(app: AppDep) -> HealthResponse:
    return HealthResponse(status="ok", message="SAMARTHAA-LEGAL Backend Running", tts=app.tts_enabled, timestamp=now())


@router.get("/version", summary="Get version information", operation_id="getVersion")
async def get_version(app: AppDep, auth_token: AuthTokenDep) -> dict[str, str]:  # noqa: ARG001
    return await app.get_version()
