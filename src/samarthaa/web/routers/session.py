from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict, Field

from samarthaa.core.modules.session.models import MAX_TTL_DAYS, SessionValidation
from samarthaa.web.deps import AppDep

router = APIRouter(prefix="/session", tags=["session"])


class RegisterSessionRequest(BaseModel):
    """Claim the single active session for a user from this device."""

    model_config = ConfigDict(populate_by_name=True)

    user_key: str = Field(..., min_length=1, description="Stable user identifier, e.g. email")
    token: str = Field(..., min_length=1, description="Owner token generated by the client for this login")
    device: str = Field("", description="Free-text description of the device")
    expiry_days: float | None = Field(
        None,
        alias="expiryDays",
        ge=-MAX_TTL_DAYS,
        le=MAX_TTL_DAYS,
        allow_inf_nan=False,
        description="Session lifetime in days, zero or negative registers an already expired session",
    )


class SessionTokenRequest(BaseModel):
    user_key: str = Field(..., min_length=1, description="Stable user identifier, e.g. email")
    token: str = Field(..., description="Owner token the client believes is current")


@router.post(
    "/register",
    summary="Register active session",
    description=(
        "Make the given token the owner of the user's session. Overwrites any existing session for the user; "
        "the previous device learns it was displaced on its next validation."
    ),
    operation_id="registerSession",
    responses={
        200: {"description": "Session registered"},
        422: {"description": "Invalid request body"},
    },
)
async def register_session(request: RegisterSessionRequest, app: AppDep) -> dict[str, str]:
    await app.register_session(request.user_key, request.token, request.device, request.expiry_days)
    return {}


@router.post(
    "/validate",
    summary="Validate session owner",
    description="Check whether the token still owns the user's session. `reason` is present only when not valid.",
    operation_id="validateSession",
    response_model_exclude_none=True,
    responses={
        200: {"description": "Validation outcome"},
        422: {"description": "Invalid request body"},
    },
)
async def validate_session(request: SessionTokenRequest, app: AppDep) -> SessionValidation:
    return await app.validate_session(request.user_key, request.token)


@router.post(
    "/logout",
    summary="End session",
    description="Delete the user's session record, if any.",
    operation_id="logoutSession",
    responses={
        200: {"description": "Session ended"},
        422: {"description": "Invalid request body"},
    },
)
async def logout_session(request: SessionTokenRequest, app: AppDep) -> dict[str, str]:
    await app.logout_session(request.user_key, request.token)
    return {}
