from fastapi import APIRouter
from pydantic import BaseModel, Field

from samarthaa.core.modules.user.models import UserView
from samarthaa.web.deps import AppDep, AuthTokenDep
from samarthaa.web.openapi import ErrorResponse

router = APIRouter(tags=["auth"])


class LoginRequest(BaseModel):
    """Authentication request."""

    email: str = Field("", description="Account email")
    password: str = Field("", description="Account password")


class LoginResponse(BaseModel):
    """Authentication response."""

    token: str = Field(..., description="JWT access token for subsequent requests")


@router.post(
    "/login",
    summary="Authenticate user",
    description="Authenticate with email and password to receive a JWT access token.",
    operation_id="login",
    responses={
        200: {"description": "Successfully authenticated"},
        400: {"model": ErrorResponse, "description": "Email or password missing"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(login_data: LoginRequest, app: AppDep) -> LoginResponse:
    token = await app.login(login_data.email, login_data.password)
    return LoginResponse(token=token)


@router.get(
    "/profile",
    summary="Get current user",
    description="Get the account the access token was issued to.",
    operation_id="getCurrentUser",
    responses={
        200: {"description": "Current user"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def get_profile(app: AppDep, auth_token: AuthTokenDep) -> UserView:
    return await app.get_current_user(auth_token)
