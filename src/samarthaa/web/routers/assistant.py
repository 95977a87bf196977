from fastapi import APIRouter

from samarthaa.core.modules.llm.models import AssistantRequest, AssistantResponse
from samarthaa.web.deps import AppDep, AuthTokenDep
from samarthaa.web.openapi import ErrorResponse

router = APIRouter(tags=["assistant"])


@router.post(
    "/chat-assistant",
    summary="Ask the legal assistant",
    description="Conversational legal assistant. Up to the last 10 history turns are sent along with the message.",
    operation_id="askAssistant",
    responses={
        200: {"description": "Assistant reply"},
        400: {"model": ErrorResponse, "description": "Empty message"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def ask_assistant(request: AssistantRequest, app: AppDep, auth_token: AuthTokenDep) -> AssistantResponse:
    return await app.ask_assistant(auth_token, request)
