from fastapi import APIRouter

from samarthaa.core.modules.llm.models import GenerateRequest, GenerateResponse
from samarthaa.web.deps import AppDep, AuthTokenDep
from samarthaa.web.openapi import ErrorResponse

router = APIRouter(tags=["generate"])


@router.post(
    "/chat",
    summary="Generate legal document",
    description=(
        "Draft a contract (`contractType`, `contractDetails`), case research (`legalIssue`, `researchQuery`, "
        "optional `jurisdiction`) or legal opinion (`opinionTopic`, `opinionQuery`, optional `applicableLaws`)."
    ),
    operation_id="generateDocument",
    responses={
        200: {"description": "Generated document text and token usage"},
        400: {"model": ErrorResponse, "description": "Invalid mode or missing fields"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
    },
)
async def generate_document(request: GenerateRequest, app: AppDep, auth_token: AuthTokenDep) -> GenerateResponse:
    return await app.generate_document(auth_token, request)
