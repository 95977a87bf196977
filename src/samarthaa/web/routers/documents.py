from fastapi import APIRouter
from fastapi.responses import HTMLResponse, Response
from pydantic import BaseModel, Field

from samarthaa.web.deps import AppDep, AuthTokenDep
from samarthaa.web.openapi import ErrorResponse

router = APIRouter(prefix="/download", tags=["documents"])

DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
DOWNLOAD_ERRORS = {
    400: {"model": ErrorResponse, "description": "No content provided"},
    401: {"model": ErrorResponse, "description": "Not authenticated"},
}


class DownloadRequest(BaseModel):
    content: str = Field("", description="Generated document text")
    locale: str = Field("en-IN", description="Document language, used for printable HTML")


def _attachment(filename: str) -> dict[str, str]:
    return {"Content-Disposition": f"attachment; filename={filename}"}


@router.post(
    "/pdf",
    summary="Download as PDF",
    operation_id="downloadPdf",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}, **DOWNLOAD_ERRORS},
)
async def download_pdf(request: DownloadRequest, app: AppDep, auth_token: AuthTokenDep) -> Response:
    content = await app.render_pdf(auth_token, request.content)
    return Response(content=content, media_type="application/pdf", headers=_attachment("legal-document.pdf"))


@router.post(
    "/word",
    summary="Download as Word document",
    operation_id="downloadWord",
    response_class=Response,
    responses={200: {"content": {DOCX_MEDIA_TYPE: {}}}, **DOWNLOAD_ERRORS},
)
async def download_word(request: DownloadRequest, app: AppDep, auth_token: AuthTokenDep) -> Response:
    content = await app.render_docx(auth_token, request.content)
    return Response(content=content, media_type=DOCX_MEDIA_TYPE, headers=_attachment("legal-document.docx"))


@router.post(
    "/print",
    summary="Printable HTML",
    description="Standalone HTML page that opens the browser print dialog.",
    operation_id="downloadPrintable",
    response_class=HTMLResponse,
    responses=DOWNLOAD_ERRORS,
)
async def download_printable(request: DownloadRequest, app: AppDep, auth_token: AuthTokenDep) -> HTMLResponse:
    return HTMLResponse(await app.render_print_html(auth_token, request.content, request.locale))
