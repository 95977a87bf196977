from typing import Any

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel, Field

# Endpoints reachable without an access token
PUBLIC_ENDPOINTS = {
    ("GET", "/api/health"),
    ("POST", "/api/login"),
    ("POST", "/session/register"),
    ("POST", "/session/validate"),
    ("POST", "/session/logout"),
}


def set_custom_openapi(app: FastAPI) -> None:
    def custom_openapi() -> dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title="SAMARTHAA Legal API",
            version="0.1.0",
            summary="Legal drafting, research and opinion generation with single active session per user",
            routes=app.routes,
        )

        openapi_schema.setdefault("components", {})["securitySchemes"] = {
            "BearerAuth": {
                "type": "http",
                "scheme": "bearer",
                "bearerFormat": "JWT",
                "description": "Access token returned by /api/login",
            },
        }

        # Apply security globally, public endpoints opt out below
        openapi_schema["security"] = [{"BearerAuth": []}]

        for path, path_item in openapi_schema["paths"].items():
            for method, operation in path_item.items():
                if (method.upper(), path) in PUBLIC_ENDPOINTS:
                    operation["security"] = []
                else:
                    # Drop FastAPI's per-route HTTPBearer entry, the global BearerAuth covers it
                    operation.pop("security", None)

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi  # type: ignore[method-assign]


class ErrorResponse(BaseModel):
    """Standard error response format."""

    message: str = Field(..., description="Human-readable error message")
    type: str = Field(..., description="Machine-readable error type")
    detail: str | None = Field(None, description="Upstream error detail, when relayed")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"message": "Invalid credentials", "type": "authentication_error"},
                {"message": "contractType and contractDetails are required", "type": "validation_error"},
                {"message": "TTS service not configured on server", "type": "service_unavailable"},
            ]
        }
    }
