from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from samarthaa.app import App
from samarthaa.config import Config
from samarthaa.errors import UserError
from samarthaa.web.error_handlers import general_exception_handler, user_error_handler
from samarthaa.web.openapi import set_custom_openapi
from samarthaa.web.routers import (
    assistant_router,
    auth_router,
    documents_router,
    generate_router,
    health_router,
    session_router,
    speech_router,
)


def create_fastapi_app(app_instance: App, config: Config) -> FastAPI:
    """Create and configure FastAPI application."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        """FastAPI application lifespan management."""
        app.state.app = app_instance
        app.state.config = config
        async with app_instance.lifespan():
            yield

    app = FastAPI(
        title="SAMARTHAA Legal API",
        lifespan=lifespan,
        openapi_tags=[],
    )

    if config.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Single active session registry, unversioned paths used by the browser client
    app.include_router(session_router)

    app.include_router(health_router, prefix="/api")
    app.include_router(auth_router, prefix="/api")
    app.include_router(generate_router, prefix="/api")
    app.include_router(assistant_router, prefix="/api")
    app.include_router(documents_router, prefix="/api")
    app.include_router(speech_router, prefix="/api")

    app.add_exception_handler(UserError, user_error_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    set_custom_openapi(app)

    return app
