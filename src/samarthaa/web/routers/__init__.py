from samarthaa.web.routers.assistant import router as assistant_router
from samarthaa.web.routers.auth import router as auth_router
from samarthaa.web.routers.documents import router as documents_router
from samarthaa.web.routers.generate import router as generate_router
from samarthaa.web.routers.health import router as health_router
from samarthaa.web.routers.session import router as session_router
from samarthaa.web.routers.speech import router as speech_router

__all__ = [
    "assistant_router",
    "auth_router",
    "documents_router",
    "generate_router",
    "health_router",
    "session_router",
    "speech_router",
]
