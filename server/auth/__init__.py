"""Session authentication and API key management routes."""

from server.auth.dependencies import get_service, require_session
from server.auth.routes import router as keys_router

__all__ = ["get_service", "keys_router", "require_session"]
