"""HTTP API for the task manager."""

from .http_server import app
from .endpoints import router
from .user_endpoints import router as user_router

__all__ = ["app", "router", "user_router"]
