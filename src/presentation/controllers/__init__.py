"""
Controllers Package - Presentation Layer

This package contains FastAPI controllers (routers) that handle
HTTP requests and responses. Controllers are responsible for
input validation, error handling, and mapping between API DTOs
and application layer use cases.
"""

from .actuations_controller import router as actuations_router
from .auth_controller import router as auth_router
from .devices_controller import router as devices_router
from .smart_home_controller import router as smart_home_router
from .system_controller import router as system_router

__all__ = [
    "actuations_router",
    "auth_router",
    "devices_router",
    "smart_home_router",
    "system_router",
]
