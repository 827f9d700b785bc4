"""API routers package.

This package contains all FastAPI routers for the application.
"""

from .projects import router as projects_router

__all__ = [
    "projects_router",
]
