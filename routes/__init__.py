"""
API route modules.

Each module defines routes for one domain area.
"""

from routes.production import router as production_router
from routes.history import router as history_router
from routes.export import router as export_router

__all__ = [
    "production_router",
    "history_router",
    "export_router",
]
