"""Routes package: exports every FastAPI router."""

from .attendances import router as attendances_router
from .children import router as children_router
from .health import router as health_router
from .observations import router as observations_router
from .reports import router as reports_router

__all__ = [
    "health_router", "children_router", "attendances_router",
    "observations_router", "reports_router",
]
