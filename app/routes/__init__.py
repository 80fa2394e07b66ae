"""Route handlers."""

from .analyze import router as analyze_router
from .health import router as health_router
from .report import router as report_router

__all__ = ["health_router", "analyze_router", "report_router"]
