"""Services for fetching, checking and AI enrichment."""

from .checker import CheckerService, report_to_out
from .ai import EnrichmentService
from .fetcher import PageFetcher

__all__ = ["CheckerService", "EnrichmentService", "PageFetcher", "report_to_out"]
