"""Utility functions for the API: the analysis pipeline."""

from deps import Optional, logging

from accessibility_checker.issue import Report
from accessibility_checker.scoring import build_report
from accessibility_checker.utils import validate_url

from .services import CheckerService, EnrichmentService, PageFetcher

logger = logging.getLogger(__name__)


def run_analysis(
    url: Optional[str],
    fetcher: PageFetcher,
    checker_svc: CheckerService,
    enricher: Optional[EnrichmentService] = None,
) -> Report:
    """Fetch -> parse -> evaluate -> enrich -> aggregate. Skips enrichment when no enricher is given.

    Raises InvalidURLError, FetchError or ParseError; enrichment problems never propagate.
    """
    url = validate_url(url)
    logger.info("Analyzing website: %s", url)
    html_text = fetcher.fetch(url)
    issues = checker_svc.analyze_html(html_text)
    logger.info("Found %d issue(s) on %s", len(issues), url)
    if enricher is not None:
        return build_report(url, enricher.enrich_all(issues))
    return build_report(url, issues)
