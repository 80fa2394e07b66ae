"""Analyze routes: rules-only check and full analysis with AI explanations."""

from deps import APIRouter, Depends

from ..dependencies import get_checker_service, get_enrichment_service, get_fetcher
from ..schemas import AnalyzeRequest, ErrorResponse, ReportOut
from ..services import CheckerService, EnrichmentService, PageFetcher, report_to_out
from ..utils import run_analysis

router = APIRouter()

_ERROR_RESPONSES = {400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


@router.post(
    "/analyze",
    response_model=ReportOut,
    response_model_exclude_none=True,
    responses=_ERROR_RESPONSES,
)
def analyze(
    req: AnalyzeRequest,
    fetcher: PageFetcher = Depends(get_fetcher),
    checker_svc: CheckerService = Depends(get_checker_service),
    enricher: EnrichmentService = Depends(get_enrichment_service),
) -> ReportOut:
    """Full analysis: rules + AI explanations and suggested fixes."""
    report = run_analysis(req.url, fetcher, checker_svc, enricher)
    return report_to_out(report)


@router.post(
    "/check",
    response_model=ReportOut,
    response_model_exclude_none=True,
    responses=_ERROR_RESPONSES,
)
def check(
    req: AnalyzeRequest,
    fetcher: PageFetcher = Depends(get_fetcher),
    checker_svc: CheckerService = Depends(get_checker_service),
) -> ReportOut:
    """Rules-only analysis. No AI."""
    report = run_analysis(req.url, fetcher, checker_svc)
    return report_to_out(report)
