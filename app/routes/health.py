"""Health and AI status routes."""

from deps import APIRouter, Depends, datetime, timezone

from ..ai_status import get_ai_status
from ..config import EnrichmentConfig
from ..dependencies import get_enrichment_config
from ..schemas import AIStatusResponse, HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    """Liveness check."""
    return HealthResponse(status="OK", timestamp=datetime.now(timezone.utc))


@router.get("/ai/status", response_model=AIStatusResponse)
def ai_status(config: EnrichmentConfig = Depends(get_enrichment_config)) -> AIStatusResponse:
    """Whether AI explanations are configured. Does not call the model."""
    return AIStatusResponse(**get_ai_status(config))
