"""Service providers for route dependencies. Tests replace these via app.dependency_overrides."""

from functools import lru_cache

from .config import EnrichmentConfig, load_enrichment_config, load_fetch_config
from .services import CheckerService, EnrichmentService, PageFetcher


@lru_cache
def get_enrichment_config() -> EnrichmentConfig:
    return load_enrichment_config()


@lru_cache
def get_fetcher() -> PageFetcher:
    return PageFetcher(load_fetch_config())


@lru_cache
def get_checker_service() -> CheckerService:
    return CheckerService()


@lru_cache
def get_enrichment_service() -> EnrichmentService:
    return EnrichmentService(get_enrichment_config())
