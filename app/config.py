"""Configuration from environment."""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

DEFAULT_MODEL = "mistralai/Mixtral-8x7B-Instruct-v0.1"
DEFAULT_BASE_URL = "https://api.together.xyz/v1"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _get_int(name: str, default: int) -> int:
    try:
        return int(os.environ.get(name, str(default)))
    except ValueError:
        return default


def _get_float(name: str, default: float) -> float:
    try:
        return float(os.environ.get(name, str(default)))
    except ValueError:
        return default


def get_together_api_key() -> str:
    """Together.ai API key (required for AI explanations)."""
    return os.environ.get("TOGETHER_API_KEY", "").strip()


def get_together_model() -> str:
    """Together.ai model. Default: mistralai/Mixtral-8x7B-Instruct-v0.1."""
    return os.environ.get("TOGETHER_MODEL", DEFAULT_MODEL).strip() or DEFAULT_MODEL


def get_together_base_url() -> str:
    return os.environ.get("TOGETHER_BASE_URL", DEFAULT_BASE_URL).strip() or DEFAULT_BASE_URL


def get_enrich_concurrency() -> int:
    """Upper bound on simultaneous model calls per analysis."""
    return max(1, _get_int("ENRICH_CONCURRENCY", 4))


def get_enrich_timeout() -> float:
    """Seconds allowed for a single model call."""
    return _get_float("ENRICH_TIMEOUT", 15.0)


def get_fetch_timeout() -> float:
    """Seconds allowed for fetching the target page."""
    return _get_float("FETCH_TIMEOUT", 10.0)


def get_host() -> str:
    return os.environ.get("HOST", "0.0.0.0").strip()


def get_port() -> int:
    return _get_int("PORT", 3001)


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"


@dataclass(frozen=True)
class EnrichmentConfig:
    """Settings handed to the enrichment service by the app factory."""

    api_key: str
    model: str = DEFAULT_MODEL
    base_url: str = DEFAULT_BASE_URL
    concurrency: int = 4
    timeout: float = 15.0
    temperature: float = 0.7


@dataclass(frozen=True)
class FetchConfig:
    timeout: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT


def load_enrichment_config() -> EnrichmentConfig:
    return EnrichmentConfig(
        api_key=get_together_api_key(),
        model=get_together_model(),
        base_url=get_together_base_url(),
        concurrency=get_enrich_concurrency(),
        timeout=get_enrich_timeout(),
    )


def load_fetch_config() -> FetchConfig:
    return FetchConfig(timeout=get_fetch_timeout())


def configure_logging() -> None:
    logging.basicConfig(level=get_log_level(), format=LOG_FORMAT)
