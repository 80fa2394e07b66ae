"""Startup validation and configuration checks."""

import logging
from pathlib import Path

from .config import EnrichmentConfig

logger = logging.getLogger(__name__)


def validate_config(config: EnrichmentConfig) -> None:
    """Validate config at startup and warn if .env or TOGETHER_API_KEY missing."""
    env_exists = Path(".env").exists()
    if config.api_key:
        logger.info("Together.ai API key configured (model %s)", config.model)
        return
    if not env_exists:
        logger.warning(".env file not found. AI explanations will fall back to default text.")
        logger.warning("Create .env from .env.example and set TOGETHER_API_KEY.")
    else:
        logger.warning("TOGETHER_API_KEY not set in .env. AI explanations will fall back to default text.")
