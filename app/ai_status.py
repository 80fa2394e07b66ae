"""AI service status checking."""

from typing import Any, Dict

from .config import EnrichmentConfig


def get_ai_status(config: EnrichmentConfig) -> Dict[str, Any]:
    """Report whether enrichment can reach the model, judged from configuration alone."""
    status = {
        "available": False,
        "reason": "",
        "api_key_set": False,
        "model": config.model,
    }

    key = config.api_key
    if not key:
        status["reason"] = "TOGETHER_API_KEY not set in .env"
        return status

    status["api_key_set"] = True

    if len(key) < 10:
        status["reason"] = "TOGETHER_API_KEY appears invalid (too short)"
        return status

    if key.startswith("your_api_key"):
        status["reason"] = "TOGETHER_API_KEY not configured (still using placeholder)"
        return status

    status["available"] = True
    status["reason"] = "AI features available"
    return status
