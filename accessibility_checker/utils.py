"""
Utility functions for the accessibility checker.
"""

from typing import Optional
from urllib.parse import urlparse

from .errors import InvalidURLError


def is_valid_url(url: Optional[str]) -> bool:
    """True for absolute http(s) URLs with a host."""
    if not url or not url.strip():
        return False
    try:
        parsed = urlparse(url.strip())
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def validate_url(url: Optional[str]) -> str:
    """Return the trimmed URL or raise InvalidURLError."""
    if not url or not url.strip():
        raise InvalidURLError("URL is required")
    if not is_valid_url(url):
        raise InvalidURLError("Invalid URL format")
    return url.strip()


def extract_domain(url: str) -> str:
    """Hostname of the URL, or the input unchanged if it has none."""
    try:
        return urlparse(url).hostname or url
    except ValueError:
        return url


def truncate(text: str, limit: int = 100) -> str:
    """Shorten markup for display; the stored element is never truncated."""
    if len(text) <= limit:
        return text
    return text[:limit] + "..."
