"""
Exceptions raised by the accessibility checker pipeline.
"""


class CheckerError(Exception):
    """Base class for accessibility checker errors."""


class InvalidURLError(CheckerError):
    """URL is missing or is not an absolute http(s) URL."""


class FetchError(CheckerError):
    """Page could not be fetched (network failure, timeout, non-2xx status)."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ParseError(CheckerError):
    """Fetched markup could not be turned into a document."""
