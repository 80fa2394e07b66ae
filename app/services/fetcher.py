"""Page fetcher: plain HTTP GET of the page under analysis."""

import logging
from typing import Optional

import requests

from accessibility_checker.errors import FetchError

from ..config import FetchConfig

logger = logging.getLogger(__name__)


class PageFetcher:
    """Downloads HTML with a browser User-Agent and a fixed timeout."""

    def __init__(self, config: FetchConfig, session: Optional[requests.Session] = None):
        self.config = config
        self.session = session or requests.Session()

    def fetch(self, url: str) -> str:
        """Return the response body. Raises FetchError on network errors, timeouts and non-2xx."""
        try:
            resp = self.session.get(
                url,
                headers={"User-Agent": self.config.user_agent},
                timeout=self.config.timeout,
            )
        except requests.Timeout as e:
            logger.error("Timed out fetching %s after %ss", url, self.config.timeout)
            raise FetchError(f"Request timed out after {self.config.timeout:g} seconds") from e
        except requests.RequestException as e:
            logger.error("Failed to fetch %s: %s", url, e)
            raise FetchError(str(e)) from e
        if not 200 <= resp.status_code < 300:
            logger.error("Fetching %s returned HTTP %s", url, resp.status_code)
            raise FetchError(f"HTTP {resp.status_code}: {resp.reason}", status_code=resp.status_code)
        return resp.text
