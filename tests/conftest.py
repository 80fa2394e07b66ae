# tests/conftest.py
import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

# Ensure the repo root is in sys.path for imports
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from accessibility_checker.errors import FetchError
from app.config import EnrichmentConfig


BARE_PAGE = "<html><head></head><body></body></html>"

ACCESSIBLE_PAGE = """
<!DOCTYPE html>
<html lang="en">
<head><title>Example Store</title></head>
<body>
  <a href="#main">Skip to main content</a>
  <main id="main">
    <h1>Example Store</h1>
    <h2>Products</h2>
    <img src="/bike.png" alt="Red bicycle">
    <img src="/divider.png" alt="">
    <label for="email">Email</label>
    <input id="email" type="email" name="email">
    <a href="/contact">Contact us</a>
  </main>
</body>
</html>
"""

# One of every issue the engine can raise, in scrambled source order.
BROKEN_PAGE = """
<html>
<head></head>
<body>
  <a href="/home"></a>
  <p style="color: #999999; background-color: #ffffff">Faint text</p>
  <h1>Title</h1>
  <h3>Skipped</h3>
  <input type="text" name="q">
  <img src="/logo.png">
</body>
</html>
"""


class FakeFetcher:
    """Stands in for PageFetcher; returns canned markup or raises."""

    def __init__(self, html=BARE_PAGE, error=None):
        self.html = html
        self.error = error
        self.urls = []

    def fetch(self, url):
        self.urls.append(url)
        if self.error is not None:
            raise self.error
        return self.html


class FakeCompletions:
    def __init__(self, responder):
        self.responder = responder
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        prompt = kwargs["messages"][0]["content"]
        content = self.responder(prompt)
        return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


class FakeOpenAI:
    """Minimal OpenAI client: chat.completions.create(...) answers via ``responder(prompt)``."""

    def __init__(self, responder):
        self.completions = FakeCompletions(responder)
        self.chat = SimpleNamespace(completions=self.completions)


def default_responder(prompt):
    if prompt.startswith("Generate descriptive alt text"):
        return "  Red bicycle leaning on a wall  "
    if prompt.startswith("Generate a clear, descriptive label"):
        return "Search"
    if prompt.startswith("Generate descriptive link text"):
        return "Home page"
    return "Because assistive technology depends on it."


@pytest.fixture
def enrichment_config():
    return EnrichmentConfig(api_key="test-key-123456", concurrency=3, timeout=1.0)


@pytest.fixture
def fake_client():
    return FakeOpenAI(default_responder)


@pytest.fixture
def fake_fetch_error():
    return FetchError("HTTP 404: Not Found", status_code=404)
