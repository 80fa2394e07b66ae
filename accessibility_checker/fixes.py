"""
Corrected-markup builders used when attaching fixes to issues.
"""

import hashlib
import html
import re
from typing import Callable

from bs4 import BeautifulSoup
from bs4.element import Tag

DEFAULT_ALT_TEXT = "Descriptive alt text"
DEFAULT_LABEL = "Input Label"
DEFAULT_LINK_TEXT = "Descriptive link text"

HEADING_SKELETON = "<h1>Main Page Title</h1>\n<h2>Section Heading</h2>\n<h3>Subsection Heading</h3>"
PAGE_TITLE_FIX = "<title>Descriptive Page Title - Website Name</title>"
LANG_FIX = '<html lang="en">'
SKIP_LINK_FIX = (
    '<a href="#main" class="skip-link">Skip to main content</a>\n'
    "<nav>...</nav>\n"
    '<main id="main">...</main>'
)
CONTRAST_FIX = ".text { color: #333333; background-color: #ffffff; }"


def _rewrite(markup: str, mutate: Callable[[Tag], None]) -> str:
    """Apply ``mutate`` to the first element in ``markup`` and serialize it back."""
    soup = BeautifulSoup(markup, "html.parser")
    tag = soup.find(True)
    if tag is None:
        return markup
    mutate(tag)
    return str(tag)


def with_alt_text(element: str, alt_text: str) -> str:
    def mutate(tag: Tag) -> None:
        tag["alt"] = alt_text
    return _rewrite(element, mutate)


def field_id_for(element: str, input_name: str) -> str:
    """Deterministic id for a field that has none."""
    slug = re.sub(r"[^a-z0-9]+", "-", input_name.lower()).strip("-")
    if slug and input_name != "unnamed":
        return f"{slug}-input"
    return "input-" + hashlib.sha1(element.encode("utf-8")).hexdigest()[:8]


def with_label(element: str, label: str, field_id: str) -> str:
    def mutate(tag: Tag) -> None:
        tag["id"] = field_id
    return f'<label for="{html.escape(field_id)}">{html.escape(label)}</label>\n{_rewrite(element, mutate)}'


def with_link_text(element: str, text: str) -> str:
    def mutate(tag: Tag) -> None:
        tag.clear()
        tag.append(text)
    return _rewrite(element, mutate)


def with_heading_level(element: str, level: int) -> str:
    def mutate(tag: Tag) -> None:
        tag.name = f"h{level}"
    return _rewrite(element, mutate)
