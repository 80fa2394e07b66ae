"""
Link checks: empty links and skip navigation.
"""

from ..checker_base import BaseChecker
from ..document import attr, outer_html, text_content
from ..issue import IssueType, LinkDetails, Severity

SKIP_LINK_TARGETS = ("#main", "#content")
SKIP_LINK_PREFIX = "#skip"


class EmptyLinkChecker(BaseChecker):
    """Checks that links have accessible text."""

    name = "empty-links"

    def _run_checks(self):
        for link in self.document.find_all("a", href=True):
            if text_content(link).strip():
                continue
            if (attr(link, "aria-label") or "").strip():
                continue
            self._add_issue(
                IssueType.EMPTY_LINK,
                Severity.HIGH,
                outer_html(link),
                LinkDetails(href=attr(link, "href") or ""),
            )


class SkipLinkChecker(BaseChecker):
    """Checks for a skip-navigation link to the main content."""

    name = "skip-link"

    def _run_checks(self):
        for link in self.document.find_all("a", href=True):
            href = attr(link, "href") or ""
            if href in SKIP_LINK_TARGETS or href.startswith(SKIP_LINK_PREFIX):
                return
        self._add_issue(IssueType.MISSING_SKIP_LINK, Severity.MEDIUM, "<body>")
