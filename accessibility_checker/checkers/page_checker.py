"""
Document-level checks: page title and language.
"""

from ..checker_base import BaseChecker
from ..document import attr, text_content
from ..issue import IssueType, Severity


class TitleChecker(BaseChecker):
    """Checks for a non-empty <title>."""

    name = "page-title"

    def _run_checks(self):
        title = self.document.title
        if title is None or not text_content(title).strip():
            self._add_issue(IssueType.MISSING_PAGE_TITLE, Severity.HIGH, "<title></title>")


class LangChecker(BaseChecker):
    """Checks for a lang attribute on the root <html> element."""

    name = "lang"

    def _run_checks(self):
        root = self.document.root
        if root is None or not (attr(root, "lang") or "").strip():
            self._add_issue(IssueType.MISSING_LANG_ATTRIBUTE, Severity.MEDIUM, "<html>")
