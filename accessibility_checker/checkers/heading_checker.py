"""
Heading presence and hierarchy checks.
"""

from ..checker_base import BaseChecker
from ..document import heading_level, outer_html
from ..issue import HeadingDetails, IssueType, Severity


class HeadingChecker(BaseChecker):
    """Checks that the page has headings and that levels are not skipped."""

    name = "headings"

    def _run_checks(self):
        """Run heading checks."""
        headings = self.document.headings()
        if not headings:
            self._add_issue(IssueType.MISSING_HEADINGS, Severity.MEDIUM, "<body>")
            return
        self._check_hierarchy(headings)

    def _check_hierarchy(self, headings):
        """Flag the first heading that jumps more than one level below its predecessor.

        Only the first skip is reported; later ones usually stem from the same
        outline mistake.
        """
        levels = [heading_level(h) for h in headings]
        for i in range(1, len(levels)):
            if levels[i] - levels[i - 1] > 1:
                self._add_issue(
                    IssueType.IMPROPER_HEADING_STRUCTURE,
                    Severity.MEDIUM,
                    outer_html(headings[i]),
                    HeadingDetails(level=levels[i], previous_level=levels[i - 1]),
                )
                break
