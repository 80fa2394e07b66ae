"""
Image text-alternative checks.
"""

from ..checker_base import BaseChecker
from ..document import attr, outer_html
from ..issue import ImageDetails, IssueType, Severity


class ImageChecker(BaseChecker):
    """Checks that images carry an alt attribute."""

    name = "images"

    def _run_checks(self):
        """Run image checks."""
        self._check_missing_alt()

    def _check_missing_alt(self):
        """Flag <img> without any alt attribute. alt="" marks a decorative image and passes."""
        for img in self.document.find_all("img"):
            if img.has_attr("alt"):
                continue
            self._add_issue(
                IssueType.MISSING_ALT_TEXT,
                Severity.HIGH,
                outer_html(img),
                ImageDetails(src=attr(img, "src")),
            )
