"""
Colour contrast checks against WCAG 1.4.3 thresholds.
"""

from ..checker_base import BaseChecker
from ..contrast import contrast_ratio, parse_color, parse_style, required_ratio, resolve_colors
from ..document import attr, outer_html, text_content
from ..issue import ContrastDetails, IssueType, Severity

TEXT_TAGS = (
    "p", "span", "div", "a", "button", "label", "li", "td", "th",
    "strong", "em", "b", "small", "h1", "h2", "h3", "h4", "h5", "h6",
)


class ContrastChecker(BaseChecker):
    """Checks inline-styled text for insufficient contrast.

    An element is evaluated only when it declares a colour or background
    itself and both colours resolve from inline styles on it or its ancestors.
    """

    name = "contrast"

    def _run_checks(self):
        """Run contrast checks."""
        for el in self.document.find_all(TEXT_TAGS):
            decls = parse_style(attr(el, "style"))
            if not ({"color", "background-color", "background"} & decls.keys()):
                continue
            if not text_content(el).strip():
                continue
            fg_value, bg_value = resolve_colors(el)
            fg, bg = parse_color(fg_value), parse_color(bg_value)
            if fg is None or bg is None:
                continue
            ratio = contrast_ratio(fg, bg)
            required = required_ratio(el)
            if ratio < required:
                self._add_issue(
                    IssueType.LOW_CONTRAST,
                    Severity.MEDIUM,
                    outer_html(el),
                    ContrastDetails(
                        ratio=round(ratio, 2),
                        required=required,
                        foreground=fg_value,
                        background=bg_value,
                    ),
                )
