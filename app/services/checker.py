"""Checker service: wraps accessibility_checker and maps to API models."""

from deps import Callable, List, Union

from accessibility_checker.issue import (
    ContrastDetails,
    EnrichedIssue,
    FormFieldDetails,
    HeadingDetails,
    ImageDetails,
    Issue,
    LinkDetails,
    Report,
    Severity,
)
from accessibility_checker.main_checker import AccessibilityChecker

from ..schemas import IssueCount, IssueOut, ReportOut


def _issue_to_out(item: Union[Issue, EnrichedIssue]) -> IssueOut:
    if isinstance(item, EnrichedIssue):
        issue, enrichment = item.issue, item.enrichment
    else:
        issue, enrichment = item, None
    out = IssueOut(
        type=issue.type.value,
        severity=issue.severity.value,
        element=issue.element,
    )
    d = issue.details
    if isinstance(d, ImageDetails):
        out.src = d.src
    elif isinstance(d, LinkDetails):
        out.href = d.href
    elif isinstance(d, FormFieldDetails):
        out.input_type = d.input_type
        out.input_name = d.input_name
    elif isinstance(d, HeadingDetails):
        out.heading_level = d.level
        out.previous_heading_level = d.previous_level
    elif isinstance(d, ContrastDetails):
        out.contrast_ratio = d.ratio
        out.required_contrast_ratio = d.required
        out.foreground = d.foreground
        out.background = d.background
    if enrichment is not None:
        out.explanation = enrichment.explanation
        out.suggested_alt_text = enrichment.suggested_alt_text
        out.suggested_label = enrichment.suggested_label
        out.suggested_text = enrichment.suggested_text
        out.fixed_code = enrichment.fixed_code
    return out


def report_to_out(report: Report) -> ReportOut:
    counts = report.issue_count
    return ReportOut(
        url=report.url,
        analyzed_at=report.analyzed_at,
        overall_score=report.overall_score,
        issue_count=IssueCount(
            critical=counts[Severity.CRITICAL],
            high=counts[Severity.HIGH],
            medium=counts[Severity.MEDIUM],
            low=counts[Severity.LOW],
        ),
        issues=[_issue_to_out(i) for i in report.issues],
        estimated_fix_time=report.estimated_fix_time,
        total_issues=report.total_issues,
    )


class CheckerService:
    """Wraps AccessibilityChecker for use by the API."""

    def __init__(self, checker_factory: Callable[[], AccessibilityChecker] = AccessibilityChecker):
        self.checker_factory = checker_factory

    def analyze_html(self, html_text: str) -> List[Issue]:
        """Run rule-based checks on raw markup.

        Checkers hold per-run state, so every call gets its own instance.
        """
        return self.checker_factory().check_html(html_text)
