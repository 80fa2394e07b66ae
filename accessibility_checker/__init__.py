"""
Accessibility rule engine and scoring.
"""

from .document import Document
from .errors import CheckerError, FetchError, InvalidURLError, ParseError
from .issue import (
    ContrastDetails,
    EnrichedIssue,
    Enrichment,
    FormFieldDetails,
    HeadingDetails,
    ImageDetails,
    Issue,
    IssueType,
    LinkDetails,
    Report,
    Severity,
)
from .main_checker import AccessibilityChecker
from .scoring import aggregate, build_report

__all__ = [
    "AccessibilityChecker",
    "CheckerError",
    "ContrastDetails",
    "Document",
    "EnrichedIssue",
    "Enrichment",
    "FetchError",
    "FormFieldDetails",
    "HeadingDetails",
    "ImageDetails",
    "InvalidURLError",
    "Issue",
    "IssueType",
    "LinkDetails",
    "ParseError",
    "Report",
    "Severity",
    "aggregate",
    "build_report",
]
