"""
Issue and report data models for the accessibility checker.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple, Union


class Severity(Enum):
    """Issue severity levels. CRITICAL is reserved; no current rule assigns it."""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class IssueType(Enum):
    """Kinds of accessibility issue the rule engine can detect."""
    MISSING_ALT_TEXT = "missing-alt-text"
    MISSING_FORM_LABEL = "missing-form-label"
    EMPTY_LINK = "empty-link"
    MISSING_HEADINGS = "missing-headings"
    IMPROPER_HEADING_STRUCTURE = "improper-heading-structure"
    MISSING_PAGE_TITLE = "missing-page-title"
    MISSING_LANG_ATTRIBUTE = "missing-lang-attribute"
    LOW_CONTRAST = "low-contrast"
    MISSING_SKIP_LINK = "missing-skip-link"


@dataclass(frozen=True)
class ImageDetails:
    src: Optional[str]


@dataclass(frozen=True)
class LinkDetails:
    href: str


@dataclass(frozen=True)
class FormFieldDetails:
    input_type: str
    input_name: str
    input_id: Optional[str] = None


@dataclass(frozen=True)
class HeadingDetails:
    level: int
    previous_level: int


@dataclass(frozen=True)
class ContrastDetails:
    ratio: float
    required: float
    foreground: str
    background: str


IssueDetails = Union[ImageDetails, LinkDetails, FormFieldDetails, HeadingDetails, ContrastDetails]

# Payload variant each issue type carries; types not listed carry none.
DETAILS_BY_TYPE: Dict[IssueType, type] = {
    IssueType.MISSING_ALT_TEXT: ImageDetails,
    IssueType.MISSING_FORM_LABEL: FormFieldDetails,
    IssueType.EMPTY_LINK: LinkDetails,
    IssueType.IMPROPER_HEADING_STRUCTURE: HeadingDetails,
    IssueType.LOW_CONTRAST: ContrastDetails,
}


@dataclass(frozen=True)
class Issue:
    """One detected accessibility problem."""
    type: IssueType
    severity: Severity
    element: str
    details: Optional[IssueDetails] = None

    def __post_init__(self):
        expected = DETAILS_BY_TYPE.get(self.type)
        if expected is None:
            if self.details is not None:
                raise TypeError(f"{self.type.value} issues carry no details")
        elif not isinstance(self.details, expected):
            raise TypeError(
                f"{self.type.value} issues require {expected.__name__}, "
                f"got {type(self.details).__name__}"
            )


@dataclass(frozen=True)
class Enrichment:
    """Human-readable text attached to an issue after detection."""
    explanation: str
    fixed_code: str
    suggested_alt_text: Optional[str] = None
    suggested_label: Optional[str] = None
    suggested_text: Optional[str] = None


@dataclass(frozen=True)
class EnrichedIssue:
    issue: Issue
    enrichment: Optional[Enrichment] = None

    @property
    def severity(self) -> Severity:
        return self.issue.severity


@dataclass(frozen=True)
class Report:
    """Immutable result of one analysis."""
    url: str
    analyzed_at: datetime
    overall_score: int
    issue_count: Mapping[Severity, int]
    issues: Tuple[EnrichedIssue, ...]
    estimated_fix_time: str
    total_issues: int

    def __post_init__(self):
        object.__setattr__(self, "issue_count", MappingProxyType(dict(self.issue_count)))
        object.__setattr__(self, "issues", tuple(self.issues))
