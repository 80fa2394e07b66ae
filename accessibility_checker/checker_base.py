"""
Base checker class for accessibility rules.
"""

from typing import List, Optional

from .document import Document
from .issue import Issue, IssueDetails, IssueType, Severity


class BaseChecker:
    """Base class for all checkers."""

    name = "base"

    def __init__(self):
        self.issues: List[Issue] = []
        self.document: Optional[Document] = None

    def check(self, document: Document) -> List[Issue]:
        """Run checks on the given document."""
        self.document = document
        self.issues = []
        self._run_checks()
        return self.issues

    def _run_checks(self):
        """Override in subclasses to implement specific checks."""
        pass

    def _add_issue(
        self,
        issue_type: IssueType,
        severity: Severity,
        element: str,
        details: Optional[IssueDetails] = None,
    ):
        """Add an issue to the list."""
        self.issues.append(Issue(issue_type, severity, element, details))
