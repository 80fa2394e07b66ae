"""
Score and fix-time aggregation for a list of issues.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Sequence

from .issue import EnrichedIssue, Report, Severity

SCORE_PENALTY: Dict[Severity, int] = {
    Severity.CRITICAL: 25,
    Severity.HIGH: 15,
    Severity.MEDIUM: 8,
    Severity.LOW: 3,
}

FIX_MINUTES: Dict[Severity, int] = {
    Severity.CRITICAL: 30,
    Severity.HIGH: 20,
    Severity.MEDIUM: 10,
    Severity.LOW: 5,
}


@dataclass(frozen=True)
class Aggregate:
    issue_count: Dict[Severity, int]
    overall_score: int
    estimated_fix_time: str
    total_issues: int


def count_by_severity(issues: Iterable) -> Dict[Severity, int]:
    """Severity -> count, with every severity present."""
    counts = {s: 0 for s in Severity}
    for issue in issues:
        counts[issue.severity] += 1
    return counts


def overall_score(counts: Dict[Severity, int]) -> int:
    score = 100 - sum(SCORE_PENALTY[s] * n for s, n in counts.items())
    return max(0, score)


def estimated_minutes(issues: Iterable) -> int:
    return sum(FIX_MINUTES[issue.severity] for issue in issues)


def format_fix_time(minutes: int) -> str:
    """'<n> minutes' below one hour, else whole hours rounded half-up ('1 hours' at 60)."""
    if minutes < 60:
        return f"{minutes} minutes"
    return f"{math.floor(minutes / 60 + 0.5)} hours"


def aggregate(issues: Sequence) -> Aggregate:
    """Works on plain Issues or EnrichedIssues; only severity is read."""
    counts = count_by_severity(issues)
    return Aggregate(
        issue_count=counts,
        overall_score=overall_score(counts),
        estimated_fix_time=format_fix_time(estimated_minutes(issues)),
        total_issues=len(issues),
    )


def build_report(
    url: str,
    issues: Sequence,
    analyzed_at: Optional[datetime] = None,
) -> Report:
    """Combine issues and their aggregate into an immutable Report."""
    enriched: List[EnrichedIssue] = [
        i if isinstance(i, EnrichedIssue) else EnrichedIssue(issue=i)
        for i in issues
    ]
    agg = aggregate(enriched)
    return Report(
        url=url,
        analyzed_at=analyzed_at or datetime.now(timezone.utc),
        overall_score=agg.overall_score,
        issue_count=agg.issue_count,
        issues=tuple(enriched),
        estimated_fix_time=agg.estimated_fix_time,
        total_issues=agg.total_issues,
    )
