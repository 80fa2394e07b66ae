"""Format analysis reports for download: reduced JSON projection and Markdown."""

from deps import List, datetime

from accessibility_checker.utils import extract_domain, truncate

from .schemas import DownloadIssue, DownloadReport, IssueOut, ReportOut

_SEVERITY_ORDER = ("critical", "high", "medium", "low")


def download_filename(analyzed_at: datetime, extension: str = "json") -> str:
    """e.g. accessibility-report-2024-05-01.json"""
    return f"accessibility-report-{analyzed_at.date().isoformat()}.{extension}"


def to_download(report: ReportOut) -> DownloadReport:
    """Project a full report down to the fields offered for download."""
    return DownloadReport(
        url=report.url,
        analyzed_at=report.analyzed_at,
        overall_score=report.overall_score,
        issue_count=report.issue_count,
        estimated_fix_time=report.estimated_fix_time,
        issues=[
            DownloadIssue(
                type=i.type,
                severity=i.severity,
                explanation=i.explanation,
                fixed_code=i.fixed_code,
            )
            for i in report.issues
        ],
    )


def _title_case(s: str) -> str:
    """e.g. missing-alt-text -> Missing Alt Text."""
    if not s:
        return s
    return s.replace("-", " ").strip().title()


def _issue_block_md(i: IssueOut) -> List[str]:
    """One issue as Markdown: type · severity, then element, explanation, fix."""
    lines = []
    lines.append(f"**{_title_case(i.type)} · {_title_case(i.severity)}**")
    lines.append("")
    if i.explanation:
        lines.append(i.explanation)
        lines.append("")
    lines.append("- **Element:**")
    lines.append("```html")
    lines.append(truncate(i.element))
    lines.append("```")
    lines.append("")
    if i.fixed_code:
        lines.append("- **Fix:**")
        lines.append("```html")
        lines.append(i.fixed_code)
        lines.append("```")
        lines.append("")
    return lines


def format_markdown_report(report: ReportOut) -> str:
    """Format a report as Markdown, issues grouped by severity."""
    counts = report.issue_count
    lines = []
    lines.append(f"# Accessibility Report: {extract_domain(report.url)}")
    lines.append("")
    lines.append(f"URL: {report.url}")
    lines.append(f"Analyzed: {report.analyzed_at.strftime('%Y-%m-%d %H:%M:%S')}")
    lines.append("")
    lines.append(f"**Score: {report.overall_score}/100** · Estimated fix time: {report.estimated_fix_time}")
    lines.append("")
    lines.append(
        f"**{report.total_issues}** issue(s) found ({counts.critical} critical, {counts.high} high, "
        f"{counts.medium} medium, {counts.low} low)."
    )
    lines.append("")

    lines.append("## Issues")
    lines.append("")
    if not report.issues:
        lines.append("No accessibility issues found.")
        lines.append("")
    else:
        for severity in _SEVERITY_ORDER:
            for i in report.issues:
                if i.severity == severity:
                    lines.extend(_issue_block_md(i))

    return "\n".join(lines)
