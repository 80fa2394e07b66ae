"""Report download route."""

from deps import APIRouter, Query, Response, json

from ..report_formatter import download_filename, format_markdown_report, to_download
from ..schemas import ReportOut

router = APIRouter()


@router.post("/report/download")
def report_download(
    report: ReportOut,
    format: str = Query("json", pattern="^(json|markdown)$"),
) -> Response:
    """Return a report as an attachment: reduced JSON projection, or Markdown."""
    if format == "markdown":
        return Response(
            content=format_markdown_report(report),
            media_type="text/markdown",
            headers={
                "Content-Disposition": f'attachment; filename="{download_filename(report.analyzed_at, "md")}"'
            },
        )
    payload = to_download(report).model_dump(mode="json", by_alias=True)
    return Response(
        content=json.dumps(payload, indent=2),
        media_type="application/json",
        headers={
            "Content-Disposition": f'attachment; filename="{download_filename(report.analyzed_at)}"'
        },
    )
