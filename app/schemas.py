"""Pydantic request/response models. JSON field names are camelCase."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


# --- Request ---


class AnalyzeRequest(BaseModel):
    """Request body for POST /analyze and POST /check."""

    url: Optional[str] = Field(default=None, description="Absolute http(s) URL of the page to analyze")


# --- Issue (response) ---


class IssueOut(BaseModel):
    """Single accessibility issue, with enrichment text when available."""

    type: str = Field(..., description="Issue type, e.g. missing-alt-text")
    severity: str = Field(..., description="critical, high, medium, or low")
    element: str = Field(..., description="Markup of the offending element")
    src: Optional[str] = None
    href: Optional[str] = None
    input_type: Optional[str] = Field(default=None, alias="inputType")
    input_name: Optional[str] = Field(default=None, alias="inputName")
    heading_level: Optional[int] = Field(default=None, alias="headingLevel")
    previous_heading_level: Optional[int] = Field(default=None, alias="previousHeadingLevel")
    contrast_ratio: Optional[float] = Field(default=None, alias="contrastRatio")
    required_contrast_ratio: Optional[float] = Field(default=None, alias="requiredContrastRatio")
    foreground: Optional[str] = None
    background: Optional[str] = None
    explanation: Optional[str] = None
    suggested_alt_text: Optional[str] = Field(default=None, alias="suggestedAltText")
    suggested_label: Optional[str] = Field(default=None, alias="suggestedLabel")
    suggested_text: Optional[str] = Field(default=None, alias="suggestedText")
    fixed_code: Optional[str] = Field(default=None, alias="fixedCode")

    model_config = {"populate_by_name": True}


class IssueCount(BaseModel):
    critical: int = 0
    high: int = 0
    medium: int = 0
    low: int = 0


# --- Responses ---


class ReportOut(BaseModel):
    """Response for POST /analyze and POST /check."""

    url: str
    analyzed_at: datetime = Field(..., alias="analyzedAt")
    overall_score: int = Field(..., alias="overallScore", ge=0, le=100)
    issue_count: IssueCount = Field(..., alias="issueCount")
    issues: List[IssueOut] = Field(default_factory=list)
    estimated_fix_time: str = Field(..., alias="estimatedFixTime")
    total_issues: int = Field(..., alias="totalIssues")

    model_config = {"populate_by_name": True}


class DownloadIssue(BaseModel):
    type: str
    severity: str
    explanation: Optional[str] = None
    fixed_code: Optional[str] = Field(default=None, alias="fixedCode")

    model_config = {"populate_by_name": True}


class DownloadReport(BaseModel):
    """Reduced projection of a report offered as a file download."""

    url: str
    analyzed_at: datetime = Field(..., alias="analyzedAt")
    overall_score: int = Field(..., alias="overallScore")
    issue_count: IssueCount = Field(..., alias="issueCount")
    estimated_fix_time: str = Field(..., alias="estimatedFixTime")
    issues: List[DownloadIssue] = Field(default_factory=list)

    model_config = {"populate_by_name": True}


class HealthResponse(BaseModel):
    status: str = "OK"
    timestamp: datetime


class AIStatusResponse(BaseModel):
    available: bool
    reason: str
    api_key_set: bool
    model: str


class ErrorResponse(BaseModel):
    """Error body for 400 and 500 responses."""

    error: str = Field(..., description="Error message")
    details: Optional[str] = Field(default=None, description="Underlying cause, when known")
