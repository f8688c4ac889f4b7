from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

Severity = Literal["minor", "major", "critical"]
EnglishSeverity = Literal["none", "minor", "major", "critical"]
IssueType = Literal[
    "length",
    "format",
    "punctuation",
    "truncation",
    "thin_content",
    "language_mix",
    "speculative",
]

SEVERITY_RANK: dict[str, int] = {"none": 0, "minor": 1, "major": 2, "critical": 3}


class QualityIssue(BaseModel):
    type: IssueType
    severity: Severity
    message: str
    suggestion: str | None = None
    details: Any | None = None


class SpeculativeExpressionResult(BaseModel):
    count: int = Field(default=0, ge=0)
    ratio: float = Field(default=0.0, ge=0.0)
    expressions: list[str] = Field(default_factory=list)


class ContentAnalysis(BaseModel):
    """Source-side facts that relax the rubric for thin articles (slides, link posts)."""

    is_thin_content: bool = False
    content_length: int = Field(default=0, ge=0)
    source_name: str = ""
    recommended_min_length: int = Field(default=60, ge=0)
    recommended_max_length: int = Field(default=100, ge=0)


class QualityCheckResult(BaseModel):
    score: int = Field(ge=0, le=100)
    is_valid: bool
    issues: list[QualityIssue] = Field(default_factory=list)
    requires_regeneration: bool
    speculative_expressions: SpeculativeExpressionResult | None = None


class ContentQualityCheckResult(BaseModel):
    is_valid: bool
    issues: list[QualityIssue] = Field(default_factory=list)
    score: int
    requires_regeneration: bool
    regeneration_reason: str | None = None


class ValidationResult(BaseModel):
    is_valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class EnglishCheckResult(BaseModel):
    has_problematic_english: bool = False
    problematic_phrases: list[str] = Field(default_factory=list)
    allowed_terms: list[str] = Field(default_factory=list)
    severity: EnglishSeverity = "none"


class QualityStats(BaseModel):
    average_score: int = 0
    valid_count: int = 0
    invalid_count: int = 0
    regeneration_rate: int = 0
    minor_issues_count: int = 0
    major_issues_count: int = 0
    critical_issues_count: int = 0
