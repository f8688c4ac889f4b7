from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from .quality import (
    ContentAnalysis,
    ContentQualityCheckResult,
    QualityCheckResult,
    QualityIssue,
    QualityStats,
    ValidationResult,
)

ReviewAction = Literal["skip", "accept", "auto_fix", "regenerate", "manual_review"]


class ArticleSummaryInput(BaseModel):
    article_id: str | None = Field(default=None, max_length=200)
    title: str = Field(default="", max_length=1000)
    summary: str = Field(default="", max_length=5000)
    detailed_summary: str = Field(default="", max_length=20000)
    content: str = Field(default="", max_length=200000)
    tags: str | list[Any] | None = None
    content_analysis: ContentAnalysis | None = None
    regeneration_attempts: int = Field(default=0, ge=0)


class ArticleReview(BaseModel):
    article_id: str | None = None
    action: ReviewAction
    summary_check: QualityCheckResult | None = None
    content_check: ContentQualityCheckResult | None = None
    fixed_summary: str | None = None
    regeneration_prompt: str | None = None
    tags: list[str] = Field(default_factory=list)
    tag_categories: dict[str, list[str]] = Field(default_factory=dict)


class BatchReviewRequest(BaseModel):
    items: list[ArticleSummaryInput] = Field(default_factory=list, max_length=1000)


class BatchReview(BaseModel):
    reviews: list[ArticleReview] = Field(default_factory=list)
    stats: QualityStats = Field(default_factory=QualityStats)
    actions: dict[str, int] = Field(default_factory=dict)


class SummaryCheckRequest(BaseModel):
    summary: str = Field(default="", max_length=5000)
    detailed_summary: str = Field(default="", max_length=20000)
    content_analysis: ContentAnalysis | None = None


class SummaryCheckResponse(BaseModel):
    result: QualityCheckResult
    report: str


class ContentCheckRequest(BaseModel):
    summary: str = Field(default="", max_length=5000)
    detailed_summary: str | None = Field(default=None, max_length=20000)
    title: str | None = Field(default=None, max_length=1000)


class EnglishCheckRequest(BaseModel):
    text: str = Field(default="", max_length=5000)


class ValidateRequest(BaseModel):
    summary: str = Field(default="", max_length=5000)
    detailed_summary: str | None = Field(default=None, max_length=20000)
    article_type: str | None = Field(default=None, max_length=50)


class ValidateResponse(BaseModel):
    summary: ValidationResult
    detailed_summary: ValidationResult | None = None


class FixRequest(BaseModel):
    summary: str = Field(default="", max_length=5000)
    issues: list[QualityIssue] | None = None


class FixResponse(BaseModel):
    summary: str
    content_check: ContentQualityCheckResult


class PromptRequest(BaseModel):
    title: str = Field(default="", max_length=1000)
    content: str = Field(default="", max_length=200000)
    issues: list[QualityIssue] = Field(default_factory=list)


class PromptResponse(BaseModel):
    prompt: str


class StatsRequest(BaseModel):
    results: list[QualityCheckResult] = Field(default_factory=list, max_length=10000)
