from .quality import (
    ContentAnalysis,
    ContentQualityCheckResult,
    EnglishCheckResult,
    QualityCheckResult,
    QualityIssue,
    QualityStats,
    SpeculativeExpressionResult,
    ValidationResult,
)
from .tags import NormalizedTag, TagCategory

__all__ = [
    "ContentAnalysis",
    "ContentQualityCheckResult",
    "EnglishCheckResult",
    "QualityCheckResult",
    "QualityIssue",
    "QualityStats",
    "SpeculativeExpressionResult",
    "ValidationResult",
    "NormalizedTag",
    "TagCategory",
]
