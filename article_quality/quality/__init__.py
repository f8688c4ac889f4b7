from .content_checker import check_content_quality, fix_summary
from .language_mix import TECHNICAL_TERMS, check_english_mixing
from .prompt import create_enhanced_prompt
from .report import calculate_quality_stats, generate_quality_report
from .summary_checker import (
    check_summary_quality,
    detect_speculative_expressions,
    expand_summary_if_needed,
    get_max_regeneration_attempts,
    get_min_quality_score,
    is_quality_check_enabled,
)
from .summary_validator import (
    auto_fix_summary,
    cleanup_summary,
    validate_and_normalize_tags,
    validate_by_article_type,
    validate_detailed_summary,
    validate_summary,
)

__all__ = [
    "TECHNICAL_TERMS",
    "auto_fix_summary",
    "calculate_quality_stats",
    "check_content_quality",
    "check_english_mixing",
    "check_summary_quality",
    "cleanup_summary",
    "create_enhanced_prompt",
    "detect_speculative_expressions",
    "expand_summary_if_needed",
    "fix_summary",
    "generate_quality_report",
    "get_max_regeneration_attempts",
    "get_min_quality_score",
    "is_quality_check_enabled",
    "validate_and_normalize_tags",
    "validate_by_article_type",
    "validate_detailed_summary",
    "validate_summary",
]
