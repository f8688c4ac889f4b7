"""Decides what a caller should do with a freshly generated summary.

The checkers stay pure; this layer turns their verdicts into one of
``skip``, ``accept``, ``auto_fix``, ``regenerate`` or ``manual_review``.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from article_quality.core.config import QualitySettings, load_quality_settings
from article_quality.quality import (
    calculate_quality_stats,
    check_content_quality,
    check_summary_quality,
    create_enhanced_prompt,
    fix_summary,
)
from article_quality.schemas.quality import ContentQualityCheckResult, QualityCheckResult, QualityIssue
from article_quality.schemas.review import ArticleReview, ArticleSummaryInput, BatchReview
from article_quality.tags.categorizer import categorize_multiple_tags
from article_quality.tags.normalizer import validate_and_normalize_tags

logger = logging.getLogger(__name__)

# Content-checker issue types that fix_summary can repair without the summarizer.
FIXABLE_ISSUE_TYPES = frozenset({"truncation", "format", "language_mix"})


def _fixable(issues: Sequence[QualityIssue]) -> list[QualityIssue]:
    return [issue for issue in issues if issue.type in FIXABLE_ISSUE_TYPES]


def _needs_regeneration(summary_check: QualityCheckResult, min_score: int) -> bool:
    return summary_check.requires_regeneration or summary_check.score < min_score


def _try_auto_fix(
    item: ArticleSummaryInput,
    content_check: ContentQualityCheckResult,
    min_score: int,
) -> tuple[str, QualityCheckResult, ContentQualityCheckResult] | None:
    fixable = _fixable(content_check.issues)
    if not fixable:
        return None
    fixed = fix_summary(item.summary, fixable)
    if fixed == item.summary:
        return None
    fixed_content = check_content_quality(fixed, item.detailed_summary, item.title)
    fixed_summary_check = check_summary_quality(fixed, item.detailed_summary, item.content_analysis)
    if fixed_content.requires_regeneration or _needs_regeneration(fixed_summary_check, min_score):
        return None
    return fixed, fixed_summary_check, fixed_content


def review_article(item: ArticleSummaryInput, settings: QualitySettings | None = None) -> ArticleReview:
    settings = settings or load_quality_settings()
    source = item.article_id or "review"
    tags = validate_and_normalize_tags(item.tags, source)[: settings.max_tags]
    review = ArticleReview(article_id=item.article_id, action="skip", tags=tags, tag_categories=categorize_multiple_tags(tags))

    if not settings.enabled:
        logger.info("summary_review_skipped article=%s reason=disabled", source)
        return review

    summary_check = check_summary_quality(item.summary, item.detailed_summary, item.content_analysis)
    content_check = check_content_quality(item.summary, item.detailed_summary, item.title)
    review.summary_check = summary_check
    review.content_check = content_check

    fixed = _try_auto_fix(item, content_check, settings.min_score)
    if fixed is not None:
        review.action = "auto_fix"
        review.fixed_summary, review.summary_check, review.content_check = fixed
    elif not _needs_regeneration(summary_check, settings.min_score) and not content_check.requires_regeneration:
        review.action = "accept"
    else:
        if item.regeneration_attempts >= settings.max_regeneration_attempts:
            review.action = "manual_review"
        else:
            review.action = "regenerate"
            review.regeneration_prompt = create_enhanced_prompt(
                item.title, item.content, [*summary_check.issues, *content_check.issues]
            )

    logger.info(
        "summary_review article=%s action=%s score=%s content_score=%s",
        source,
        review.action,
        review.summary_check.score if review.summary_check else None,
        review.content_check.score if review.content_check else None,
    )
    return review


def review_batch(
    items: Sequence[ArticleSummaryInput],
    settings: QualitySettings | None = None,
    max_workers: int | None = None,
) -> BatchReview:
    settings = settings or load_quality_settings()
    workers = max(1, max_workers or settings.batch_max_workers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        reviews = list(pool.map(lambda item: review_article(item, settings), items))

    checked = [review.summary_check for review in reviews if review.summary_check is not None]
    stats = calculate_quality_stats(checked)
    actions = dict(Counter(review.action for review in reviews))
    logger.info("batch_review_done count=%s average=%s actions=%s", len(reviews), stats.average_score, actions)
    return BatchReview(reviews=reviews, stats=stats, actions=actions)
