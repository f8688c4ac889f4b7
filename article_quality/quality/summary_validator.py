"""Structural pass/fail validation for list summaries and bulleted detailed summaries.

Unlike the scoring checkers this module yields human-readable errors and
warnings only; there is no numeric score.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any

from article_quality.core.scoring import get_scoring_value
from article_quality.schemas.quality import ValidationResult

from .language_mix import TECHNICAL_TERM_SET
from .text_utils import PERIOD, collapse_blanks, ends_with_period, ensure_period, split_bullets

_LABEL_RE = re.compile(r"^(?:要約|概要|summary)\s*[:：]", re.IGNORECASE)

BOILERPLATE_PREFIXES: tuple[str, ...] = (
    "この記事では",
    "この記事は",
    "本記事では",
    "本記事は",
    "本稿では",
    "今回は",
    "記事では",
)

# Signatures left behind when generation stopped mid-sentence ("。詳", "CL。").
INCOMPLETE_ENDING_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"。[一-龯]$"),
    re.compile(r"[るいた]。[一-龯]$"),
    re.compile(r"詳。$"),
    re.compile(r"[A-Z]{2}。$"),
    re.compile(r"分析。$"),
)

# An allowlisted term before the final period ("API。") is not an acronym cut.
_ACRONYM_ENDING_RE = INCOMPLETE_ENDING_PATTERNS[3]
_FINAL_WORD_RE = re.compile(r"([A-Za-z][A-Za-z0-9.+#/]*)。$")

_TRAILING_FRAGMENT_RE = re.compile(r"。[一-龯]$")
_TRAILING_KANJI_FRAGMENT_RE = re.compile(r"詳。$")

ARTICLE_TYPE_KEYWORDS: dict[str, tuple[tuple[str, ...], str]] = {
    "implementation": (
        ("実装", "開発", "構築", "作成", "導入"),
        "実装記事の要約には開発・実装に関する内容を含めることを推奨します",
    ),
    "tutorial": (
        ("手順", "方法", "使い方", "ステップ", "チュートリアル", "入門", "ガイド", "解説"),
        "チュートリアル記事の要約には手順や方法に関する内容を含めることを推奨します",
    ),
    "problem-solving": (
        ("問題", "解決", "改善", "対処", "エラー", "原因"),
        "問題解決記事の要約には問題と解決策を含めることを推奨します",
    ),
    "tech-intro": (
        ("新機能", "特徴", "メリット", "利点", "紹介", "概要"),
        "技術紹介記事の要約には特徴や利点を含めることを推奨します",
    ),
    "release": (
        ("リリース", "バージョン", "新機能", "アップデート", "更新", "公開"),
        "リリース記事の要約にはリリース内容を含めることを推奨します",
    ),
}


def _summary_bounds() -> tuple[int, int]:
    minimum = int(get_scoring_value("summary_validator.summary_length.min", 90))
    maximum = int(get_scoring_value("summary_validator.summary_length.max", 130))
    return minimum, maximum


def find_label(text: str) -> str | None:
    match = _LABEL_RE.match(text.lstrip())
    return match.group(0) if match else None


def find_boilerplate_prefix(text: str) -> str | None:
    stripped = text.lstrip()
    for prefix in BOILERPLATE_PREFIXES:
        if stripped.startswith(prefix):
            return prefix
    return None


def _ends_with_known_term(text: str) -> bool:
    word = _FINAL_WORD_RE.search(text)
    return bool(word) and word.group(1) in TECHNICAL_TERM_SET


def find_incomplete_endings(text: str) -> list[str]:
    fragments: list[str] = []
    for pattern in INCOMPLETE_ENDING_PATTERNS:
        match = pattern.search(text)
        if match and pattern is _ACRONYM_ENDING_RE and _ends_with_known_term(text):
            continue
        if match:
            fragments.append(match.group(0))
    return fragments


def validate_summary(text: str) -> ValidationResult:
    if not text or not text.strip():
        return ValidationResult(is_valid=False, errors=["要約が空です"])

    errors: list[str] = []
    length = len(text)
    minimum, maximum = _summary_bounds()
    if length < minimum:
        errors.append(f"要約が短すぎます（{length}文字、最低{minimum}文字必要）")
    elif length > maximum:
        errors.append(f"要約が長すぎます（{length}文字、最大{maximum}文字まで）")

    if not ends_with_period(text.rstrip()):
        errors.append(f"要約が句点（{PERIOD}）で終わっていません")

    if "\n" in text or "\r" in text:
        errors.append("要約に改行が含まれています")

    label = find_label(text)
    if label:
        errors.append(f'不要なラベル "{label}" が含まれています')

    prefix = find_boilerplate_prefix(text)
    if prefix:
        errors.append(f'定型的な前置き文言 "{prefix}" で始まっています')

    for fragment in find_incomplete_endings(text.rstrip()):
        errors.append(f'要約が不完全な形で終わっています: "{fragment}"')

    return ValidationResult(is_valid=not errors, errors=errors)


def validate_detailed_summary(text: str) -> ValidationResult:
    if not text or not text.strip():
        return ValidationResult(is_valid=False, errors=["詳細要約が空です"])

    errors: list[str] = []
    warnings: list[str] = []
    bullets, others = split_bullets(text)

    if others:
        errors.append("詳細要約が箇条書き形式（・）になっていません")

    min_bullets = int(get_scoring_value("summary_validator.detailed.min_bullets", 3))
    recommended = int(get_scoring_value("summary_validator.detailed.recommended_bullets", 6))
    short_total = int(get_scoring_value("summary_validator.detailed.short_total_chars", 100))

    count = len(bullets)
    if count < min_bullets:
        errors.append(f"箇条書きが{count}項目しかありません（最低{min_bullets}項目必要）")
    elif count < recommended:
        warnings.append(f"箇条書きは{recommended}項目以上を推奨します（現在{count}項目）")

    total = sum(len(bullet) for bullet in bullets)
    if bullets and total < short_total:
        warnings.append(f"詳細要約が短い可能性があります（{total}文字）")

    return ValidationResult(is_valid=not errors, errors=errors, warnings=warnings)


def validate_by_article_type(text: str, article_type: str) -> ValidationResult:
    base = validate_summary(text)
    if not text or not text.strip():
        return base

    warnings = list(base.warnings)
    rule = ARTICLE_TYPE_KEYWORDS.get(article_type)
    if rule:
        keywords, warning = rule
        if not any(keyword in text for keyword in keywords):
            warnings.append(warning)
    return ValidationResult(is_valid=base.is_valid, errors=base.errors, warnings=warnings)


def cleanup_summary(text: str) -> str:
    cleaned = text.strip()
    while True:
        label = find_label(cleaned)
        if not label:
            break
        cleaned = cleaned.lstrip()[len(label):].strip()
    return collapse_blanks(cleaned).strip()


def auto_fix_summary(text: str) -> str:
    fixed = cleanup_summary(text)
    if not fixed:
        return ""

    prefix = find_boilerplate_prefix(fixed)
    if prefix:
        fixed = fixed[len(prefix):].lstrip("、, ").strip()

    fixed = _TRAILING_FRAGMENT_RE.sub(PERIOD, fixed)
    fixed = _TRAILING_KANJI_FRAGMENT_RE.sub("", fixed)
    return ensure_period(fixed)


def validate_and_normalize_tags(tags: Iterable[Any] | None) -> list[str]:
    """Trim, drop blanks and case-insensitive duplicates, keep at most five."""
    limit = int(get_scoring_value("summary_validator.max_tags", 5))
    seen: set[str] = set()
    result: list[str] = []
    for tag in tags or ():
        if not isinstance(tag, str):
            continue
        trimmed = tag.strip()
        if not trimmed or trimmed.lower() in seen:
            continue
        seen.add(trimmed.lower())
        result.append(trimmed)
        if len(result) >= limit:
            break
    return result
