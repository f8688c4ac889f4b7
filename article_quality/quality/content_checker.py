"""Heuristic content scoring for list summaries plus a best-effort repair routine."""

from __future__ import annotations

import re
from collections.abc import Iterable

from article_quality.core.scoring import get_scoring_value
from article_quality.schemas.quality import ContentQualityCheckResult, QualityIssue

from .language_mix import check_english_mixing
from .text_utils import PERIOD, ends_with_period

TRUNCATION_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"[、,]\s*$"),
    re.compile(r"(?:が|して|により|では)\s*$"),
    re.compile(r"(?:の|を|に|へ|で|と|から)\s*$"),
    re.compile(r"(?:など|等)\.{3}$"),
)

THIN_CONTENT_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"^.{0,20}(?:について|に関する|の)(?:記事|解説|紹介|説明)(?:です|します).*$"),
    re.compile(r"^.{0,20}を(?:解説|紹介|説明)(?:する|した|しています).*$"),
    re.compile(r"^この記事は.*(?:です|ます)$"),
)

_TECH_MARKER_RE = re.compile(r"API|データ|システム|機能|実装|開発|設計|最適化|パフォーマンス|セキュリティ")
_SPECIFICS_RE = re.compile(r"[0-9]+|[A-Z][a-z]+[A-Z]|[A-Za-z0-9_]+\.[A-Za-z0-9_]+")

_TRUNCATION_TAIL_RE = re.compile(r"(?:が|して|により|では|の|を|に|へ|で|と|から|について|、|,)\s*$")
_TRAILING_PUNCT_RE = re.compile(r"[、,．.]*$")
_REPEATED_PERIOD_RE = re.compile(r"。+$")

LANGUAGE_MIX_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    (" is ", "は"),
    (" are ", "は"),
    (" was ", "だった"),
    (" were ", "だった"),
    ("This ", "この"),
    ("That ", "その"),
    ("These ", "これら"),
    ("Those ", "それら"),
    (" available", "利用可能"),
    (" enable", "有効化"),
    (" disable", "無効化"),
)


def _penalty(name: str, default: int) -> int:
    return int(get_scoring_value(f"content_checker.penalties.{name}", default))


def is_truncated(summary: str) -> bool:
    return any(pattern.search(summary) for pattern in TRUNCATION_PATTERNS)


def is_thin_content(summary: str) -> bool:
    if any(pattern.search(summary) for pattern in THIN_CONTENT_PATTERNS):
        return True
    return not _TECH_MARKER_RE.search(summary) and not _SPECIFICS_RE.search(summary)


def check_content_quality(
    summary: str,
    detailed_summary: str | None = None,
    title: str | None = None,
) -> ContentQualityCheckResult:
    """Score a list summary from 100 down; the detailed summary and title are accepted for call-site symmetry."""
    issues: list[QualityIssue] = []
    score = 100
    length = len(summary)
    minimum = int(get_scoring_value("content_checker.summary_length.min", 80))
    maximum = int(get_scoring_value("content_checker.summary_length.max", 120))

    if length < minimum:
        issues.append(
            QualityIssue(type="length", severity="major", message=f"文字数が少なすぎる: {length}文字", suggestion="詳細要約から補完")
        )
        score -= _penalty("length", 20)
    elif length > maximum:
        issues.append(
            QualityIssue(
                type="length", severity="major", message=f"文字数が多すぎる: {length}文字", suggestion="重要部分を抽出して短縮"
            )
        )
        score -= _penalty("length", 20)

    if is_truncated(summary):
        issues.append(
            QualityIssue(
                type="truncation", severity="critical", message="文章が不自然な位置で途切れている", suggestion="完全な文章に修正"
            )
        )
        score -= _penalty("truncation", 30)

    if is_thin_content(summary):
        issues.append(
            QualityIssue(
                type="thin_content",
                severity="major",
                message="内容が薄い・具体性に欠ける",
                suggestion="技術的詳細や具体的な情報を追加",
            )
        )
        score -= _penalty("thin_content", 30)

    english = check_english_mixing(summary)
    if english.has_problematic_english and english.severity != "none":
        issues.append(
            QualityIssue(
                type="language_mix",
                severity=english.severity,
                message=f"不適切な英語表現が混入: {', '.join(english.problematic_phrases)}",
                suggestion="日本語に翻訳・修正",
                details=english,
            )
        )
        score -= _penalty(f"language_mix.{english.severity}", {"critical": 30, "major": 20, "minor": 10}[english.severity])

    if not ends_with_period(summary):
        issues.append(QualityIssue(type="format", severity="minor", message="句点で終わっていない", suggestion="句点を追加"))
        score -= _penalty("missing_period", 10)

    score = max(0, score)
    threshold = int(get_scoring_value("content_checker.regeneration_score", 70))
    has_critical = any(issue.severity == "critical" for issue in issues)
    requires_regeneration = score < threshold or has_critical
    reason = ", ".join(
        issue.message
        for issue in issues
        if issue.severity == "critical" or (issue.severity == "major" and score < threshold)
    )

    return ContentQualityCheckResult(
        is_valid=score >= threshold,
        issues=issues,
        score=score,
        requires_regeneration=requires_regeneration,
        regeneration_reason=reason if requires_regeneration else None,
    )


def _shorten(text: str) -> str:
    cut = int(get_scoring_value("content_checker.fix.cut_length", 117))
    boundary = int(get_scoring_value("content_checker.fix.min_sentence_boundary", 80))
    head = text[:cut]
    last_period = head.rfind(PERIOD)
    if last_period > boundary:
        return head[: last_period + 1]
    return head if head.endswith(PERIOD) else head + PERIOD


def fix_summary(summary: str, issues: Iterable[QualityIssue]) -> str:
    """Apply targeted repairs for the given issues; callers should re-check the result."""
    issue_list = list(issues)
    types = {issue.type for issue in issue_list}
    fixed = summary

    if "truncation" in types:
        fixed = _TRUNCATION_TAIL_RE.sub("", fixed)
        if not fixed.endswith(PERIOD):
            fixed += PERIOD

    if any(issue.type == "format" and "句点" in issue.message for issue in issue_list):
        if not fixed.endswith(PERIOD):
            fixed = _TRAILING_PUNCT_RE.sub("", fixed) + PERIOD

    max_length = int(get_scoring_value("content_checker.fix.max_length", 120))
    if "length" in types and len(fixed) > max_length:
        fixed = _shorten(fixed)

    if "language_mix" in types:
        for english, japanese in LANGUAGE_MIX_REPLACEMENTS:
            fixed = fixed.replace(english, japanese)

    return _REPEATED_PERIOD_RE.sub(PERIOD, fixed)
