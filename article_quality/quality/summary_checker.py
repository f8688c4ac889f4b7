"""Orchestrating 0-100 scorer for a (summary, detailed summary) pair.

The rubric numbers live in ``config/scoring.yaml`` under ``summary_checker``.
This rubric is deliberately separate from the stricter structural validator
in ``summary_validator``; the two guard different call sites.
"""

from __future__ import annotations

import re

from article_quality.core.config import (
    get_max_regeneration_attempts,
    get_min_quality_score,
    is_quality_check_enabled,
)
from article_quality.core.scoring import get_scoring_value
from article_quality.schemas.quality import (
    ContentAnalysis,
    IssueType,
    QualityCheckResult,
    QualityIssue,
    Severity,
    SpeculativeExpressionResult,
)

from .text_utils import PERIOD, ends_with_period, split_bullets

SPECULATIVE_PATTERNS: tuple[str, ...] = (
    "と考えられます",
    "と考えられる",
    "と推測されます",
    "と推測される",
    "かもしれません",
    "かもしれない",
    "と思われます",
    "と思われる",
    "ようです",
    "でしょう",
    "だろう",
    "おそらく",
    "可能性が高い",
    "可能性があります",
    "予想されます",
    "予想される",
)

_LINE_BREAK_RE = re.compile(r"[\n\r]+")


def _cfg(path: str, default: int) -> int:
    return int(get_scoring_value(f"summary_checker.{path}", default))


class _Scorer:
    def __init__(self) -> None:
        self.issues: list[QualityIssue] = []
        self.penalty = 0

    def add(self, type_: IssueType, severity: Severity, message: str, *, penalty: int | None = None) -> None:
        self.issues.append(QualityIssue(type=type_, severity=severity, message=message))
        if penalty is None:
            penalty = _cfg(f"penalties.{severity}", {"critical": 30, "major": 15, "minor": 5}[severity])
        self.penalty += penalty

    def result(self, speculative: SpeculativeExpressionResult | None) -> QualityCheckResult:
        score = max(0, 100 - self.penalty)
        has_critical = any(issue.severity == "critical" for issue in self.issues)
        valid_score = _cfg("valid_score", 70)
        return QualityCheckResult(
            score=score,
            is_valid=score >= valid_score,
            issues=self.issues,
            requires_regeneration=score < valid_score or has_critical,
            speculative_expressions=speculative,
        )


def detect_speculative_expressions(text: str) -> SpeculativeExpressionResult:
    if not text:
        return SpeculativeExpressionResult()

    total = 0
    expressions: list[str] = []
    for pattern in SPECULATIVE_PATTERNS:
        hits = text.count(pattern)
        if hits:
            total += hits
            expressions.append(pattern)

    sentences = text.count(PERIOD) or 1
    return SpeculativeExpressionResult(count=total, ratio=round(total / sentences, 2), expressions=expressions)


def _check_summary_length(scorer: _Scorer, summary: str) -> None:
    length = len(summary)
    minimum = _cfg("summary_length.min", 50)
    acceptable = _cfg("summary_length.acceptable", 90)
    ideal_max = _cfg("summary_length.ideal_max", 180)
    maximum = _cfg("summary_length.max", 200)

    if length < minimum:
        scorer.add(
            "length",
            "major",
            f"一覧要約が短すぎる: {length}文字（最小{minimum}文字）",
            penalty=_cfg("penalties.summary_too_short", 31),
        )
    elif length < acceptable:
        scorer.add("length", "minor", f"一覧要約が短め: {length}文字（理想は160-{ideal_max}文字）")
    elif length > maximum:
        scorer.add("length", "major", f"一覧要約が長すぎる: {length}文字（最大{maximum}文字）")
    elif length > ideal_max:
        scorer.add("length", "minor", f"一覧要約がやや長い: {length}文字（理想は160-{ideal_max}文字）")


def _check_detailed_summary(scorer: _Scorer, detailed_summary: str) -> None:
    bullets, others = split_bullets(detailed_summary)
    total = sum(len(bullet) for bullet in bullets)

    minimum = _cfg("detailed_length.min", 300)
    acceptable = _cfg("detailed_length.acceptable", 400)
    ideal_max = _cfg("detailed_length.ideal_max", 650)
    maximum = _cfg("detailed_length.max", 800)
    if total < minimum:
        scorer.add("length", "major", f"詳細要約が短すぎる: {total}文字（最小{minimum}文字）")
    elif total < acceptable:
        scorer.add("length", "minor", f"詳細要約が短め: {total}文字（理想は{acceptable}-{ideal_max}文字）")
    elif total > maximum:
        scorer.add("length", "major", f"詳細要約が長すぎる: {total}文字（最大{maximum}文字）")
    elif total > ideal_max:
        scorer.add("length", "minor", f"詳細要約がやや長い: {total}文字（理想は{acceptable}-{ideal_max}文字）")

    required = _cfg("bullets.required", 5)
    if len(bullets) != required:
        scorer.add("format", "critical", f"詳細要約の箇条書きが{len(bullets)}個（必須{required}個）")

    if others:
        scorer.add("format", "major", f"詳細要約に箇条書き（・）以外の行が含まれている: {len(others)}行")

    min_chars = _cfg("bullets.min_chars", 100)
    max_chars = _cfg("bullets.max_chars", 130)
    for index, bullet in enumerate(bullets, start=1):
        if not min_chars <= len(bullet) <= max_chars:
            scorer.add(
                "format",
                "minor",
                f"{index}番目の箇条書きの文字数が不適切: {len(bullet)}文字（推奨{min_chars}-{max_chars}文字）",
            )

    for index, bullet in enumerate(bullets, start=1):
        if bullet.endswith(PERIOD):
            scorer.add("punctuation", "minor", f"{index}番目の箇条書きが句点で終わっている")


def _check_speculation(scorer: _Scorer, detailed_summary: str) -> SpeculativeExpressionResult:
    speculative = detect_speculative_expressions(detailed_summary)
    if speculative.count >= _cfg("speculative.major_count", 3):
        scorer.add(
            "speculative",
            "major",
            f"推測表現が多すぎる: {speculative.count}個（{'、'.join(speculative.expressions)}）",
        )
    elif speculative.count >= _cfg("speculative.minor_count", 2):
        scorer.add("speculative", "minor", f"推測表現が含まれている: {speculative.count}個")
    return speculative


def _check_thin_content(
    scorer: _Scorer, summary: str, detailed_summary: str, analysis: ContentAnalysis
) -> SpeculativeExpressionResult:
    length = len(summary)
    minimum = analysis.recommended_min_length
    maximum = analysis.recommended_max_length
    if length < minimum:
        scorer.add(
            "length",
            "major",
            f"一覧要約が短すぎる: {length}文字（薄いコンテンツの最小{minimum}文字）",
            penalty=_cfg("penalties.summary_too_short", 31),
        )
    elif length > maximum:
        scorer.add("length", "major", f"一覧要約が長すぎる: {length}文字（薄いコンテンツの最大{maximum}文字）")

    speculative = detect_speculative_expressions(f"{summary}\n{detailed_summary}")
    if speculative.count:
        scorer.add(
            "speculative",
            "critical",
            f"推測表現は厳禁: {'、'.join(speculative.expressions)}（元記事の情報が限られています）",
        )
    return speculative


def check_summary_quality(
    summary: str,
    detailed_summary: str,
    content_analysis: ContentAnalysis | None = None,
) -> QualityCheckResult:
    scorer = _Scorer()

    if content_analysis is not None and content_analysis.is_thin_content:
        speculative = _check_thin_content(scorer, summary, detailed_summary, content_analysis)
    else:
        _check_summary_length(scorer, summary)
        _check_detailed_summary(scorer, detailed_summary)
        speculative = _check_speculation(scorer, detailed_summary)

    if not ends_with_period(summary):
        scorer.add("punctuation", "minor", "一覧要約が句点で終わっていない")

    return scorer.result(speculative)


def _content_snippet(content: str, shortage: int) -> str:
    clean = _LINE_BREAK_RE.sub(" ", content).strip()
    if len(clean) <= shortage:
        return clean
    window = clean[: shortage + 20]
    last_period = window.rfind(PERIOD)
    if last_period > 0:
        return window[: last_period + 1]
    last_comma = window.rfind("、")
    if last_comma > 0 and last_comma > shortage / 2:
        return window[:last_comma]
    return window[:shortage]


def expand_summary_if_needed(summary: str, title: str = "", min_length: int = 150, content: str = "") -> str:
    """Pad a very short summary (< 50 chars) from the article body or title."""
    if len(summary) >= min_length or len(summary) >= 50:
        return summary

    expanded = summary.removesuffix(PERIOD)

    if title and len(expanded) < 30 and title[:10] not in expanded:
        expanded = f"{title}について、{expanded}" if expanded.strip() else f"{title}に関する内容"

    if len(expanded) < 50 and content:
        snippet = _content_snippet(content, 50 - len(expanded))
        if snippet:
            joiner = PERIOD if expanded and not expanded.endswith(PERIOD) else ""
            expanded = f"{expanded}{joiner}{snippet}"

    if not expanded.endswith(PERIOD):
        expanded += PERIOD

    if len(expanded) < 30 and title:
        fallback = f"{title}に関する記事"
        if content:
            fallback += PERIOD + _LINE_BREAK_RE.sub(" ", content[:50]).strip().removesuffix(PERIOD)
        return fallback + PERIOD

    return expanded


__all__ = [
    "SPECULATIVE_PATTERNS",
    "check_summary_quality",
    "detect_speculative_expressions",
    "expand_summary_if_needed",
    "get_max_regeneration_attempts",
    "get_min_quality_score",
    "is_quality_check_enabled",
]
