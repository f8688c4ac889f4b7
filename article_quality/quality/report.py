from __future__ import annotations

import math
from collections.abc import Sequence

from article_quality.schemas.quality import ContentQualityCheckResult, QualityCheckResult, QualityStats

_SEVERITY_ICONS = {"critical": "🔴", "major": "🟡", "minor": "🔵"}


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_quality_stats(results: Sequence[QualityCheckResult]) -> QualityStats:
    if not results:
        return QualityStats()

    total = len(results)
    valid = sum(1 for result in results if result.is_valid)
    regenerate = sum(1 for result in results if result.requires_regeneration)
    severities = [issue.severity for result in results for issue in result.issues]

    return QualityStats(
        average_score=_round_half_up(sum(result.score for result in results) / total),
        valid_count=valid,
        invalid_count=total - valid,
        regeneration_rate=_round_half_up(regenerate / total * 100),
        minor_issues_count=severities.count("minor"),
        major_issues_count=severities.count("major"),
        critical_issues_count=severities.count("critical"),
    )


def generate_quality_report(result: QualityCheckResult | ContentQualityCheckResult) -> str:
    lines = [
        f"📊 品質スコア: {result.score}/100",
        f"判定: {'✅ 合格' if result.is_valid else '❌ 不合格'}",
        f"再生成必要: {'はい' if result.requires_regeneration else 'いいえ'}",
    ]
    if result.issues:
        lines.append("")
        lines.append("問題点:")
        for issue in result.issues:
            lines.append(f"  {_SEVERITY_ICONS[issue.severity]} [{issue.severity}] {issue.message}")
    return "\n".join(lines)
