from __future__ import annotations

from collections.abc import Iterable

from article_quality.core.scoring import get_scoring_value
from article_quality.schemas.quality import EnglishCheckResult, QualityIssue

_BASE_INSTRUCTIONS = """以下の技術記事を要約してください。

重要な指示：
1. 一覧要約は150-180文字の日本語で記述
2. 文章は必ず「。」で終える
3. 技術用語（API、Docker、JavaScript等）以外はすべて日本語で記述
4. 英語の文法構造を混入させない（例：This システム、API is available）
5. 具体的な技術名、機能名、数値を含める
6. 「記事です」「解説します」等の説明的表現を避ける"""


def _language_mix_details(issues: Iterable[QualityIssue]) -> EnglishCheckResult | None:
    for issue in issues:
        if issue.type != "language_mix" or issue.details is None:
            continue
        if isinstance(issue.details, EnglishCheckResult):
            return issue.details
        if isinstance(issue.details, dict):
            return EnglishCheckResult.model_validate(issue.details)
    return None


def _language_mix_instructions(details: EnglishCheckResult) -> str:
    allowed = ", ".join(details.allowed_terms) or "なし"
    phrases = ", ".join(details.problematic_phrases) or "なし"
    return (
        "特に注意すべき点：\n"
        f"- 以下の技術用語はそのまま使用可: {allowed}\n"
        f"- 以下の表現は日本語に修正: {phrases}\n"
        "- 英語の文法構造（This is, The system will等）を使用しない\n"
        "- 製品名、サービス名、技術用語以外はすべて日本語で記述"
    )


def create_enhanced_prompt(title: str, content: str, issues: Iterable[QualityIssue]) -> str:
    """Build the regeneration prompt handed to the external summarizer."""
    max_chars = int(get_scoring_value("content_checker.prompt.max_content_chars", 4000))
    sections = [_BASE_INSTRUCTIONS]
    details = _language_mix_details(issues)
    if details is not None:
        sections.append(_language_mix_instructions(details))
    sections.append(f"タイトル: {title or ''}\n内容: {(content or '')[:max_chars]}")
    sections.append("要約:")
    return "\n\n".join(sections)
