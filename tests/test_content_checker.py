import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from article_quality.quality import (  # noqa: E402
    check_content_quality,
    check_english_mixing,
    create_enhanced_prompt,
    fix_summary,
)
from article_quality.quality.content_checker import is_thin_content, is_truncated  # noqa: E402
from article_quality.schemas.quality import EnglishCheckResult, QualityIssue  # noqa: E402

HEAD = "Dockerで開発環境を構築"


def _summary(length: int) -> str:
    return HEAD + "あ" * (length - len(HEAD) - 1) + "。"


class CheckContentQualityTests(unittest.TestCase):
    def test_clean_summary_scores_full_marks(self):
        result = check_content_quality(_summary(100))
        self.assertEqual(result.score, 100)
        self.assertTrue(result.is_valid)
        self.assertEqual(result.issues, [])
        self.assertFalse(result.requires_regeneration)
        self.assertIsNone(result.regeneration_reason)

    def test_length_bounds(self):
        short = check_content_quality(_summary(60))
        self.assertEqual(short.score, 80)
        self.assertEqual(short.issues[0].message, "文字数が少なすぎる: 60文字")
        self.assertFalse(short.requires_regeneration)
        long = check_content_quality(_summary(150))
        self.assertEqual(long.issues[0].message, "文字数が多すぎる: 150文字")

    def test_truncation_is_critical(self):
        summary = HEAD + "あ" * 80 + "の設定を"
        result = check_content_quality(summary)
        self.assertEqual([issue.type for issue in result.issues], ["truncation", "format"])
        self.assertEqual(result.score, 60)
        self.assertTrue(result.requires_regeneration)
        self.assertEqual(result.regeneration_reason, "文章が不自然な位置で途切れている")

    def test_trailing_comma_is_truncation(self):
        self.assertTrue(is_truncated("初心者向けの内容となっており、"))
        self.assertTrue(is_truncated("主な機能など..."))
        self.assertFalse(is_truncated("APIを実装した。"))

    def test_thin_content(self):
        self.assertTrue(is_thin_content("Reactについての記事です。"))
        self.assertTrue(is_thin_content("とても参考になる内容が書かれている。"))
        self.assertFalse(is_thin_content("APIの実装方法をまとめた。"))
        self.assertFalse(is_thin_content("処理時間を30%短縮した。"))

    def test_language_mix_issue_carries_details(self):
        summary = HEAD + "あ" * 60 + "。この機能 is 便利。"
        result = check_content_quality(summary)
        mix = [issue for issue in result.issues if issue.type == "language_mix"]
        self.assertEqual(len(mix), 1)
        self.assertEqual(mix[0].severity, "critical")
        self.assertIsInstance(mix[0].details, EnglishCheckResult)
        self.assertTrue(result.requires_regeneration)

    def test_missing_period_is_minor(self):
        result = check_content_quality(HEAD + "あ" * 86)
        self.assertEqual(result.score, 90)
        self.assertEqual(result.issues[0].type, "format")
        self.assertIn("句点", result.issues[0].message)

    def test_score_is_clamped_at_zero(self):
        result = check_content_quality("This 記事の")
        self.assertEqual(result.score, 0)
        self.assertFalse(result.is_valid)
        self.assertIn("文章が不自然な位置で途切れている", result.regeneration_reason)

    def test_detailed_summary_and_title_do_not_change_score(self):
        plain = check_content_quality(_summary(100))
        with_context = check_content_quality(_summary(100), "・詳細", "タイトル")
        self.assertEqual(plain.score, with_context.score)


class FixSummaryTests(unittest.TestCase):
    def test_truncation_tail_is_removed(self):
        issues = [QualityIssue(type="truncation", severity="critical", message="途切れ")]
        self.assertEqual(fix_summary("Dockerの環境を構築して", issues), "Dockerの環境を構築。")

    def test_missing_period_is_added(self):
        issues = [QualityIssue(type="format", severity="minor", message="句点で終わっていない")]
        self.assertEqual(fix_summary("APIを実装した、", issues), "APIを実装した。")

    def test_long_summary_is_cut_at_sentence_boundary(self):
        summary = "あ" * 90 + "。" + "い" * 60 + "。"
        issues = [QualityIssue(type="length", severity="major", message="文字数が多すぎる: 152文字")]
        self.assertEqual(fix_summary(summary, issues), "あ" * 90 + "。")

    def test_long_summary_without_boundary_is_hard_cut(self):
        issues = [QualityIssue(type="length", severity="major", message="文字数が多すぎる")]
        fixed = fix_summary("あ" * 150 + "。", issues)
        self.assertEqual(fixed, "あ" * 117 + "。")

    def test_language_mix_substitutions(self):
        issues = [QualityIssue(type="language_mix", severity="major", message="英語混入")]
        fixed = fix_summary("This システムは available です", issues)
        self.assertIn("この", fixed)
        self.assertIn("利用可能", fixed)

    def test_repeated_periods_collapse(self):
        self.assertEqual(fix_summary("完了。。", []), "完了。")


class EnhancedPromptTests(unittest.TestCase):
    def test_basic_prompt(self):
        prompt = create_enhanced_prompt("React 19の新機能", "React 19の新機能について解説します...", [])
        self.assertIn("React 19の新機能", prompt)
        self.assertIn("技術記事を要約", prompt)
        self.assertIn("150-180文字", prompt)
        self.assertNotIn("特に注意すべき点", prompt)
        self.assertNotIn("None", prompt)

    def test_language_mix_details_from_mapping(self):
        issues = [
            QualityIssue(
                type="language_mix",
                severity="major",
                message="不適切な英語表現が混入",
                details={
                    "has_problematic_english": True,
                    "problematic_phrases": ["is available", "This system"],
                    "allowed_terms": ["API", "Docker"],
                    "severity": "major",
                },
            )
        ]
        prompt = create_enhanced_prompt("テスト記事", "テスト内容", issues)
        self.assertIn("特に注意すべき点", prompt)
        self.assertIn("技術用語はそのまま使用可: API, Docker", prompt)
        self.assertIn("日本語に修正: is available, This system", prompt)

    def test_language_mix_details_from_checker(self):
        details = check_english_mixing("This システムはDockerで動く。")
        issue = QualityIssue(type="language_mix", severity="critical", message="混入", details=details)
        self.assertIn("Docker", create_enhanced_prompt("t", "c", [issue]))

    def test_content_is_truncated(self):
        prompt = create_enhanced_prompt("t", "あ" * 5000, [])
        self.assertIn("あ" * 4000, prompt)
        self.assertNotIn("あ" * 4001, prompt)


if __name__ == "__main__":
    unittest.main()
