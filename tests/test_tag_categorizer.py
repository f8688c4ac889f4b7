import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from article_quality.schemas.tags import TagCategory  # noqa: E402
from article_quality.tags.categorizer import (  # noqa: E402
    categorize_multiple_tags,
    categorize_tag,
    get_tag_statistics,
)


class TagCategorizerTests(unittest.TestCase):
    def test_basic_categories(self):
        self.assertEqual(categorize_tag("javascript"), TagCategory.LANGUAGES)
        self.assertEqual(categorize_tag("  javascript  "), TagCategory.LANGUAGES)
        self.assertEqual(categorize_tag("React"), TagCategory.FRAMEWORKS)
        self.assertEqual(categorize_tag("postgresql"), TagCategory.DATABASES)
        self.assertEqual(categorize_tag("AWS"), TagCategory.PLATFORMS)
        self.assertEqual(categorize_tag("flutter"), TagCategory.MOBILE)

    def test_japanese_synonyms(self):
        self.assertEqual(categorize_tag("セキュリティ"), TagCategory.CONCEPTS)
        self.assertEqual(categorize_tag("モバイル"), TagCategory.MOBILE)
        self.assertEqual(categorize_tag("機械学習"), TagCategory.AI_ML)
        self.assertEqual(TagCategory.AI_ML.value, "ai-ml")

    def test_priority_order_resolves_overlaps(self):
        self.assertEqual(categorize_tag("api"), TagCategory.FRAMEWORKS)
        self.assertEqual(categorize_tag("redis"), TagCategory.TOOLS)
        self.assertEqual(categorize_tag("elasticsearch"), TagCategory.TOOLS)
        self.assertEqual(categorize_tag("kubernetes"), TagCategory.TOOLS)
        self.assertEqual(categorize_tag("swift"), TagCategory.LANGUAGES)

    def test_separator_insensitive_match(self):
        self.assertEqual(categorize_tag("Next-JS"), TagCategory.FRAMEWORKS)

    def test_unknown_and_empty_tags(self):
        self.assertIsNone(categorize_tag("unknown-tag"))
        self.assertIsNone(categorize_tag(""))
        self.assertIsNone(categorize_tag("nodejs"))

    def test_categorize_multiple_tags_omits_empty_buckets(self):
        self.assertEqual(
            categorize_multiple_tags(["javascript", "unknown1", "react"]),
            {"languages": ["javascript"], "frameworks": ["react"], "uncategorized": ["unknown1"]},
        )
        self.assertEqual(categorize_multiple_tags([]), {})

    def test_categorize_multiple_tags_keeps_spelling_and_duplicates(self):
        self.assertEqual(categorize_multiple_tags(["Python", "python"]), {"languages": ["Python", "python"]})

    def test_statistics_count_each_bucket(self):
        self.assertEqual(
            get_tag_statistics(["python", "go", "docker", "mystery"]),
            {"languages": 2, "tools": 1, "uncategorized": 1},
        )


if __name__ == "__main__":
    unittest.main()
