import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from article_quality.tags import LocalTagAliases, get_default_alias_provider  # noqa: E402
from article_quality.tags.normalizer import (  # noqa: E402
    TAG_NORMALIZATION_MAP,
    is_valid_tag,
    is_valid_tag_array,
    normalize_tag,
    normalize_tag_input,
    normalize_tags,
    validate_and_normalize_tags,
)


class TagNormalizerTests(unittest.TestCase):
    def test_alias_lookup_is_case_insensitive_and_trimmed(self):
        self.assertEqual(normalize_tag("js"), "JavaScript")
        self.assertEqual(normalize_tag("  K8S "), "Kubernetes")
        self.assertEqual(normalize_tag("ml"), "機械学習")
        self.assertEqual(normalize_tag("spring"), "Spring Boot")
        self.assertEqual(TAG_NORMALIZATION_MAP["cicd"], "CI/CD")

    def test_unknown_tag_gets_first_letter_capitalised(self):
        self.assertEqual(normalize_tag("svelteKit"), "SvelteKit")
        self.assertEqual(normalize_tag("型推論"), "型推論")
        self.assertEqual(normalize_tag("   "), "")

    def test_generic_and_oversized_tags_are_invalid(self):
        self.assertFalse(is_valid_tag("プログラミング"))
        self.assertFalse(is_valid_tag("Programming"))
        self.assertFalse(is_valid_tag("x" * 31))
        self.assertFalse(is_valid_tag(123))
        self.assertFalse(is_valid_tag("  "))
        self.assertTrue(is_valid_tag("React"))

    def test_normalize_tags_dedupes_after_alias_resolution(self):
        self.assertEqual(normalize_tags(["js", "JavaScript", "react", "開発", 42]), ["JavaScript", "React"])

    def test_comma_separated_string_input(self):
        self.assertEqual(normalize_tag_input("js, react , JS,, docker"), ["JavaScript", "React", "Docker"])

    def test_mixed_list_input_is_coerced(self):
        tags = normalize_tag_input(["node", {"name": "docker"}, 2024, None, "x", "react,vue", {"id": 1}])
        self.assertEqual(tags, ["Node.js", "Docker", "2024", "React", "Vue.js"])

    def test_single_digit_tokens_survive(self):
        self.assertEqual(normalize_tag_input(["5", "a"]), ["5"])

    def test_empty_inputs(self):
        self.assertEqual(normalize_tag_input(None), [])
        self.assertEqual(normalize_tag_input(""), [])
        self.assertEqual(normalize_tag_input([]), [])

    def test_no_upper_bound_on_output(self):
        raw = [f"tag{i}" for i in range(12)]
        self.assertEqual(len(normalize_tag_input(raw)), 12)

    def test_is_valid_tag_array(self):
        self.assertTrue(is_valid_tag_array(["React", "Docker"]))
        self.assertTrue(is_valid_tag_array([]))
        self.assertFalse(is_valid_tag_array(["React", ""]))
        self.assertFalse(is_valid_tag_array(["React", 1]))
        self.assertFalse(is_valid_tag_array("React"))

    def test_filtered_out_input_is_logged(self):
        with self.assertLogs("article_quality.tags.normalizer", level="WARNING") as captured:
            result = validate_and_normalize_tags(["programming", "技術"], "qiita")
        self.assertEqual(result, [])
        self.assertIn("source=qiita", captured.output[0])

    def test_default_provider_is_cached(self):
        self.assertIs(get_default_alias_provider(), get_default_alias_provider())

    def test_local_aliases_can_load_custom_file(self):
        path = PROJECT_ROOT / "article_quality" / "tags" / "aliases.json"
        aliases = LocalTagAliases(path)
        self.assertEqual(aliases.canonical_form(" Postgres "), "PostgreSQL")
        self.assertIsNone(aliases.canonical_form("unknown"))


if __name__ == "__main__":
    unittest.main()
