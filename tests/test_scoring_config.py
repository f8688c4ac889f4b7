import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from article_quality.core.scoring import (  # noqa: E402
    clear_scoring_cache,
    get_scoring_config,
    get_scoring_value,
)


class ScoringConfigTests(unittest.TestCase):
    def tearDown(self):
        clear_scoring_cache()

    def test_loader_and_value_lookup(self):
        config = get_scoring_config()
        self.assertIsInstance(config, dict)
        self.assertEqual(get_scoring_value("summary_checker.penalties.major"), 15)
        self.assertEqual(get_scoring_value("summary_checker.penalties.summary_too_short"), 31)
        self.assertEqual(get_scoring_value("content_checker.penalties.language_mix.minor"), 10)

    def test_missing_paths_return_default(self):
        self.assertEqual(get_scoring_value("summary_checker.nope", 7), 7)
        self.assertEqual(get_scoring_value("summary_checker.penalties.major.deeper", "x"), "x")
        self.assertIsNone(get_scoring_value(""))

    def test_config_is_cached(self):
        self.assertIs(get_scoring_config(), get_scoring_config())

    def test_override_path(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "scoring.yaml"
            path.write_text("summary_checker:\n  valid_score: 80\n", encoding="utf-8")
            with patch.dict(os.environ, {"SCORING_CONFIG_PATH": str(path)}):
                self.assertEqual(get_scoring_value("summary_checker.valid_score"), 80)

    def test_missing_file_raises(self):
        with patch.dict(os.environ, {"SCORING_CONFIG_PATH": "/nonexistent/scoring.yaml"}):
            with self.assertRaises(RuntimeError) as ctx:
                get_scoring_config()
        self.assertIn("/nonexistent/scoring.yaml", str(ctx.exception))

    def test_invalid_yaml_raises(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "scoring.yaml"
            path.write_text("summary_checker: [unclosed\n", encoding="utf-8")
            with patch.dict(os.environ, {"SCORING_CONFIG_PATH": str(path)}):
                with self.assertRaises(RuntimeError):
                    get_scoring_config()

    def test_non_mapping_raises(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "scoring.yaml"
            path.write_text("- just\n- a list\n", encoding="utf-8")
            with patch.dict(os.environ, {"SCORING_CONFIG_PATH": str(path)}):
                with self.assertRaises(RuntimeError):
                    get_scoring_config()


if __name__ == "__main__":
    unittest.main()
