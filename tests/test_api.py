import os
import sys
import unittest
from dataclasses import replace
from pathlib import Path
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

# Keep API tests deterministic: no rate limiting, checks on.
os.environ.setdefault("RATE_LIMIT_ENABLED", "0")
os.environ.setdefault("QUALITY_CHECK_ENABLED", "true")

from fastapi.testclient import TestClient  # noqa: E402

from article_quality.core import security  # noqa: E402
from article_quality.main import app  # noqa: E402

HEAD = "Dockerで開発環境を構築する手順"
SUMMARY = HEAD + "あ" * 151 + "。"
DETAILED = "\n".join("・" + HEAD + "あ" * 92 for _ in range(5))


class ApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def setUp(self):
        patcher = patch.object(security, "settings", replace(security.settings, api_key=None))
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "healthy")

    def test_api_key_is_enforced_when_configured(self):
        with patch.object(security, "settings", replace(security.settings, api_key="secret")):
            denied = self.client.post("/v1/tags/categorize", json={"tags": ["react"]})
            allowed = self.client.post(
                "/v1/tags/categorize", json={"tags": ["react"]}, headers={"X-API-Key": "secret"}
            )
        self.assertEqual(denied.status_code, 401)
        self.assertEqual(allowed.status_code, 200)

    def test_normalize_tags(self):
        response = self.client.post("/v1/tags/normalize", json={"tags": "js, react, gpt-4", "source_name": "zenn"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["tags"], ["JavaScript", "React", "Gpt-4"])
        self.assertEqual([rule["name"] for rule in body["rules"]], ["JavaScript", "React", "GPT"])
        self.assertEqual(body["inferred_category"], "language")

    def test_categorize_tags(self):
        response = self.client.post("/v1/tags/categorize", json={"tags": ["javascript", "unknown1", "react"]})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(
            body["categories"],
            {"languages": ["javascript"], "frameworks": ["react"], "uncategorized": ["unknown1"]},
        )
        self.assertEqual(body["statistics"], {"languages": 1, "frameworks": 1, "uncategorized": 1})

    def test_categorize_rejects_bad_payload(self):
        response = self.client.post("/v1/tags/categorize", json={"tags": "react"})
        self.assertEqual(response.status_code, 422)

    def test_summary_check_includes_report(self):
        response = self.client.post("/v1/quality/summary", json={"summary": SUMMARY, "detailed_summary": DETAILED})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["result"]["score"], 100)
        self.assertIn("品質スコア: 100/100", body["report"])

    def test_content_check(self):
        response = self.client.post("/v1/quality/content", json={"summary": "This 記事の"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["score"], 0)
        self.assertTrue(body["requires_regeneration"])

    def test_english_check(self):
        response = self.client.post("/v1/quality/english", json={"text": "This システムは便利。"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["severity"], "critical")

    def test_validate_summary_and_detailed(self):
        response = self.client.post("/v1/quality/validate", json={"summary": "", "detailed_summary": "・短い"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["summary"]["errors"], ["要約が空です"])
        self.assertFalse(body["detailed_summary"]["is_valid"])

    def test_validate_by_article_type(self):
        summary = HEAD + "あ" * 81 + "。"
        response = self.client.post("/v1/quality/validate", json={"summary": summary, "article_type": "release"})
        body = response.json()
        self.assertTrue(body["summary"]["is_valid"])
        self.assertEqual(len(body["summary"]["warnings"]), 1)
        self.assertIsNone(body["detailed_summary"])

    def test_fix_without_issues_runs_content_check_first(self):
        response = self.client.post("/v1/quality/fix", json={"summary": "This システムは available です"})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["summary"].startswith("このシステムは"))
        self.assertTrue(body["summary"].endswith("。"))

    def test_prompt(self):
        response = self.client.post("/v1/quality/prompt", json={"title": "React入門", "content": "本文", "issues": []})
        self.assertEqual(response.status_code, 200)
        self.assertIn("React入門", response.json()["prompt"])

    def test_stats(self):
        results = [
            {"score": 80, "is_valid": True, "issues": [], "requires_regeneration": False},
            {"score": 65, "is_valid": False, "issues": [], "requires_regeneration": True},
        ]
        response = self.client.post("/v1/quality/stats", json={"results": results})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["average_score"], 73)

    def test_review_and_batch(self):
        item = {"article_id": "a1", "title": "Docker入門", "summary": SUMMARY, "detailed_summary": DETAILED, "tags": ["docker"]}
        single = self.client.post("/v1/reviews", json=item)
        self.assertEqual(single.status_code, 200)
        self.assertIn(single.json()["action"], {"accept", "skip"})

        batch = self.client.post("/v1/reviews/batch", json={"items": [item, {**item, "article_id": "a2"}]})
        self.assertEqual(batch.status_code, 200)
        self.assertEqual([review["article_id"] for review in batch.json()["reviews"]], ["a1", "a2"])


if __name__ == "__main__":
    unittest.main()
