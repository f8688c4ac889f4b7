from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from article_quality.core.config import settings  # noqa: E402
from article_quality.quality import generate_quality_report  # noqa: E402
from article_quality.schemas.review import ArticleReview, ArticleSummaryInput  # noqa: E402
from article_quality.services.review_service import review_batch  # noqa: E402

logger = logging.getLogger("check_summaries")


def _load_records(path: Path) -> tuple[list[ArticleSummaryInput], int]:
    items: list[ArticleSummaryInput] = []
    skipped = 0
    with path.open(encoding="utf-8") as handle:
        for line_no, line in enumerate(handle, start=1):
            if not line.strip():
                continue
            try:
                record = json.loads(line)
                item = ArticleSummaryInput.model_validate(record)
            except (json.JSONDecodeError, ValidationError) as exc:
                logger.warning("record_skipped line=%s error=%s", line_no, exc)
                skipped += 1
                continue
            if item.article_id is None:
                item.article_id = f"line-{line_no}"
            items.append(item)
    return items, skipped


def _is_failing(review: ArticleReview) -> bool:
    return review.action not in {"accept", "skip"}


def _format_line(review: ArticleReview) -> str:
    score = review.summary_check.score if review.summary_check else "-"
    content_score = review.content_check.score if review.content_check else "-"
    return f"{review.article_id}\t{review.action}\tscore={score}\tcontent={content_score}"


def main() -> None:
    parser = argparse.ArgumentParser(description="Score article summaries from a JSON Lines file.")
    parser.add_argument("--input", required=True, help="JSON Lines file with one article per line")
    parser.add_argument("--workers", type=int, default=None, help="Thread pool size")
    parser.add_argument("--report", action="store_true", help="Print the full report for each article")
    parser.add_argument("--only-failing", action="store_true", help="Only print articles that were not accepted")
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level, format="%(message)s")

    path = Path(args.input)
    if not path.exists():
        raise SystemExit(f"Input file not found: {path}")

    items, skipped = _load_records(path)
    batch = review_batch(items, max_workers=args.workers)

    for review in batch.reviews:
        if args.only_failing and not _is_failing(review):
            continue
        print(_format_line(review))
        if args.report and review.summary_check is not None:
            print(generate_quality_report(review.summary_check))
            print()

    stats = batch.stats
    print("---")
    print(f"total={len(batch.reviews)} skipped_records={skipped}")
    print(f"average={stats.average_score} valid={stats.valid_count} invalid={stats.invalid_count}")
    print(f"regeneration_rate={stats.regeneration_rate}%")
    print(
        f"issues critical={stats.critical_issues_count} "
        f"major={stats.major_issues_count} minor={stats.minor_issues_count}"
    )
    print("actions=" + ", ".join(f"{name}:{count}" for name, count in sorted(batch.actions.items())))


if __name__ == "__main__":
    main()
