from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from article_quality.core.rate_limit import rate_limit
from article_quality.core.security import require_api_key
from article_quality.schemas.review import ArticleReview, ArticleSummaryInput, BatchReview, BatchReviewRequest
from article_quality.services.review_service import review_article, review_batch

router = APIRouter(dependencies=[Depends(require_api_key)])


@router.post("/reviews", response_model=ArticleReview)
@rate_limit()
async def create_review(request: Request, payload: ArticleSummaryInput):
    _ = request
    return review_article(payload)


@router.post("/reviews/batch", response_model=BatchReview)
@rate_limit()
async def create_batch_review(request: Request, payload: BatchReviewRequest):
    _ = request
    return review_batch(payload.items)
