from __future__ import annotations

from fastapi import APIRouter, Depends, Request

from article_quality.core.rate_limit import rate_limit
from article_quality.core.security import require_api_key
from article_quality.schemas.tags import (
    TagCategorizeRequest,
    TagCategorizeResponse,
    TagNormalizeRequest,
    TagNormalizeResponse,
)
from article_quality.tags.categorizer import categorize_multiple_tags, get_tag_statistics
from article_quality.tags.normalizer import validate_and_normalize_tags
from article_quality.tags.rules import TagRuleNormalizer

router = APIRouter(dependencies=[Depends(require_api_key)])


@router.post("/tags/normalize", response_model=TagNormalizeResponse)
@rate_limit()
async def normalize_tags(request: Request, payload: TagNormalizeRequest):
    _ = request
    tags = validate_and_normalize_tags(payload.tags, payload.source_name)
    rules = TagRuleNormalizer.normalize_tags(tags)
    return TagNormalizeResponse(
        tags=tags,
        rules=rules,
        inferred_category=TagRuleNormalizer.infer_category(rules),
    )


@router.post("/tags/categorize", response_model=TagCategorizeResponse)
@rate_limit()
async def categorize_tags(request: Request, payload: TagCategorizeRequest):
    _ = request
    return TagCategorizeResponse(
        categories=categorize_multiple_tags(payload.tags),
        statistics=get_tag_statistics(payload.tags),
    )
