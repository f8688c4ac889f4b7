from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request

from article_quality.core.rate_limit import rate_limit
from article_quality.core.security import require_api_key
from article_quality.quality import (
    calculate_quality_stats,
    check_content_quality,
    check_english_mixing,
    check_summary_quality,
    create_enhanced_prompt,
    fix_summary,
    generate_quality_report,
    validate_by_article_type,
    validate_detailed_summary,
    validate_summary,
)
from article_quality.schemas.quality import (
    ContentQualityCheckResult,
    EnglishCheckResult,
    QualityStats,
)
from article_quality.schemas.review import (
    ContentCheckRequest,
    EnglishCheckRequest,
    FixRequest,
    FixResponse,
    PromptRequest,
    PromptResponse,
    StatsRequest,
    SummaryCheckRequest,
    SummaryCheckResponse,
    ValidateRequest,
    ValidateResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(require_api_key)])


@router.post("/quality/summary", response_model=SummaryCheckResponse)
@rate_limit()
async def check_summary(request: Request, payload: SummaryCheckRequest):
    _ = request
    result = check_summary_quality(payload.summary, payload.detailed_summary, payload.content_analysis)
    return SummaryCheckResponse(result=result, report=generate_quality_report(result))


@router.post("/quality/content", response_model=ContentQualityCheckResult)
@rate_limit()
async def check_content(request: Request, payload: ContentCheckRequest):
    _ = request
    return check_content_quality(payload.summary, payload.detailed_summary, payload.title)


@router.post("/quality/english", response_model=EnglishCheckResult)
@rate_limit()
async def check_english(request: Request, payload: EnglishCheckRequest):
    _ = request
    return check_english_mixing(payload.text)


@router.post("/quality/validate", response_model=ValidateResponse)
@rate_limit()
async def validate(request: Request, payload: ValidateRequest):
    _ = request
    if payload.article_type:
        summary_result = validate_by_article_type(payload.summary, payload.article_type)
    else:
        summary_result = validate_summary(payload.summary)
    detailed_result = None
    if payload.detailed_summary is not None:
        detailed_result = validate_detailed_summary(payload.detailed_summary)
    return ValidateResponse(summary=summary_result, detailed_summary=detailed_result)


@router.post("/quality/fix", response_model=FixResponse)
@rate_limit()
async def fix(request: Request, payload: FixRequest):
    _ = request
    issues = payload.issues
    if issues is None:
        issues = check_content_quality(payload.summary).issues
    fixed = fix_summary(payload.summary, issues)
    logger.info("summary_fixed changed=%s issues=%s", fixed != payload.summary, len(issues))
    return FixResponse(summary=fixed, content_check=check_content_quality(fixed))


@router.post("/quality/prompt", response_model=PromptResponse)
@rate_limit()
async def prompt(request: Request, payload: PromptRequest):
    _ = request
    return PromptResponse(prompt=create_enhanced_prompt(payload.title, payload.content, payload.issues))


@router.post("/quality/stats", response_model=QualityStats)
@rate_limit()
async def stats(request: Request, payload: StatsRequest):
    _ = request
    return calculate_quality_stats(payload.results)
