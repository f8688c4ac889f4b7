import logging

import sentry_sdk
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from article_quality.api.v1.health import router as health_router
from article_quality.api.v1.quality import router as quality_router
from article_quality.api.v1.reviews import router as reviews_router
from article_quality.api.v1.tags import router as tags_router
from article_quality.core.config import settings
from article_quality.core.rate_limit import limiter

load_dotenv()
logging.basicConfig(level=settings.log_level, format="%(message)s")
if settings.sentry_dsn:
    sentry_sdk.init(dsn=settings.sentry_dsn)

app = FastAPI(title="Article Quality Engine", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allowed_origins),
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

app.include_router(health_router, prefix="/v1", tags=["Health"])
app.include_router(quality_router, prefix="/v1", tags=["Quality"])
app.include_router(reviews_router, prefix="/v1", tags=["Reviews"])
app.include_router(tags_router, prefix="/v1", tags=["Tags"])
