from fastapi import APIRouter

from article_quality.core.config import settings

router = APIRouter()


@router.get("/health", summary="Health Check", description="Check the health status of the application.")
async def health_check():
    return {"status": "healthy", "quality_check_enabled": settings.quality.enabled}
