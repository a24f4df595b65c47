from fastapi import APIRouter

from resume_review.ai.config import load_ai_config

router = APIRouter()


@router.get("/health", summary="Health Check", description="Report service status and the configured AI provider.")
async def health_check():
    return {"status": "healthy", "ai_provider": load_ai_config().provider}
