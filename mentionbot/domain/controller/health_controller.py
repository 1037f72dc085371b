from fastapi import APIRouter
from ..config.settings import get_settings
from ..dto.health_dto import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check 엔드포인트"""
    settings = get_settings()
    return HealthResponse(
        status="healthy",
        slack_configured=bool(settings.bot_token),
        verification_configured=bool(settings.verification_token)
    )
