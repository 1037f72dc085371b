from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check 응답 DTO"""
    status: str
    slack_configured: bool
    verification_configured: bool
