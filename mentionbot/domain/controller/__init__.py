from .slack_controller import router as slack_router
from .health_controller import router as health_router

__all__ = ["slack_router", "health_router"]
