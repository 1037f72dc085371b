from .settings import (
    BotSettings,
    HelloPolicy,
    get_settings,
    get_slack_client
)

__all__ = [
    "BotSettings",
    "HelloPolicy",
    "get_settings",
    "get_slack_client"
]
