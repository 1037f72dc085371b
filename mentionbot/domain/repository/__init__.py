from .slack_repository import SlackRepository

__all__ = ["SlackRepository"]
