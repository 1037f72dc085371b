from .mention_service import MentionService
from .event_dispatcher import EventDispatcher, to_response

__all__ = ["MentionService", "EventDispatcher", "to_response"]
