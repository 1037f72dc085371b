from .slack_dto import (
    SlackUser,
    SlackEvent,
    SlackEventPayload,
    SlackEventResponse,
    InboundEnvelope,
    OutboundResponse,
    RETRY_HEADER,
    NO_RETRY_HEADER
)
from .health_dto import HealthResponse

__all__ = [
    "SlackUser",
    "SlackEvent",
    "SlackEventPayload",
    "SlackEventResponse",
    "InboundEnvelope",
    "OutboundResponse",
    "RETRY_HEADER",
    "NO_RETRY_HEADER",
    "HealthResponse"
]
