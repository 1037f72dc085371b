import logging
from typing import Any, Callable, Dict, Optional
from pydantic import ValidationError

from ..config.settings import BotSettings
from ..dto.slack_dto import (
    InboundEnvelope,
    OutboundResponse,
    SlackEventPayload,
    SlackEventResponse
)
from ..exception.exceptions import (
    BotException,
    ParseException,
    UnrecognizedEventException,
    VerificationException
)
from .mention_service import MentionService

logger = logging.getLogger(__name__)


def to_response(error: Exception) -> OutboundResponse:
    """예외를 웹훅 응답으로 변환"""
    if isinstance(error, UnrecognizedEventException):
        return OutboundResponse(status_code=error.status_code, body=error.detail)
    if isinstance(error, BotException):
        return OutboundResponse(
            status_code=error.status_code,
            body={"error": type(error).__name__, "detail": error.detail}
        )
    return OutboundResponse(
        status_code=500,
        body={"error": type(error).__name__, "detail": str(error)}
    )


class EventDispatcher:
    """Slack 웹훅 요청을 이벤트 타입별로 분기 처리하는 Service"""

    def __init__(self, settings: BotSettings, mention_service: MentionService):
        self.settings = settings
        self.mention_service = mention_service
        self.handlers: Dict[str, Callable[[SlackEventPayload], Any]] = {
            "url_verification": self.verify,
            "app_mention": self._on_app_mention,
            "team_join": self._on_team_join,
        }

    def handle(self, envelope: InboundEnvelope) -> OutboundResponse:
        """요청 하나에 대해 항상 응답 하나를 반환 (예외를 밖으로 던지지 않음)"""
        try:
            # Slack 재전송 요청은 본문과 관계없이 무시 (중복 메시지 방지)
            if envelope.is_retry:
                logger.info("Slack retry delivery detected, skipping")
                return OutboundResponse()

            payload = self.parse(envelope.body)

            event_type = payload.event_type
            logger.info(f"Received event: {event_type}")
            handler = self.handlers.get(event_type)
            if handler is None:
                raise UnrecognizedEventException()

            return OutboundResponse(status_code=200, body=handler(payload))
        except UnrecognizedEventException as e:
            logger.warning(f"Unrecognized event: {e.detail}")
            return to_response(e)
        except Exception as e:
            logger.error(f"Error processing event: {str(e)}")
            return to_response(e)

    def parse(self, body: str) -> SlackEventPayload:
        """요청 본문(JSON) 파싱"""
        try:
            return SlackEventPayload.model_validate_json(body)
        except ValidationError as e:
            raise ParseException(detail=f"Malformed request body: {e.errors()[0]['msg']}")

    def verify(self, payload: SlackEventPayload) -> Optional[str]:
        """URL verification challenge 확인 후 challenge 값 반환"""
        event = payload.event
        token = payload.token if payload.token is not None else (event.token if event else None)
        challenge = payload.challenge if payload.challenge is not None else (event.challenge if event else None)

        if token is None or token != self.settings.verification_token:
            raise VerificationException()
        return challenge

    def _on_app_mention(self, payload: SlackEventPayload) -> Dict[str, Any]:
        if payload.event is None:
            raise ParseException(detail="app_mention without event")
        self.mention_service.handle_mention(payload.event)
        return SlackEventResponse().model_dump()

    def _on_team_join(self, payload: SlackEventPayload) -> Dict[str, Any]:
        user = payload.user
        if user is None and payload.event is not None:
            user = payload.event.user
        self.mention_service.on_new_member(user)
        return SlackEventResponse().model_dump()
