import logging
from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from ..config.settings import get_settings, get_slack_client
from ..dto.slack_dto import InboundEnvelope, OutboundResponse
from ..repository.slack_repository import SlackRepository
from ..service.event_dispatcher import EventDispatcher
from ..service.mention_service import MentionService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/slack", tags=["slack"])


def get_event_dispatcher() -> EventDispatcher:
    """EventDispatcher 인스턴스 생성"""
    settings = get_settings()
    slack_client = get_slack_client(settings)
    if not slack_client:
        logger.warning("BOT_TOKEN is not set, only URL verification will succeed")
    slack_repo = SlackRepository(slack_client) if slack_client else None
    return EventDispatcher(settings, MentionService(slack_repo, settings))


def to_http_response(response: OutboundResponse) -> Response:
    """OutboundResponse 를 FastAPI 응답으로 변환"""
    if isinstance(response.body, str):
        return PlainTextResponse(
            content=response.body,
            status_code=response.status_code,
            headers=response.headers
        )
    return JSONResponse(
        content=response.body,
        status_code=response.status_code,
        headers=response.headers
    )


@router.post("/events")
async def slack_events(request: Request, dispatcher: EventDispatcher = Depends(get_event_dispatcher)):
    """Slack 이벤트 엔드포인트 (멘션, 신규 멤버, URL verification)"""
    raw_body = await request.body()
    envelope = InboundEnvelope(
        headers=dict(request.headers),
        body=raw_body.decode("utf-8", errors="replace")
    )
    response = await run_in_threadpool(dispatcher.handle, envelope)
    logger.info(f"Responding to Slack with status {response.status_code}")
    return to_http_response(response)
