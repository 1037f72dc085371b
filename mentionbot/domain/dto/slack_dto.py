from typing import Any, Dict, Optional, Union
from pydantic import BaseModel, Field

RETRY_HEADER = "X-Slack-Retry-Num"
NO_RETRY_HEADER = "X-Slack-No-Retry"


class SlackUser(BaseModel):
    """Slack 사용자 DTO"""
    id: str


class SlackEvent(BaseModel):
    """Slack 이벤트 DTO (event.type 으로 구분)"""
    type: Optional[str] = None
    token: Optional[str] = None
    challenge: Optional[str] = None
    text: Optional[str] = None
    channel: Optional[str] = None
    # app_mention 은 사용자 ID 문자열, team_join 은 사용자 객체
    user: Optional[Union[str, SlackUser]] = None
    bot_id: Optional[str] = None


class SlackEventPayload(BaseModel):
    """Slack 이벤트 요청 본문 DTO"""
    event: Optional[SlackEvent] = None
    user: Optional[SlackUser] = None
    token: Optional[str] = None
    challenge: Optional[str] = None
    type: Optional[str] = None

    @property
    def event_type(self) -> Optional[str]:
        """event.type, 없으면 최상위 type"""
        if self.event and self.event.type:
            return self.event.type
        return self.type


class InboundEnvelope(BaseModel):
    """웹훅 요청 (헤더 + 원본 본문)"""
    headers: Dict[str, str] = Field(default_factory=dict)
    body: str = ""

    def has_header(self, name: str) -> bool:
        """헤더 존재 여부 (대소문자 무시)"""
        name = name.lower()
        return any(key.lower() == name for key in self.headers)

    @property
    def is_retry(self) -> bool:
        return self.has_header(RETRY_HEADER)


class OutboundResponse(BaseModel):
    """웹훅 응답 DTO"""
    status_code: int = 200
    body: Any = Field(default_factory=dict)
    headers: Dict[str, str] = Field(default_factory=lambda: {NO_RETRY_HEADER: "1"})


class SlackEventResponse(BaseModel):
    """Slack 이벤트 처리 결과 DTO"""
    ok: bool = True
