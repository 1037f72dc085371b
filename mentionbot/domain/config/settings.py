import os
import logging
from enum import Enum
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict
from slack_sdk import WebClient
from typing import Optional

# 환경변수 로드
load_dotenv()

# 로깅 설정
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


class HelloPolicy(str, Enum):
    """hello 커맨드 응답 후 기본 응답까지 이어서 보낼지 여부"""
    FALL_THROUGH = "fall_through"
    STOP = "stop"


class BotSettings(BaseModel):
    """봇 설정 (초기화 이후 변경 불가)"""
    model_config = ConfigDict(frozen=True)

    verification_token: Optional[str] = None
    bot_token: Optional[str] = None
    bot_name: str = "bot"
    community_name: str = "DeepRacing Community"
    hello_policy: HelloPolicy = HelloPolicy.FALL_THROUGH


def get_settings() -> BotSettings:
    """환경변수에서 봇 설정 읽기"""
    policy = os.getenv("HELLO_POLICY", HelloPolicy.FALL_THROUGH.value).strip().lower()
    try:
        hello_policy = HelloPolicy(policy)
    except ValueError:
        logger.warning(f"Unknown HELLO_POLICY '{policy}', using fall_through")
        hello_policy = HelloPolicy.FALL_THROUGH

    return BotSettings(
        verification_token=os.getenv("VERIFICATION_TOKEN"),
        bot_token=os.getenv("BOT_TOKEN"),
        bot_name=os.getenv("BOT_NAME", "bot"),
        community_name=os.getenv("COMMUNITY_NAME", "DeepRacing Community"),
        hello_policy=hello_policy,
    )


def get_slack_client(settings: Optional[BotSettings] = None) -> Optional[WebClient]:
    """Slack 클라이언트 반환"""
    settings = settings or get_settings()
    if settings.bot_token:
        return WebClient(token=settings.bot_token)
    return None
