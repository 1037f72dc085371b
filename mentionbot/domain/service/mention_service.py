import logging
from typing import Callable, Dict, List, Optional, Tuple, Union

from ..config.settings import BotSettings, HelloPolicy
from ..dto.slack_dto import SlackEvent, SlackUser
from ..exception.exceptions import ConfigurationException, ParseException
from ..repository.slack_repository import SlackRepository
from ..utils.command_parser import Command, to_command

logger = logging.getLogger(__name__)

HELP_MESSAGE = (
    "Here is what I can do:\n"
    "• `help` - show this message\n"
    "• `test` - check that I am working, I will also send you a DM\n"
    "• `hello` - say hello"
)
TEST_MESSAGE = "Very cool, thank you for testing me. Now sending you some fun info!"
TEST_DIRECT_MESSAGE = "You have been tested!"
HELLO_MESSAGE = "Hello there!"
DEFAULT_MESSAGE = (
    "Thank you for calling me, now run `@{bot_name} test` "
    "to test me and report the results"
)
WELCOME_MESSAGE = (
    "Welcome to the {community_name} Slack! This bot is still in development, "
    "if this worked for you, give the admins a heads up so they know everything "
    "is working properly!"
)

# (받는 곳 선택 함수, 메시지) 목록
ReplyPlan = List[Tuple[Callable[[SlackEvent], Optional[str]], str]]


def _channel(event: SlackEvent) -> Optional[str]:
    return event.channel


def _author(event: SlackEvent) -> Optional[str]:
    if isinstance(event.user, SlackUser):
        return event.user.id
    return event.user


class MentionService:
    """멘션/신규 멤버 이벤트에 대한 응답 메시지를 보내는 Service"""

    def __init__(self, slack_repository: Optional[SlackRepository], settings: BotSettings):
        self.slack_repository = slack_repository
        self.settings = settings
        self.reply_plans = self._build_reply_plans()

    def _build_reply_plans(self) -> Dict[Command, ReplyPlan]:
        """커맨드별 응답 순서 테이블 생성"""
        default: ReplyPlan = [
            (_channel, DEFAULT_MESSAGE.format(bot_name=self.settings.bot_name)),
        ]
        hello: ReplyPlan = [(_channel, HELLO_MESSAGE)]
        if self.settings.hello_policy is HelloPolicy.FALL_THROUGH:
            hello = hello + default

        return {
            Command.HELP: [(_channel, HELP_MESSAGE)],
            # 채널 응답 후 DM 순서 유지
            Command.TEST: [(_channel, TEST_MESSAGE), (_author, TEST_DIRECT_MESSAGE)],
            Command.HELLO: hello,
            Command.DEFAULT: default,
        }

    def handle_mention(self, event: SlackEvent) -> int:
        """멘션 메시지의 커맨드를 해석해 응답 전송, 보낸 메시지 수 반환"""
        if event.bot_id:
            logger.info(f"Ignoring mention from bot {event.bot_id}")
            return 0

        command = to_command(event.text)
        logger.info(f"Handling mention: command={command.value}, channel={event.channel}")

        sent = 0
        for destination, text in self.reply_plans[command]:
            target = destination(event)
            if not target:
                raise ParseException(detail=f"Missing destination for '{command.value}' reply")
            self._post(target, text)
            sent += 1
        return sent

    def on_new_member(self, user: Optional[Union[SlackUser, str]]):
        """신규 멤버에게 환영 DM 전송"""
        user_id = user.id if isinstance(user, SlackUser) else user
        if not user_id:
            raise ParseException(detail="team_join event without user id")

        logger.info(f"New team member: {user_id}")
        return self._post(
            user_id,
            WELCOME_MESSAGE.format(community_name=self.settings.community_name)
        )

    def _post(self, channel_id: str, text: str):
        # BOT_TOKEN 미설정 시 전송 시점에 실패
        if self.slack_repository is None:
            raise ConfigurationException(detail="Slack 클라이언트가 초기화되지 않았습니다. BOT_TOKEN을 확인해주세요.")
        return self.slack_repository.post_message(channel_id, text)
