import pytest
from slack_sdk.errors import SlackApiError

from mentionbot.domain.config.settings import BotSettings, HelloPolicy
from mentionbot.domain.repository.slack_repository import SlackRepository
from mentionbot.domain.service.event_dispatcher import EventDispatcher
from mentionbot.domain.service.mention_service import MentionService


class FakeSlackClient:
    """chat_postMessage 호출을 기록하는 가짜 WebClient"""

    def __init__(self, fail_on_call=None, error="channel_not_found"):
        self.calls = []
        self.fail_on_call = fail_on_call
        self.error = error

    def chat_postMessage(self, channel, text):
        self.calls.append((channel, text))
        if self.fail_on_call is not None and len(self.calls) == self.fail_on_call:
            raise SlackApiError("request failed", {"ok": False, "error": self.error})
        return {"ok": True, "channel": channel}


@pytest.fixture
def settings():
    return BotSettings(
        verification_token="abc",
        bot_token="xoxb-test",
        bot_name="racerbot",
    )


@pytest.fixture
def make_dispatcher(settings):
    def factory(client, **overrides):
        bot_settings = settings.model_copy(update=overrides)
        mention_service = MentionService(SlackRepository(client), bot_settings)
        return EventDispatcher(bot_settings, mention_service)
    return factory


@pytest.fixture
def slack_client():
    return FakeSlackClient()


@pytest.fixture
def failing_slack_client():
    return FakeSlackClient(fail_on_call=1)


@pytest.fixture
def dispatcher(make_dispatcher, slack_client):
    return make_dispatcher(slack_client)


@pytest.fixture
def stop_dispatcher(make_dispatcher, slack_client):
    return make_dispatcher(slack_client, hello_policy=HelloPolicy.STOP)
