import pytest
from pydantic import ValidationError

from mentionbot.domain.config.settings import BotSettings, HelloPolicy, get_settings, get_slack_client


def test_get_settings_reads_environment(monkeypatch):
    monkeypatch.setenv("VERIFICATION_TOKEN", "secret")
    monkeypatch.setenv("BOT_TOKEN", "xoxb-1")
    monkeypatch.setenv("BOT_NAME", "racerbot")
    monkeypatch.setenv("HELLO_POLICY", "STOP")
    settings = get_settings()
    assert settings.verification_token == "secret"
    assert settings.bot_token == "xoxb-1"
    assert settings.bot_name == "racerbot"
    assert settings.hello_policy is HelloPolicy.STOP


def test_unknown_hello_policy_falls_back(monkeypatch):
    monkeypatch.setenv("HELLO_POLICY", "sometimes")
    assert get_settings().hello_policy is HelloPolicy.FALL_THROUGH


def test_settings_are_immutable():
    settings = BotSettings(bot_name="racerbot")
    with pytest.raises(ValidationError):
        settings.bot_name = "other"


def test_slack_client_requires_token():
    assert get_slack_client(BotSettings()) is None
    assert get_slack_client(BotSettings(bot_token="xoxb-1")) is not None
