from enum import Enum
from typing import Optional


class Command(str, Enum):
    """멘션 메시지에서 인식하는 커맨드"""
    HELP = "help"
    TEST = "test"
    HELLO = "hello"
    DEFAULT = "default"


KNOWN_COMMANDS = {
    command.value: command
    for command in Command
    if command is not Command.DEFAULT
}


def parse_command(text: Optional[str]) -> Optional[str]:
    """멘션 바로 다음 단어 추출 ("<@BOT> test" -> "test")"""
    if not text:
        return None
    tokens = text.split(maxsplit=2)[:2]
    if len(tokens) < 2:
        return None
    return tokens[1]


def to_command(text: Optional[str]) -> Command:
    """메시지 텍스트를 Command 로 변환, 모르는 단어는 DEFAULT"""
    return KNOWN_COMMANDS.get(parse_command(text), Command.DEFAULT)
