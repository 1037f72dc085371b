from .exceptions import (
    BotException,
    ParseException,
    VerificationException,
    UnrecognizedEventException,
    SlackException,
    ConfigurationException
)

__all__ = [
    "BotException",
    "ParseException",
    "VerificationException",
    "UnrecognizedEventException",
    "SlackException",
    "ConfigurationException"
]
