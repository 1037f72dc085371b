from .command_parser import Command, parse_command, to_command

__all__ = [
    "Command",
    "parse_command",
    "to_command"
]
