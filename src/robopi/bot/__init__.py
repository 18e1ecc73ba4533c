"""
Chat bot front end: command interpreter, command loop and IRC transport.

The IRC transport lives in robopi.bot.irc_client and is not imported here.
"""
from .commands import (
    CommandInterpreter,
    ConversationState,
    extract_command,
    tokenize,
)
from .loop import CommandLoop, CommandRequest

__all__ = [
    "CommandInterpreter",
    "ConversationState",
    "CommandLoop",
    "CommandRequest",
    "extract_command",
    "tokenize",
]
