"""Key commands and the editor session that applies them."""

from .commands import Command, CommandResult, KeyCommand
from .editor import EditorSession, SessionBus, StatusMessage
from .prompt import FilenamePrompt

__all__ = [
    "Command",
    "CommandResult",
    "KeyCommand",
    "EditorSession",
    "SessionBus",
    "StatusMessage",
    "FilenamePrompt",
]
