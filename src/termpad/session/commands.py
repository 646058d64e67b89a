"""Semantic key commands consumed by the editor session."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Command(str, Enum):
    INSERT = "insert"
    BACKSPACE = "backspace"
    DELETE = "delete"
    NEWLINE = "newline"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    SAVE = "save"
    UNDO = "undo"
    QUIT = "quit"
    CANCEL = "cancel"


@dataclass(frozen=True, slots=True)
class KeyCommand:
    """One decoded key; ``char`` is set only for ``Command.INSERT``."""

    command: Command
    char: Optional[str] = None

    def __post_init__(self) -> None:
        if self.command is Command.INSERT:
            if self.char is None or len(self.char) != 1:
                raise ValueError("INSERT requires exactly one character")
        elif self.char is not None:
            raise ValueError(f"{self.command.value} does not take a character")

    @classmethod
    def insert(cls, char: str) -> "KeyCommand":
        return cls(Command.INSERT, char)


@dataclass(slots=True)
class CommandResult:
    """Outcome of ``EditorSession.dispatch``."""

    consumed: bool
    status: str = "ok"
    message: Optional[str] = None
    quit: bool = False


__all__ = ["Command", "KeyCommand", "CommandResult"]
