"""Single-line filename prompt shown on the message row."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .commands import Command, KeyCommand


@dataclass(slots=True)
class FilenamePrompt:
    label: str = "filename: "
    _typed: List[str] = field(default_factory=list)
    caret: int = 0

    @property
    def value(self) -> str:
        return "".join(self._typed)

    @property
    def caret_column(self) -> int:
        return len(self.label) + self.caret

    def render(self) -> str:
        return f"{self.label}{self.value}"

    def edit(self, key: KeyCommand) -> bool:
        """Apply an editing key; return ``False`` when the key is not one."""

        command = key.command
        if command is Command.INSERT and key.char is not None:
            self._typed.insert(self.caret, key.char)
            self.caret += 1
        elif command is Command.BACKSPACE:
            if self.caret > 0:
                self.caret -= 1
                del self._typed[self.caret]
        elif command is Command.DELETE:
            if self.caret < len(self._typed):
                del self._typed[self.caret]
        elif command is Command.LEFT:
            self.caret = max(self.caret - 1, 0)
        elif command is Command.RIGHT:
            self.caret = min(self.caret + 1, len(self._typed))
        elif command is Command.HOME:
            self.caret = 0
        elif command is Command.END:
            self.caret = len(self._typed)
        else:
            return False
        return True


__all__ = ["FilenamePrompt"]
