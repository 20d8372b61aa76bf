from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional


@dataclass
class ConsoleIO:
    """Line-based console access.

    Note: Wrapped so tests can feed scripted input and capture output.
    Falls back to the builtin input/print when no callables are given.
    """

    reader: Optional[Callable[[str], str]] = None
    writer: Optional[Callable[[str], None]] = None

    def ask(self, prompt: str) -> str:
        if self.reader is None:
            return input(prompt)
        return self.reader(prompt)

    def say(self, text: str = "") -> None:
        if self.writer is None:
            print(text)
        else:
            self.writer(text)
