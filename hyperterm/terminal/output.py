"""
Output Line Module

Line records produced by command dispatch and the bounded log a
session keeps them in.

Author: YSNRFD
Version: 1.0.0
"""

import itertools
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Iterable, List


class LineKind(Enum):
    """What produced a line."""
    COMMAND = "command"
    OUTPUT = "output"
    ERROR = "error"


@dataclass(frozen=True)
class OutputLine:
    """One line of terminal output."""
    id: str
    kind: LineKind
    text: str
    timestamp: datetime = field(default_factory=datetime.now)


class LineFactory:
    """
    Creates output lines with ids unique within one session.

    Ids look like ``output-17`` or ``error-18``.
    """

    def __init__(self):
        self._counter = itertools.count(1)

    def make(self, kind: LineKind, text: str) -> OutputLine:
        return OutputLine(id=f"{kind.value}-{next(self._counter)}", kind=kind, text=text)

    def command(self, text: str) -> OutputLine:
        return self.make(LineKind.COMMAND, text)

    def output(self, text: str) -> OutputLine:
        return self.make(LineKind.OUTPUT, text)

    def error(self, text: str) -> OutputLine:
        return self.make(LineKind.ERROR, text)


class OutputLog:
    """
    Append-only log of output lines with a retention cap.

    When the cap is exceeded the oldest lines are evicted first.
    """

    def __init__(self, max_lines: int = 1000):
        if max_lines <= 0:
            raise ValueError("max_lines must be positive")
        self._lines: deque[OutputLine] = deque(maxlen=max_lines)

    @property
    def max_lines(self) -> int:
        return self._lines.maxlen

    def append(self, line: OutputLine) -> None:
        self._lines.append(line)

    def extend(self, lines: Iterable[OutputLine]) -> None:
        self._lines.extend(lines)

    def clear(self) -> None:
        self._lines.clear()

    def lines(self) -> List[OutputLine]:
        return list(self._lines)

    def texts(self) -> List[str]:
        return [line.text for line in self._lines]

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self):
        return iter(list(self._lines))
