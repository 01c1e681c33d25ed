"""
Command History Module

Bounded list of submitted commands with a recall cursor.

Author: YSNRFD
Version: 1.0.0
"""

from collections import deque
from typing import List, Optional


class CommandHistory:
    """
    Command history with arrow-key style recall.

    - At most ``max_entries`` commands are kept; the oldest go first.
    - A command identical to the most recent entry is not appended again.
    - The cursor is -1 when not recalling; ``previous`` walks back from
      the newest entry and ``next`` walks forward again.

    Example:
        >>> history = CommandHistory()
        >>> history.push('ls')
        True
        >>> history.push('pwd')
        True
        >>> history.previous()
        'pwd'
        >>> history.previous()
        'ls'
        >>> history.next()
        'pwd'
    """

    def __init__(self, max_entries: int = 100):
        if max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self._entries: deque[str] = deque(maxlen=max_entries)
        self._cursor = -1

    @property
    def max_entries(self) -> int:
        return self._entries.maxlen

    @property
    def cursor(self) -> int:
        return self._cursor

    def push(self, command: str) -> bool:
        """
        Record a command.

        Returns:
            True if it was appended; False for blank input or an
            immediate repeat
        """
        self.reset_cursor()

        command = command.strip()
        if not command:
            return False

        if self._entries and self._entries[-1] == command:
            return False

        self._entries.append(command)
        return True

    def previous(self) -> Optional[str]:
        """Step back one entry; stays on the oldest once reached."""
        if not self._entries:
            return None

        self._cursor = min(self._cursor + 1, len(self._entries) - 1)
        return self._entries[len(self._entries) - 1 - self._cursor]

    def next(self) -> str:
        """
        Step forward one entry.

        Returns an empty string once the cursor moves past the newest
        entry, matching an empty input line.
        """
        self._cursor = max(self._cursor - 1, -1)
        if self._cursor == -1:
            return ""
        return self._entries[len(self._entries) - 1 - self._cursor]

    def reset_cursor(self) -> None:
        """Return the cursor past the newest entry."""
        self._cursor = -1

    def entries(self) -> List[str]:
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)
