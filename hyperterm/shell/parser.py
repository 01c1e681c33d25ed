"""
Command Parser Module

Splits a command line into a command name and arguments.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class ParsedCommand:
    """A parsed command line."""
    command: str
    args: List[str] = field(default_factory=list)
    line: str = ""
    remainder: str = ""

    def arg(self, index: int, default: str = "") -> str:
        """Argument at ``index`` (0 is the first argument after the name)."""
        if 0 <= index < len(self.args):
            return self.args[index]
        return default


class CommandParser:
    """
    Parses command lines.

    There is no quoting, piping or redirection: the line is split on
    whitespace and the first word, lower-cased, names the command.

    Example:
        >>> parser = CommandParser()
        >>> cmd = parser.parse("ECHO  hi   there")
        >>> cmd.command, cmd.args, cmd.remainder
        ('echo', ['hi', 'there'], 'hi   there')
    """

    def parse(self, line: str) -> ParsedCommand:
        """
        Parse a command line.

        Args:
            line: Command line string

        Returns:
            ParsedCommand; ``command`` is empty for blank input
        """
        line = line.strip()
        words = line.split()

        if not words:
            return ParsedCommand(command="", line=line)

        parts = line.split(None, 1)
        remainder = parts[1] if len(parts) > 1 else ""

        return ParsedCommand(
            command=words[0].lower(),
            args=words[1:],
            line=line,
            remainder=remainder,
        )
