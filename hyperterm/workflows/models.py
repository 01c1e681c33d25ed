"""
Workflow and Theme Records

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import Optional, List


COLOR_NAMES = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")


@dataclass
class WorkflowArgument:
    """A named placeholder in a workflow command."""
    name: str
    description: Optional[str] = None
    default_value: Optional[str] = None


@dataclass
class Workflow:
    """
    A named, parameterized command template.

    ``command`` may contain ``{{argName}}`` placeholders.
    """
    name: str
    command: str
    description: Optional[str] = None
    tags: List[str] = field(default_factory=list)
    shells: List[str] = field(default_factory=list)
    arguments: List[WorkflowArgument] = field(default_factory=list)
    source_url: Optional[str] = None
    author: Optional[str] = None
    author_url: Optional[str] = None

    def argument(self, name: str) -> Optional[WorkflowArgument]:
        for arg in self.arguments:
            if arg.name == name:
                return arg
        return None


@dataclass
class ColorGroup:
    """The eight canonical terminal colors."""
    black: str
    red: str
    green: str
    yellow: str
    blue: str
    magenta: str
    cyan: str
    white: str

    def as_dict(self) -> dict[str, str]:
        return {name: getattr(self, name) for name in COLOR_NAMES}


@dataclass
class TerminalColors:
    normal: ColorGroup
    bright: ColorGroup


@dataclass
class Theme:
    """A base16-style color theme."""
    accent: str
    background: str
    foreground: str
    terminal_colors: TerminalColors
    details: str = "darker"
