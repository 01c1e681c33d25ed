"""
HyperTerm Shell Module

Command handling for a terminal session:
- Shell personas, prompts, aliases and rc-file loading
- Command line parsing
- Built-in commands and the dispatcher
"""

from .profiles import ShellType, ShellProfile, ShellProfileSet, ConfigLoadResult
from .parser import CommandParser, ParsedCommand
from .builtins import BuiltinCommands, HELP_TEXT
from .dispatcher import CommandDispatcher

__all__ = [
    'ShellType',
    'ShellProfile',
    'ShellProfileSet',
    'ConfigLoadResult',
    'CommandParser',
    'ParsedCommand',
    'BuiltinCommands',
    'HELP_TEXT',
    'CommandDispatcher',
]
