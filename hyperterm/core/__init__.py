"""
HyperTerm Core Module

Configuration shared by every session.
"""

from .config_loader import (
    Config,
    ConfigLoader,
    TerminalConfig,
    SessionConfig,
    ShellConfig,
    FilesystemConfig,
    LoggingConfig,
    get_config,
)

__all__ = [
    'Config',
    'ConfigLoader',
    'TerminalConfig',
    'SessionConfig',
    'ShellConfig',
    'FilesystemConfig',
    'LoggingConfig',
    'get_config',
]
