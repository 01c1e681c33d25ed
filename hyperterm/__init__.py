"""
HyperTerm - A simulated terminal session

An in-memory terminal: virtual filesystem, shell personas, built-in
commands, escape sequence rendering, workflows and themes.
"""

__version__ = "1.0.0"
__author__ = "YSNRFD"

# Import main components for convenience
from .session import TerminalSession, SessionManager
from .core.config_loader import ConfigLoader, get_config
from .logger import Logger, get_logger

__all__ = [
    'TerminalSession',
    'SessionManager',
    'ConfigLoader',
    'get_config',
    'Logger',
    'get_logger',
]
