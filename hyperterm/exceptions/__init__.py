"""
HyperTerm Exception Hierarchy

Architecture:
    CommandException (Base for built-in failures)
    ├── NotFoundError
    ├── InvalidArgumentError
    ├── AlreadyExistsError
    └── InternalCommandError
    ConfigException (Base for configuration failures)
    ├── ConfigLoadError
    └── ConfigValidationError

Filesystem and shell profile operations never raise for ordinary
not-found or already-exists conditions; they return False or None and
the built-ins translate that into one of the command exceptions above.
"""

from .command_exceptions import (
    CommandException,
    NotFoundError,
    InvalidArgumentError,
    AlreadyExistsError,
    InternalCommandError,
)

from .config_exceptions import (
    ConfigException,
    ConfigLoadError,
    ConfigValidationError,
)

__all__ = [
    # Command exceptions
    "CommandException",
    "NotFoundError",
    "InvalidArgumentError",
    "AlreadyExistsError",
    "InternalCommandError",
    # Configuration exceptions
    "ConfigException",
    "ConfigLoadError",
    "ConfigValidationError",
]
