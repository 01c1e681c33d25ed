"""
Configuration Exceptions

Errors raised while loading or updating the engine configuration.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any


class ConfigException(Exception):
    """
    Base exception for configuration errors.

    Attributes:
        message: Human-readable error description
        key: Configuration key involved (if applicable)
        error_code: Numeric error code for programmatic handling
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.key = key
        self.error_code = error_code or 1000
        self.context = context or {}
        if key:
            self.context["key"] = key

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.key:
            base = f"{base} (key={self.key})"
        return base


class ConfigLoadError(ConfigException):
    """The configuration file is missing or cannot be parsed."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if path:
            ctx["path"] = path
        super().__init__(message=message, error_code=1001, context=ctx)
        self.path = path


class ConfigValidationError(ConfigException):
    """A configuration value is out of range or has the wrong type."""

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message=message, key=key, error_code=1002, context=context)
