"""
Command Exceptions

Exceptions raised by built-in command handlers. The dispatcher turns each
one into a single user-facing error line.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any


class CommandException(Exception):
    """
    Base exception for all built-in command failures.

    Attributes:
        command: Name of the command that failed
        reason: Human-readable reason
        operand: Argument the failure refers to (if any)
        error_code: Numeric error code for programmatic handling
        context: Additional context about the error

    The string form is what the user sees:
        ``<command>: <operand>: <reason>`` or ``<command>: <reason>``
    """

    def __init__(
        self,
        command: str,
        reason: str,
        operand: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(reason)
        self.command = command
        self.reason = reason
        self.operand = operand
        self.error_code = error_code or 4000
        self.context = context or {}

    def __str__(self) -> str:
        if self.operand is not None:
            return f"{self.command}: {self.operand}: {self.reason}"
        return f"{self.command}: {self.reason}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"command={self.command!r}, "
            f"operand={self.operand!r}, "
            f"reason={self.reason!r})"
        )


class NotFoundError(CommandException):
    """
    A path, workflow or theme does not exist.

    Example:
        >>> str(NotFoundError("cd", "nope"))
        'cd: nope: No such file or directory'
    """

    def __init__(
        self,
        command: str,
        operand: Optional[str] = None,
        reason: str = "No such file or directory",
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            command=command,
            reason=reason,
            operand=operand,
            error_code=4001,
            context=context
        )


class InvalidArgumentError(CommandException):
    """
    Missing operand, unknown option value or malformed record.

    Example:
        >>> str(InvalidArgumentError("cat", "missing operand"))
        'cat: missing operand'
    """

    def __init__(
        self,
        command: str,
        reason: str,
        operand: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            command=command,
            reason=reason,
            operand=operand,
            error_code=4002,
            context=context
        )


class AlreadyExistsError(CommandException):
    """A create operation collided with an existing name."""

    def __init__(
        self,
        command: str,
        operand: str,
        reason: str = "File exists",
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            command=command,
            reason=reason,
            operand=operand,
            error_code=4003,
            context=context
        )


class InternalCommandError(CommandException):
    """
    Unexpected failure inside a handler.

    The dispatcher wraps any non-command exception in this so that the
    original error can be logged while the user sees one generic line.
    """

    def __init__(
        self,
        command: str,
        cause: Optional[BaseException] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            command=command,
            reason=f"Error executing {command}",
            error_code=4004,
            context=context
        )
        self.cause = cause

    def __str__(self) -> str:
        return self.reason
