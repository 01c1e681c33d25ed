"""
Command Dispatcher

Turns one line of user input into output lines:

    trim -> alias expansion -> parse -> built-in table
         -> ``echo`` prefix rule -> "command not found"

Author: YSNRFD
Version: 1.0.0
"""

from typing import List

from .builtins import BuiltinCommands
from .parser import CommandParser, ParsedCommand
from hyperterm.exceptions import CommandException, InternalCommandError
from hyperterm.logger import get_logger
from hyperterm.terminal.output import OutputLine


class CommandDispatcher:
    """
    Dispatches commands for one session.

    Handlers never write to the session log themselves; the dispatcher
    returns the lines and the session decides where they go.
    """

    def __init__(self, session):
        self._session = session
        self._logger = get_logger('dispatcher')
        self._parser = CommandParser()
        self._builtins = BuiltinCommands(session)

    @property
    def builtins(self) -> BuiltinCommands:
        return self._builtins

    @property
    def parser(self) -> CommandParser:
        return self._parser

    def dispatch(self, raw: str) -> List[OutputLine]:
        """
        Execute one line of input.

        Args:
            raw: The line as typed

        Returns:
            Output and error lines, at most ``max_dispatch_lines`` of them
        """
        line = raw.strip()
        if not line:
            return []

        expanded = self._session.profiles.expand_alias(line)
        cmd = self._parser.parse(expanded)

        if not cmd.command:
            return []

        lines = self._run(cmd)

        limit = self._session.config.session.max_dispatch_lines
        if len(lines) > limit:
            self._logger.debug(
                "Output truncated",
                session=self._session.session_id,
                context={'command': cmd.command, 'lines': len(lines), 'limit': limit}
            )
            lines = lines[:limit]
        return lines

    def _run(self, cmd: ParsedCommand) -> List[OutputLine]:
        factory = self._session.line_factory

        if len(cmd.command) > self._session.config.session.max_command_length:
            return [factory.error("Invalid command")]

        handler = self._builtins.get(cmd.command)
        if handler is not None:
            return self._execute_builtin(cmd, handler)

        if cmd.command.startswith('echo'):
            return [factory.output(cmd.remainder)]

        self._logger.debug(
            "Unknown command",
            session=self._session.session_id,
            context={'command': cmd.command}
        )
        return [factory.error(
            f'Command not found: {cmd.command}. Type "help" for available commands.'
        )]

    def _execute_builtin(self, cmd: ParsedCommand, handler) -> List[OutputLine]:
        factory = self._session.line_factory

        try:
            texts = handler(cmd)
        except CommandException as e:
            self._logger.debug(
                "Command failed",
                session=self._session.session_id,
                context={'command': cmd.command, 'error_code': e.error_code}
            )
            return [factory.error(str(e))]
        except Exception as e:
            self._logger.exception(
                f"Built-in {cmd.command} raised",
                exc=e,
                session=self._session.session_id,
            )
            return [factory.error(str(InternalCommandError(cmd.command, cause=e)))]

        return [factory.output(text) for text in texts]
