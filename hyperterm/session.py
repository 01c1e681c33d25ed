"""
HyperTerm Session Module

A terminal session (one tab) owns all mutable state: filesystem, shell
personas, output log, history, workflows and the active theme. The
session manager keeps the set of open tabs; nothing is shared between
them.

Author: YSNRFD
Version: 1.0.0
"""

import itertools
from typing import Optional, List

from hyperterm.core.config_loader import Config, get_config
from hyperterm.filesystem.vfs import VirtualFileSystem
from hyperterm.logger import get_logger
from hyperterm.shell.dispatcher import CommandDispatcher
from hyperterm.shell.profiles import ShellProfileSet
from hyperterm.terminal.escape import EscapeSequenceProcessor, StyledSegment
from hyperterm.terminal.history import CommandHistory
from hyperterm.terminal.output import LineFactory, OutputLine, OutputLog
from hyperterm.workflows.registry import WorkflowRegistry


DEFAULT_THEME = "asam"


class TerminalSession:
    """
    One terminal session.

    Example:
        >>> session = TerminalSession("1")
        >>> [line.text for line in session.submit("pwd")]
        ['user@hyper-terminal:/$ pwd', '/']
    """

    def __init__(self, session_id: str, config: Optional[Config] = None):
        self._session_id = session_id
        self._config = config or get_config()
        self._logger = get_logger('session')

        self.filesystem = VirtualFileSystem(config=self._config.filesystem)
        self.profiles = ShellProfileSet(config=self._config.shell)
        self.line_factory = LineFactory()
        self.output = OutputLog(max_lines=self._config.session.max_output_lines)
        self.history = CommandHistory(max_entries=self._config.session.max_history)
        self.workflows = WorkflowRegistry()
        self.active_theme = DEFAULT_THEME
        self.clear_requested = False
        self.processor = EscapeSequenceProcessor()
        self.dispatcher = CommandDispatcher(self)

        self._logger.debug("Session created", session=session_id)

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def config(self) -> Config:
        return self._config

    def prompt(self) -> str:
        """The prompt for the current persona and directory."""
        return self.profiles.prompt(self.filesystem.current_path_string())

    def welcome(self) -> List[OutputLine]:
        """Append the welcome banner to the log and return it."""
        lines = [
            self.line_factory.output(self._config.terminal.welcome_message),
            self.line_factory.output('Type "help" for available commands.'),
        ]
        self.output.extend(lines)
        return lines

    def submit(self, raw: str) -> List[OutputLine]:
        """
        Run one line of input.

        The prompt is captured before dispatch, so a ``cd`` echoes the
        directory it was typed in.

        Args:
            raw: The line as typed

        Returns:
            The lines appended to the log; empty after ``clear``,
            however it was reached (directly or through an alias)
        """
        command = raw.strip()
        prompt = self.prompt()

        self.clear_requested = False
        output = self.dispatcher.dispatch(raw)
        self.history.push(command)

        if self.clear_requested:
            self.clear_requested = False
            self.output.clear()
            self._logger.debug("Output cleared", session=self._session_id)
            return []

        lines = [self.line_factory.command(f"{prompt} {raw}")]
        lines.extend(output)

        self.output.extend(lines)
        return lines

    def render(self, text: str) -> List[StyledSegment]:
        """Split a line into styled segments with this session's processor."""
        return self.processor.process(text)

    def recall_previous(self) -> Optional[str]:
        """Step back through history; None when there is nothing older."""
        return self.history.previous()

    def recall_next(self) -> str:
        """Step forward through history; empty once past the newest entry."""
        return self.history.next()


class SessionManager:
    """
    Open terminal tabs.

    There is always at least one tab; closing the last one is refused.
    """

    def __init__(self, config: Optional[Config] = None):
        self._config = config
        self._logger = get_logger('session')
        self._ids = itertools.count(1)
        self._sessions: dict[str, TerminalSession] = {}
        self._active_id = self.open_tab().session_id

    @property
    def active(self) -> TerminalSession:
        return self._sessions[self._active_id]

    @property
    def tabs(self) -> List[TerminalSession]:
        return list(self._sessions.values())

    def get(self, session_id: str) -> Optional[TerminalSession]:
        return self._sessions.get(session_id)

    def open_tab(self) -> TerminalSession:
        """Open a new tab and make it active."""
        session = TerminalSession(str(next(self._ids)), config=self._config)
        session.welcome()

        self._sessions[session.session_id] = session
        self._active_id = session.session_id

        self._logger.info("Tab opened", session=session.session_id)
        return session

    def close_tab(self, session_id: str) -> bool:
        """
        Close a tab.

        Returns:
            False if the tab is unknown or is the only one open
        """
        if session_id not in self._sessions or len(self._sessions) == 1:
            return False

        del self._sessions[session_id]
        if self._active_id == session_id:
            self._active_id = next(reversed(self._sessions))

        self._logger.info("Tab closed", session=session_id)
        return True

    def activate(self, session_id: str) -> bool:
        """Switch the active tab."""
        if session_id not in self._sessions:
            return False
        self._active_id = session_id
        return True
