"""
Shell Built-in Commands

Implements the built-in command vocabulary.

Every handler takes the parsed command and returns the output text
lines. Failures are raised as command exceptions; the dispatcher turns
each one into a single error line.

Author: YSNRFD
Version: 1.0.0
"""

import time
from typing import Callable, List

from .parser import ParsedCommand
from .profiles import ShellType
from hyperterm.filesystem.path_resolver import PathResolver
from hyperterm.exceptions import (
    AlreadyExistsError,
    InvalidArgumentError,
    NotFoundError,
)
from hyperterm.workflows import Workflow, parse_theme, parse_workflow


HELP_TEXT = [
    "Available commands:",
    "  help     - Show this help message",
    "  clear    - Clear terminal screen",
    "  ls       - List directory contents",
    "  cd       - Change directory",
    "  pwd      - Print working directory",
    "  mkdir    - Create directory",
    "  touch    - Create empty file",
    "  cat      - Display file contents",
    "  echo     - Echo text back",
    "  date     - Show current date and time",
    "  whoami   - Display current user",
    "  uname    - System information",
    "  version  - Show terminal version",
    "  shell    - Change shell (bash, zsh, fish, powershell)",
    "  source   - Load shell configuration file",
    "  env      - Show environment variables",
    "  export   - Set environment variable (NAME=value)",
    "  alias    - List or define aliases (name=value)",
    "  history  - Show command history",
    "  theme    - Show or switch the active theme",
    "  themes   - List available themes",
    "  load-theme <name> <file> - Load theme from YAML file",
    "  workflows - List available workflows",
    "  workflows search <query> - Search workflows",
    "  workflow <name> - Execute a workflow",
    "  load-workflow <file> - Load workflow from YAML file",
    "  vt100    - Test VT100/ANSI escape sequences",
    "  vt100-demo - Demonstrate VT100 formatting",
    "  vt100-colors - Show VT100 color palette",
]

WORKFLOW_USAGE = "Usage: workflow <name> [arg1=value1] [arg2=value2]..."


class BuiltinCommands:
    """
    Built-in shell commands.

    These run directly against the session state; nothing is delegated
    to a real process.
    """

    def __init__(self, session):
        """
        Initialize built-in commands.

        Args:
            session: The terminal session the commands act on
        """
        self._session = session
        self._commands: dict[str, Callable[[ParsedCommand], List[str]]] = {
            'help': self.cmd_help,
            'clear': self.cmd_clear,
            'ls': self.cmd_ls,
            'cd': self.cmd_cd,
            'pwd': self.cmd_pwd,
            'mkdir': self.cmd_mkdir,
            'touch': self.cmd_touch,
            'cat': self.cmd_cat,
            'date': self.cmd_date,
            'whoami': self.cmd_whoami,
            'uname': self.cmd_uname,
            'version': self.cmd_version,
            'shell': self.cmd_shell,
            'source': self.cmd_source,
            'env': self.cmd_env,
            'export': self.cmd_export,
            'alias': self.cmd_alias,
            'history': self.cmd_history,
            'theme': self.cmd_theme,
            'themes': self.cmd_themes,
            'load-theme': self.cmd_load_theme,
            'workflows': self.cmd_workflows,
            'workflow': self.cmd_workflow,
            'load-workflow': self.cmd_load_workflow,
            'vt100': self.cmd_vt100,
            'vt100-demo': self.cmd_vt100_demo,
            'vt100-colors': self.cmd_vt100_colors,
        }

    def is_builtin(self, name: str) -> bool:
        """Check if a command is built-in."""
        return name in self._commands

    def get(self, name: str):
        return self._commands.get(name)

    def register(self, name: str, handler: Callable[[ParsedCommand], List[str]]) -> None:
        """Add or replace a built-in."""
        self._commands[name.lower()] = handler

    # Command implementations

    def cmd_help(self, cmd: ParsedCommand) -> List[str]:
        """Display help information."""
        return list(HELP_TEXT)

    def cmd_clear(self, cmd: ParsedCommand) -> List[str]:
        """Ask the session to empty its output log."""
        self._session.clear_requested = True
        return []

    def cmd_ls(self, cmd: ParsedCommand) -> List[str]:
        """List directory contents. Option flags such as ``-la`` are accepted and ignored."""
        paths = [arg for arg in cmd.args if not arg.startswith('-')]
        entries = self._session.filesystem.list_directory(paths[0] if paths else None)
        if not entries:
            return ["Directory is empty"]

        lines = []
        for node in entries:
            name = node.name + ('/' if node.is_directory else '')
            size = str(node.size).rjust(8)
            modified = node.modified.strftime('%m/%d/%Y')
            lines.append(f"{node.permissions} {size} {modified} {name}")
        return lines

    def cmd_cd(self, cmd: ParsedCommand) -> List[str]:
        """Change directory."""
        path = cmd.arg(0, '/')
        if not self._session.filesystem.change_directory(path):
            raise NotFoundError('cd', path)
        return []

    def cmd_pwd(self, cmd: ParsedCommand) -> List[str]:
        """Print working directory."""
        return [self._session.filesystem.current_path_string()]

    def cmd_mkdir(self, cmd: ParsedCommand) -> List[str]:
        """Create directory."""
        name = cmd.arg(0)
        if not name:
            raise InvalidArgumentError('mkdir', "missing operand")

        if not PathResolver.is_valid_name(name):
            raise InvalidArgumentError('mkdir', "Invalid directory name", operand=name)

        if not self._session.filesystem.create_directory(name):
            raise AlreadyExistsError('mkdir', name)
        return []

    def cmd_touch(self, cmd: ParsedCommand) -> List[str]:
        """Create an empty file; an existing file is left alone."""
        name = cmd.arg(0)
        if not name:
            raise InvalidArgumentError('touch', "missing file operand")

        if not PathResolver.is_valid_name(name):
            raise InvalidArgumentError('touch', "Invalid file name", operand=name)

        fs = self._session.filesystem
        if not fs.create_file(name) and fs.is_directory(name):
            raise AlreadyExistsError('touch', name, reason="Is a directory")
        return []

    def cmd_cat(self, cmd: ParsedCommand) -> List[str]:
        """Display file contents."""
        path = cmd.arg(0)
        if not path:
            raise InvalidArgumentError('cat', "missing operand")

        content = self._session.filesystem.read_file(path)
        if content is None:
            raise NotFoundError('cat', path)
        return content.split('\n')

    def cmd_date(self, cmd: ParsedCommand) -> List[str]:
        """Display current date and time."""
        return [time.strftime('%a %b %d %Y %H:%M:%S')]

    def cmd_whoami(self, cmd: ParsedCommand) -> List[str]:
        """Display current username."""
        return [self._session.config.shell.username]

    def cmd_uname(self, cmd: ParsedCommand) -> List[str]:
        """Display system information."""
        terminal = self._session.config.terminal
        return [f"{terminal.name} v{terminal.version} (Python)"]

    def cmd_version(self, cmd: ParsedCommand) -> List[str]:
        """Display terminal version."""
        terminal = self._session.config.terminal
        return [
            f"{terminal.name} v{terminal.version}",
            "Built with Python",
            "A terminal simulated entirely in memory",
        ]

    def cmd_shell(self, cmd: ParsedCommand) -> List[str]:
        """Show or change the active shell persona."""
        profiles = self._session.profiles
        name = cmd.arg(0)

        if not name:
            return [f"Current shell: {profiles.profile().name}"]

        if not profiles.set_persona(name):
            raise InvalidArgumentError(
                'shell',
                f"Available shells: {', '.join(ShellType.names())}",
                operand=name
            )
        return [f"Switched to {profiles.profile().name}"]

    def cmd_source(self, cmd: ParsedCommand) -> List[str]:
        """Load a shell configuration file into the active persona."""
        path = cmd.arg(0)
        if not path:
            raise InvalidArgumentError('source', "missing operand")

        content = self._session.filesystem.read_file(path)
        if content is None:
            raise NotFoundError('source', path)

        self._session.profiles.load_config_file(content)
        return [f"Loaded configuration from {path}"]

    def cmd_env(self, cmd: ParsedCommand) -> List[str]:
        """Display the active persona's variables."""
        variables = self._session.profiles.profile().variables
        return [f"{key}={value}" for key, value in variables.items()]

    def cmd_export(self, cmd: ParsedCommand) -> List[str]:
        """Set variables in the active persona; nothing is set if any argument is invalid."""
        if not cmd.args:
            return self.cmd_env(cmd)

        assignments = []
        for arg in cmd.args:
            key, sep, value = arg.partition('=')
            if not sep or not key:
                raise InvalidArgumentError('export', "not a valid identifier", operand=arg)
            assignments.append((key, value))

        for key, value in assignments:
            self._session.profiles.set_variable(key, value)
        return []

    def cmd_alias(self, cmd: ParsedCommand) -> List[str]:
        """List aliases, or define one as name=value."""
        profiles = self._session.profiles

        if not cmd.args:
            return [f"alias {name}='{value}'" for name, value in profiles.profile().aliases.items()]

        name, sep, value = cmd.remainder.partition('=')
        name = name.strip()
        if not sep or not name or ' ' in name:
            raise InvalidArgumentError('alias', "usage: alias name=value", operand=cmd.remainder)

        profiles.set_alias(name, value.strip().strip('\'"'))
        return []

    def cmd_history(self, cmd: ParsedCommand) -> List[str]:
        """Display command history."""
        return [f"{i}  {entry}" for i, entry in enumerate(self._session.history.entries(), 1)]

    # Themes

    def cmd_theme(self, cmd: ParsedCommand) -> List[str]:
        """Show the active theme, or switch to another one."""
        registry = self._session.workflows
        name = cmd.arg(0)

        if name:
            if registry.get_theme(name) is None:
                raise NotFoundError('theme', name, reason="Theme not found")
            self._session.active_theme = name.lower()
            return [f"Switched to theme: {name.lower()}"]

        theme = registry.get_theme(self._session.active_theme)
        lines = [f"Current theme: {self._session.active_theme}"]
        if theme is not None:
            lines.extend([
                f"Background: {theme.background}",
                f"Foreground: {theme.foreground}",
                f"Accent: {theme.accent}",
            ])
        lines.append("Use 'themes' to list available themes")
        return lines

    def cmd_themes(self, cmd: ParsedCommand) -> List[str]:
        """List available themes."""
        lines = ["Available themes:"]
        lines.extend(f"  {name}" for name in self._session.workflows.list_themes())
        lines.append("")
        lines.append("Usage: load-theme <name> <filename.yml>")
        return lines

    def cmd_load_theme(self, cmd: ParsedCommand) -> List[str]:
        """Load a theme from a YAML file."""
        if len(cmd.args) < 2:
            raise InvalidArgumentError('load-theme', "usage: load-theme <theme-name> <filename.yml>")

        name, path = cmd.args[0], cmd.args[1]
        content = self._session.filesystem.read_file(path)
        if content is None:
            raise NotFoundError('load-theme', path)

        theme = parse_theme(content)
        if theme is None:
            raise InvalidArgumentError('load-theme', "Invalid theme format", operand=path)

        self._session.workflows.add_theme(name, theme)
        return [
            f"Loaded theme: {name}",
            f"Background: {theme.background}",
            f"Foreground: {theme.foreground}",
            f"Accent: {theme.accent}",
        ]

    # Workflows

    @staticmethod
    def _describe(workflow: Workflow) -> str:
        return f"  {workflow.name} - {workflow.description or 'No description'}"

    def cmd_workflows(self, cmd: ParsedCommand) -> List[str]:
        """List or search workflows."""
        registry = self._session.workflows

        if cmd.arg(0).lower() == 'search' and len(cmd.args) > 1:
            query = ' '.join(cmd.args[1:])
            results = registry.search_workflows(query)
            if not results:
                return [f"No workflows found matching: {query}"]

            lines = [f"Found {len(results)} workflow(s):"]
            for workflow in results:
                lines.append(self._describe(workflow))
                if workflow.tags:
                    lines.append(f"    Tags: {', '.join(workflow.tags)}")
            return lines

        lines = ["Available workflows:"]
        for workflow in registry.list_workflows():
            lines.append(self._describe(workflow))
            if workflow.arguments:
                lines.append(f"    Arguments: {', '.join(arg.name for arg in workflow.arguments)}")
            if workflow.tags:
                lines.append(f"    Tags: {', '.join(workflow.tags)}")

        lines.append("")
        lines.append(WORKFLOW_USAGE)
        lines.append("       workflows search <query>")
        return lines

    def cmd_workflow(self, cmd: ParsedCommand) -> List[str]:
        """
        Render a workflow's command.

        Words before the first ``key=value`` pair form the workflow name,
        so multi-word names work without quoting.
        """
        name_words: List[str] = []
        values: dict[str, str] = {}

        for arg in cmd.args:
            if '=' in arg:
                key, _, value = arg.partition('=')
                if key:
                    values[key] = value
            elif not values:
                name_words.append(arg)

        if not name_words:
            raise InvalidArgumentError('workflow', WORKFLOW_USAGE)

        name = ' '.join(name_words)
        workflow = self._session.workflows.get_workflow(name)
        if workflow is None:
            raise NotFoundError('workflow', name, reason="Workflow not found")

        command = self._session.workflows.render_command(workflow, values)
        return [
            f"Executing workflow: {workflow.name}",
            f"Command: {command}",
            f"Description: {workflow.description or 'No description'}",
        ]

    def cmd_load_workflow(self, cmd: ParsedCommand) -> List[str]:
        """Load a workflow from a YAML file."""
        path = cmd.arg(0)
        if not path:
            raise InvalidArgumentError('load-workflow', "usage: load-workflow <filename.yml>")

        content = self._session.filesystem.read_file(path)
        if content is None:
            raise NotFoundError('load-workflow', path)

        workflow = parse_workflow(content)
        if workflow is None:
            raise InvalidArgumentError('load-workflow', "Invalid workflow format", operand=path)

        self._session.workflows.add_workflow(workflow)
        return [
            f"Loaded workflow: {workflow.name}",
            f"Description: {workflow.description or 'No description'}",
            f"Command: {workflow.command}",
        ]

    # Escape sequence demos

    def cmd_vt100(self, cmd: ParsedCommand) -> List[str]:
        """Print sample escape sequences."""
        test_type = (cmd.arg(0) or 'basic').lower()

        if test_type == 'basic':
            return [
                "VT100/ANSI Escape Sequence Test:",
                "\x1b[1mBold text\x1b[0m",
                "\x1b[3mItalic text\x1b[0m",
                "\x1b[4mUnderlined text\x1b[0m",
                "\x1b[7mInverse text\x1b[0m",
                "\x1b[9mStrikethrough text\x1b[0m",
            ]
        if test_type == 'colors':
            return [
                "VT100 Color Test:",
                "\x1b[31mRed text\x1b[0m",
                "\x1b[32mGreen text\x1b[0m",
                "\x1b[33mYellow text\x1b[0m",
                "\x1b[34mBlue text\x1b[0m",
                "\x1b[35mMagenta text\x1b[0m",
                "\x1b[36mCyan text\x1b[0m",
                "\x1b[37mWhite text\x1b[0m",
            ]
        if test_type == 'combined':
            return [
                "Combined VT100 Effects:",
                "\x1b[1;31mBold Red\x1b[0m",
                "\x1b[3;32mItalic Green\x1b[0m",
                "\x1b[4;34mUnderlined Blue\x1b[0m",
                "\x1b[1;4;35mBold Underlined Magenta\x1b[0m",
                "\x1b[42mGreen Background\x1b[0m",
                "\x1b[1;37;41mBold White on Red\x1b[0m",
            ]
        return [
            "VT100 Test Options:",
            "  vt100 basic    - Test basic formatting",
            "  vt100 colors   - Test color sequences",
            "  vt100 combined - Test combined effects",
        ]

    def cmd_vt100_demo(self, cmd: ParsedCommand) -> List[str]:
        """Draw a small formatted panel."""
        edge = "\x1b[1;36m║\x1b[0m"
        return [
            "\x1b[1;36m╔══════════════════════════════════════╗\x1b[0m",
            f"{edge} \x1b[1;33mVT100/ANSI Terminal Demo\x1b[0m             {edge}",
            "\x1b[1;36m╠══════════════════════════════════════╣\x1b[0m",
            f"{edge} \x1b[1mText Formatting:\x1b[0m                     {edge}",
            f"{edge}   \x1b[1mBold\x1b[0m \x1b[3mItalic\x1b[0m \x1b[4mUnderline\x1b[0m \x1b[9mStrike\x1b[0m      {edge}",
            f"{edge}                                      {edge}",
            f"{edge} \x1b[1mColors:\x1b[0m                              {edge}",
            f"{edge}   \x1b[31m●\x1b[32m●\x1b[33m●\x1b[34m●\x1b[35m●\x1b[36m●\x1b[37m●\x1b[0m Rainbow Colors                {edge}",
            f"{edge}                                      {edge}",
            f"{edge} \x1b[1mBackground Colors:\x1b[0m                   {edge}",
            f"{edge}   \x1b[41m Red \x1b[42m Green \x1b[44m Blue \x1b[0m              {edge}",
            "\x1b[1;36m╚══════════════════════════════════════╝\x1b[0m",
        ]

    def cmd_vt100_colors(self, cmd: ParsedCommand) -> List[str]:
        """Show the 16-color palette."""
        standard = ["Black", "Red", "Green", "Yellow", "Blue", "Magenta", "Cyan", "White"]

        lines = [
            "\x1b[1mVT100/ANSI Color Palette:\x1b[0m",
            "",
            "\x1b[1mStandard Colors (30-37):\x1b[0m",
        ]
        for offset, name in enumerate(standard):
            code = 30 + offset
            lines.append(f"  \x1b[{code}m{code}\x1b[0m - {name} (\x1b[{code}m■■■\x1b[0m)")

        lines.append("")
        lines.append("\x1b[1mBright Colors (90-97):\x1b[0m")
        for offset, name in enumerate(standard):
            code = 90 + offset
            lines.append(f"  \x1b[{code}m{code}\x1b[0m - Bright {name} (\x1b[{code}m■■■\x1b[0m)")

        lines.append("")
        lines.append("\x1b[1mBackground Colors (40-47, 100-107):\x1b[0m")
        lines.append("  " + "".join(f"\x1b[{code}m {code} " for code in range(40, 48)) + "\x1b[0m")
        lines.append("  " + "".join(f"\x1b[{code}m{code}" for code in range(100, 108)) + "\x1b[0m")
        return lines
