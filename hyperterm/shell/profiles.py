"""
Shell Profiles Module

Per-persona shell state: prompt, aliases, variables and functions for
bash, zsh, fish and powershell. All four profiles live side by side;
switching persona never touches another persona's state.

Author: YSNRFD
Version: 1.0.0
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from hyperterm.core.config_loader import ShellConfig, get_config
from hyperterm.logger import get_logger


class ShellType(Enum):
    """The four shell personas."""
    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"
    POWERSHELL = "powershell"

    @classmethod
    def from_name(cls, name: Union[str, 'ShellType']) -> Optional['ShellType']:
        """Look up a persona by name, case-insensitively."""
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            return None

    @classmethod
    def names(cls) -> list[str]:
        return [member.value for member in cls]


@dataclass
class ShellProfile:
    """State of one shell persona."""
    name: str
    prompt_symbol: str
    config_file: str
    aliases: dict[str, str] = field(default_factory=dict)
    functions: dict[str, str] = field(default_factory=dict)
    variables: dict[str, str] = field(default_factory=dict)


def _default_profiles() -> dict[ShellType, ShellProfile]:
    return {
        ShellType.BASH: ShellProfile(
            name="Bash",
            prompt_symbol="$",
            config_file="~/.bashrc",
            variables={
                'PS1': "\\u@\\h:\\w\\$ ",
                'PATH': "/usr/local/bin:/usr/bin:/bin",
                'HOME': "/home/user",
                'SHELL': "/bin/bash",
            },
        ),
        ShellType.ZSH: ShellProfile(
            name="Zsh",
            prompt_symbol="%",
            config_file="~/.zshrc",
            variables={
                'PS1': "%n@%m:%~%# ",
                'PATH': "/usr/local/bin:/usr/bin:/bin",
                'HOME': "/home/user",
                'SHELL': "/bin/zsh",
            },
        ),
        ShellType.FISH: ShellProfile(
            name="Fish",
            prompt_symbol=">",
            config_file="~/.config/fish/config.fish",
            variables={
                'PATH': "/usr/local/bin /usr/bin /bin",
                'HOME': "/home/user",
                'SHELL': "/usr/bin/fish",
            },
        ),
        ShellType.POWERSHELL: ShellProfile(
            name="PowerShell",
            prompt_symbol="PS>",
            config_file="$PROFILE",
            variables={
                'PSModulePath': "C:\\Program Files\\PowerShell\\Modules",
                'HOME': "C:\\Users\\user",
                'SHELL': "pwsh",
            },
        ),
    }


@dataclass
class ConfigLoadResult:
    """What a call to ``load_config_file`` picked up."""
    aliases: int = 0
    variables: int = 0
    functions: int = 0

    @property
    def total(self) -> int:
        return self.aliases + self.variables + self.functions


_IDENTIFIER = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')
_ALIAS_ASSIGN = re.compile(r'^alias\s+([^=\s]+)=(.*)$')
_ALIAS_WORDS = re.compile(r'^alias\s+(\S+)\s+(.+)$')
_SET_ALIAS = re.compile(r'^Set-Alias\s+(\S+)\s+(.+)$', re.IGNORECASE)
_FISH_SET = re.compile(r'^set\s+(?:-[A-Za-z]+\s+)*([A-Za-z_][A-Za-z0-9_]*)\s+(.+)$')
_PS_ENV = re.compile(r'^\$env:([A-Za-z_][A-Za-z0-9_]*)\s*=\s*(.*)$')
_FUNCTION_KEYWORD = re.compile(r'\bfunction\s+([^\s(){}]+)')
_FUNCTION_CALL_FORM = re.compile(r'^([A-Za-z_][\w.:-]*)\s*\(')
_QUOTES = re.compile(r'[\'"]')


def _strip_quotes(value: str) -> str:
    return _QUOTES.sub('', value.strip())


class ShellProfileSet:
    """
    The four persona profiles plus the active-persona selector.

    Example:
        >>> profiles = ShellProfileSet()
        >>> profiles.prompt('/home')
        'user@hyper-terminal:/home$'
        >>> profiles.set_persona('fish')
        True
        >>> profiles.prompt('/home')
        'user@hyper-terminal /home>'
    """

    def __init__(self, config: Optional[ShellConfig] = None):
        self._logger = get_logger('shell')
        self._config = config or get_config().shell
        self._profiles = _default_profiles()
        self._active = ShellType.from_name(self._config.default_shell) or ShellType.BASH

    @property
    def active_persona(self) -> ShellType:
        return self._active

    def set_persona(self, persona: Union[str, ShellType]) -> bool:
        """
        Switch the active persona.

        Unknown names are ignored and leave the selection unchanged.

        Returns:
            True if the persona was recognised
        """
        shell_type = ShellType.from_name(persona)
        if shell_type is None:
            return False

        self._active = shell_type
        self._logger.debug("Persona switched", context={'persona': shell_type.value})
        return True

    def profile(self) -> ShellProfile:
        """The active persona's profile."""
        return self._profiles[self._active]

    def get_profile(self, persona: Union[str, ShellType]) -> Optional[ShellProfile]:
        """Any persona's profile, active or not."""
        shell_type = ShellType.from_name(persona)
        if shell_type is None:
            return None
        return self._profiles[shell_type]

    def prompt(self, path: str) -> str:
        """Render the active persona's prompt for a directory path."""
        profile = self.profile()
        user = self._config.username
        host = self._config.hostname

        if self._active in (ShellType.BASH, ShellType.ZSH):
            return f"{user}@{host}:{path}{profile.prompt_symbol}"
        if self._active == ShellType.FISH:
            return f"{user}@{host} {path}{profile.prompt_symbol}"
        return f"{profile.prompt_symbol} {path}>"

    def load_config_file(self, text: str) -> ConfigLoadResult:
        """
        Scan an rc file into the active profile.

        This is a line scanner, not a shell parser. Recognised forms:
        ``alias name=value`` (also fish ``alias name 'value'`` and
        ``Set-Alias name value``), function definitions, and variable
        assignments (``NAME=value``, ``export NAME=value``,
        ``set -gx NAME value``, ``$env:NAME = value``). Anything else is
        skipped.
        """
        profile = self.profile()
        result = ConfigLoadResult()

        for raw_line in text.split('\n'):
            line = raw_line.strip()
            if not line or line.startswith('#'):
                continue

            alias = self._parse_alias(line)
            if alias is not None:
                name, value = alias
                profile.aliases[name] = value
                result.aliases += 1
                continue

            if line.startswith('alias ') or line.lower().startswith('set-alias '):
                continue

            function_name = self._parse_function(line)
            if function_name is not None:
                profile.functions[function_name] = line
                result.functions += 1
                continue

            variable = self._parse_variable(line)
            if variable is not None:
                name, value = variable
                profile.variables[name] = value
                result.variables += 1

        self._logger.debug(
            "Configuration loaded",
            context={
                'persona': self._active.value,
                'aliases': result.aliases,
                'variables': result.variables,
                'functions': result.functions,
            }
        )
        return result

    @staticmethod
    def _parse_alias(line: str) -> Optional[tuple[str, str]]:
        match = _ALIAS_ASSIGN.match(line)
        if match is None:
            match = _ALIAS_WORDS.match(line) or _SET_ALIAS.match(line)
        if match is None:
            return None

        name = match.group(1).strip()
        value = _strip_quotes(match.group(2))
        if not name or not value:
            return None
        return name, value

    @staticmethod
    def _parse_function(line: str) -> Optional[str]:
        match = _FUNCTION_KEYWORD.search(line)
        if match is not None:
            return match.group(1)

        open_paren = line.find('(')
        if open_paren == -1 or line.find(')', open_paren) == -1:
            return None

        match = _FUNCTION_CALL_FORM.match(line)
        if match is None:
            return None
        return match.group(1)

    @staticmethod
    def _parse_variable(line: str) -> Optional[tuple[str, str]]:
        match = _PS_ENV.match(line) or _FISH_SET.match(line)
        if match is not None:
            return match.group(1), _strip_quotes(match.group(2))

        if '=' not in line:
            return None

        name, _, value = line.partition('=')
        name = name.strip()
        if name.startswith('export '):
            name = name[len('export '):].strip()

        if not _IDENTIFIER.match(name):
            return None
        return name, _strip_quotes(value)

    def expand_alias(self, command: str) -> str:
        """
        Replace the first word of a command with its alias, if any.

        Only one substitution happens; the replacement is not expanded
        again.
        """
        match = re.match(r'^(\S+)(.*)$', command, re.DOTALL)
        if match is None:
            return command

        head, rest = match.groups()
        replacement = self.profile().aliases.get(head)
        if replacement is None:
            return command
        return replacement + rest

    def set_alias(self, name: str, value: str) -> None:
        """Define an alias in the active profile."""
        self.profile().aliases[name] = value

    def get_variable(self, name: str) -> Optional[str]:
        """Get a variable from the active profile."""
        return self.profile().variables.get(name)

    def set_variable(self, name: str, value: str) -> None:
        """Set a variable in the active profile."""
        self.profile().variables[name] = value
