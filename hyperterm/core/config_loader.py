"""
HyperTerm Configuration Loader

Configuration management for the terminal engine:
- JSON configuration file loading
- Configuration validation
- Default value handling
- Runtime configuration updates

Author: YSNRFD
Version: 1.0.0
"""

import json
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from hyperterm.exceptions import ConfigLoadError, ConfigValidationError


@dataclass
class TerminalConfig:
    """Terminal identification settings."""
    name: str = "Hyper Terminal"
    version: str = "1.0.0"
    welcome_message: str = "Welcome to Hyper Terminal v1.0.0"


@dataclass
class SessionConfig:
    """Per-session resource caps."""
    max_output_lines: int = 1000
    max_history: int = 100
    max_dispatch_lines: int = 500
    max_command_length: int = 100


@dataclass
class ShellConfig:
    """Shell persona settings."""
    username: str = "user"
    hostname: str = "hyper-terminal"
    default_shell: str = "bash"


@dataclass
class FilesystemConfig:
    """Virtual filesystem settings."""
    directory_size: int = 4096
    directory_permissions: str = "drwxr-xr-x"
    file_permissions: str = "-rw-r--r--"


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "WARNING"
    log_file: Optional[str] = None
    console_output: bool = True


@dataclass
class Config:
    """
    Main configuration container.

    Holds every setting the engine reads. Sessions take a snapshot of
    the values they need when they are created.
    """
    terminal: TerminalConfig = field(default_factory=TerminalConfig)
    session: SessionConfig = field(default_factory=SessionConfig)
    shell: ShellConfig = field(default_factory=ShellConfig)
    filesystem: FilesystemConfig = field(default_factory=FilesystemConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


_VALID_SHELLS = ("bash", "zsh", "fish", "powershell")
_VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigLoader:
    """
    Configuration loader and manager.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('config.json')
        >>> print(config.session.max_history)
        100
    """

    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'ConfigLoader':
        """Singleton pattern for configuration access."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._config = Config()
                cls._instance._loaded = False
            return cls._instance

    def load(self, config_path: str) -> Config:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded settings

        Raises:
            ConfigLoadError: If the file cannot be read or parsed
            ConfigValidationError: If a value is invalid
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigLoadError(
                f"Configuration file not found: {config_path}",
                path=config_path
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigLoadError(
                f"Invalid JSON in configuration file: {e}",
                path=config_path
            )
        except OSError as e:
            raise ConfigLoadError(
                f"Cannot read configuration file: {e}",
                path=config_path
            )

        return self.load_dict(data)

    def load_dict(self, data: dict[str, Any]) -> Config:
        """Load configuration from an already parsed mapping."""
        if not isinstance(data, dict):
            raise ConfigValidationError("Configuration root must be an object")

        config = self._parse_config(data)
        self._validate(config)
        self._config = config
        self._loaded = True
        return self._config

    def _parse_config(self, data: dict[str, Any]) -> Config:
        """Parse configuration data into Config object."""
        config = Config()

        if 'terminal' in data:
            term_data = data['terminal']
            config.terminal = TerminalConfig(
                name=term_data.get('name', config.terminal.name),
                version=term_data.get('version', config.terminal.version),
                welcome_message=term_data.get('welcome_message', config.terminal.welcome_message),
            )

        if 'session' in data:
            sess_data = data['session']
            config.session = SessionConfig(
                max_output_lines=sess_data.get('max_output_lines', config.session.max_output_lines),
                max_history=sess_data.get('max_history', config.session.max_history),
                max_dispatch_lines=sess_data.get('max_dispatch_lines', config.session.max_dispatch_lines),
                max_command_length=sess_data.get('max_command_length', config.session.max_command_length),
            )

        if 'shell' in data:
            shell_data = data['shell']
            config.shell = ShellConfig(
                username=shell_data.get('username', config.shell.username),
                hostname=shell_data.get('hostname', config.shell.hostname),
                default_shell=shell_data.get('default_shell', config.shell.default_shell),
            )

        if 'filesystem' in data:
            fs_data = data['filesystem']
            config.filesystem = FilesystemConfig(
                directory_size=fs_data.get('directory_size', config.filesystem.directory_size),
                directory_permissions=fs_data.get('directory_permissions', config.filesystem.directory_permissions),
                file_permissions=fs_data.get('file_permissions', config.filesystem.file_permissions),
            )

        if 'logging' in data:
            log_data = data['logging']
            config.logging = LoggingConfig(
                level=log_data.get('level', config.logging.level),
                log_file=log_data.get('log_file', config.logging.log_file),
                console_output=log_data.get('console_output', config.logging.console_output),
            )

        return config

    @staticmethod
    def _validate(config: Config) -> None:
        """Reject values the engine cannot run with."""
        for key in ('max_output_lines', 'max_history', 'max_dispatch_lines', 'max_command_length'):
            value = getattr(config.session, key)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ConfigValidationError(
                    f"Expected a positive integer, got {value!r}",
                    key=f"session.{key}"
                )

        if config.shell.default_shell not in _VALID_SHELLS:
            raise ConfigValidationError(
                f"Unknown shell {config.shell.default_shell!r}; "
                f"expected one of {', '.join(_VALID_SHELLS)}",
                key="shell.default_shell"
            )

        if str(config.logging.level).upper() not in _VALID_LEVELS:
            raise ConfigValidationError(
                f"Unknown log level {config.logging.level!r}",
                key="logging.level"
            )

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if not self._loaded:
            return Config()
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'session.max_history')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        parts = key.split('.')
        obj: Any = self.config

        for part in parts:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default

        return obj

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value at runtime.

        Args:
            key: Dot-notation key (e.g., 'shell.hostname')
            value: Value to set

        Note:
            Sessions that already exist keep the values they were built with.
        """
        if not self._loaded:
            self._config = Config()
            self._loaded = True

        parts = key.split('.')
        obj: Any = self._config

        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise ConfigValidationError(f"Invalid configuration key: {key}", key=key)

        final_key = parts[-1]
        if not hasattr(obj, final_key):
            raise ConfigValidationError(f"Invalid configuration key: {key}", key=key)

        previous = getattr(obj, final_key)
        setattr(obj, final_key, value)
        try:
            self._validate(self._config)
        except ConfigValidationError:
            setattr(obj, final_key, previous)
            raise

    def reset(self) -> None:
        """Drop any loaded configuration and go back to defaults."""
        self._config = Config()
        self._loaded = False

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        def dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, '__dataclass_fields__'):
                return {
                    k: dataclass_to_dict(v)
                    for k, v in obj.__dict__.items()
                }
            elif isinstance(obj, list):
                return [dataclass_to_dict(item) for item in obj]
            elif isinstance(obj, dict):
                return {k: dataclass_to_dict(v) for k, v in obj.items()}
            else:
                return obj

        return dataclass_to_dict(self.config)


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config object with current settings
    """
    loader = ConfigLoader()
    return loader.config
