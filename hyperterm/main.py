#!/usr/bin/env python3
"""
HyperTerm - A simulated terminal session

This is the main entry point for HyperTerm.

Features:
- In-memory virtual filesystem seeded with a home directory
- Bash, Zsh, Fish and PowerShell personas with rc-file loading
- Built-in command vocabulary
- VT100/ANSI escape sequence rendering
- YAML workflows and themes

Author: YSNRFD
Version: 1.0.0
"""

import os
import sys

from hyperterm.core.config_loader import ConfigLoader
from hyperterm.logger import Logger, LogLevel
from hyperterm.session import SessionManager
from hyperterm.terminal.escape import strip_sequences


HEADLESS_SCRIPT = [
    "pwd",
    "cd /home/user",
    "ls",
    "cat welcome.txt",
    "source .bashrc",
    "ll",
    "workflow Find Files pattern=*.py",
    "vt100 colors",
]


def _boot(config_path: str):
    """Load configuration and initialize logging."""
    loader = ConfigLoader()
    config = loader.load(config_path) if os.path.exists(config_path) else loader.config

    Logger.initialize(
        level=LogLevel[config.logging.level.upper()],
        log_file=config.logging.log_file,
        console_output=config.logging.console_output,
    )
    return config


def _write(text: str, raw: bool) -> None:
    print(text if raw else strip_sequences(text))


def main(argv=None):
    """
    Main entry point for HyperTerm.

    Reads lines from stdin until EOF or ``exit``. Escape sequences are
    passed through on a TTY and stripped otherwise. With ``--headless``
    the fixed command script runs instead.
    """
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] == '--headless':
        return run_headless()

    config_path = os.path.join(os.path.dirname(__file__), 'config.json')
    config = _boot(config_path)

    raw = sys.stdout.isatty()
    manager = SessionManager(config)
    session = manager.active

    for line in session.output.lines():
        _write(line.text, raw)

    while True:
        try:
            line = input(f"{session.prompt()} ")
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print("^C")
            continue

        if line.strip() == 'exit':
            break

        lines = session.submit(line)
        if not lines and raw:
            print("\x1b[2J\x1b[H", end="")

        # The command line itself was already echoed by input().
        for output in lines[1:]:
            _write(output.text, raw)

    return 0


def run_headless():
    """
    Run a fixed command script without the interactive loop.

    Useful for smoke-testing an installation.
    """
    config_path = os.path.join(os.path.dirname(__file__), 'config.json')
    config = _boot(config_path)

    session = SessionManager(config).active
    for command in HEADLESS_SCRIPT:
        for output in session.submit(command):
            _write(output.text, raw=False)
    return 0


if __name__ == '__main__':
    sys.exit(main())
