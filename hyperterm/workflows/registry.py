"""
Workflow Registry

Per-session store of workflows and themes, seeded with defaults.

Author: YSNRFD
Version: 1.0.0
"""

import re
from typing import Optional, List

from .models import ColorGroup, TerminalColors, Theme, Workflow, WorkflowArgument
from hyperterm.logger import get_logger


_PLACEHOLDER = re.compile(r'\{\{([^{}]+)\}\}')


def _default_workflows() -> List[Workflow]:
    return [
        Workflow(
            name="Git Status",
            command="git status",
            tags=["git", "version-control"],
            description="Show the working tree status",
            shells=["bash", "zsh", "fish"],
        ),
        Workflow(
            name="List Files Detailed",
            command="ls -la {{directory}}",
            tags=["filesystem", "list"],
            description="List all files in directory with detailed information",
            arguments=[
                WorkflowArgument("directory", "Directory to list files from", "."),
            ],
        ),
        Workflow(
            name="Find Files",
            command="find {{path}} -name '{{pattern}}'",
            tags=["search", "filesystem"],
            description="Find files matching a pattern",
            arguments=[
                WorkflowArgument("path", "Path to search in", "."),
                WorkflowArgument("pattern", "File pattern to search for", "*.txt"),
            ],
        ),
        Workflow(
            name="Docker List Containers",
            command="docker ps {{flags}}",
            tags=["docker", "containers"],
            description="List Docker containers",
            arguments=[
                WorkflowArgument("flags", "Docker ps flags", "-a"),
            ],
        ),
    ]


def _default_themes() -> dict[str, Theme]:
    asam = Theme(
        accent="#fff024",
        background="#080808",
        details="darker",
        foreground="#5bee00",
        terminal_colors=TerminalColors(
            bright=ColorGroup(
                black="#008751",
                blue="#ab5236",
                cyan="#ffccaa",
                green="#1d2b53",
                magenta="#c2c3c7",
                red="#ffa300",
                white="#fff1e8",
                yellow="#7e2553",
            ),
            normal=ColorGroup(
                black="#000000",
                blue="#83769c",
                cyan="#29adff",
                green="#00e756",
                magenta="#ff77a8",
                red="#ff004d",
                white="#5f574f",
                yellow="#fff024",
            ),
        ),
    )
    return {"asam": asam}


class WorkflowRegistry:
    """
    Workflows and themes known to one session.

    Lookups are case-insensitive; loading a record under an existing
    name replaces it.
    """

    def __init__(self):
        self._logger = get_logger('workflows')
        self._workflows: dict[str, Workflow] = {}
        self._themes: dict[str, Theme] = _default_themes()

        for workflow in _default_workflows():
            self.add_workflow(workflow)

    # Workflows

    def add_workflow(self, workflow: Workflow) -> None:
        self._workflows[workflow.name.lower()] = workflow
        self._logger.debug("Workflow registered", context={'name': workflow.name})

    def get_workflow(self, name: str) -> Optional[Workflow]:
        return self._workflows.get(name.lower())

    def list_workflows(self) -> List[Workflow]:
        return list(self._workflows.values())

    def search_workflows(self, query: str) -> List[Workflow]:
        """Workflows whose name, description or any tag contains the query."""
        needle = query.lower()
        results = []

        for workflow in self._workflows.values():
            if needle in workflow.name.lower():
                results.append(workflow)
            elif workflow.description and needle in workflow.description.lower():
                results.append(workflow)
            elif any(needle in tag.lower() for tag in workflow.tags):
                results.append(workflow)

        return results

    @staticmethod
    def render_command(workflow: Workflow, values: Optional[dict[str, str]] = None) -> str:
        """
        Substitute ``{{name}}`` placeholders in a workflow command.

        A supplied value wins, then the argument's declared default.
        Placeholders with neither stay in the text unchanged.
        """
        values = values or {}

        def substitute(match):
            name = match.group(1).strip()
            if name in values:
                return values[name]

            argument = workflow.argument(name)
            if argument is not None and argument.default_value is not None:
                return argument.default_value

            return match.group(0)

        return _PLACEHOLDER.sub(substitute, workflow.command)

    # Themes

    def add_theme(self, name: str, theme: Theme) -> None:
        self._themes[name.lower()] = theme
        self._logger.debug("Theme registered", context={'name': name})

    def get_theme(self, name: str) -> Optional[Theme]:
        return self._themes.get(name.lower())

    def list_themes(self) -> List[str]:
        return list(self._themes.keys())
