"""
Workflow and Theme Loaders

Parse YAML text into workflow and theme records. Both loaders fail
closed: any YAML error, missing required field or wrongly typed value
gives ``None``, never a partially filled record.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Any, Optional, List

import yaml

from .models import (
    COLOR_NAMES,
    ColorGroup,
    TerminalColors,
    Theme,
    Workflow,
    WorkflowArgument,
)
from hyperterm.logger import get_logger


SHELL_NAMES = ("bash", "zsh", "fish", "powershell")

_logger = get_logger('workflows')


class _SchemaError(ValueError):
    """Internal signal that a document does not match the schema."""


def _load_mapping(text: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise _SchemaError(f"invalid YAML: {e}")

    if not isinstance(data, dict):
        raise _SchemaError("document is not a mapping")
    return data


def _scalar(data: dict[str, Any], key: str, required: bool = False) -> Optional[str]:
    value = data.get(key)
    if value is None:
        if required:
            raise _SchemaError(f"missing field: {key}")
        return None

    if isinstance(value, (dict, list)):
        raise _SchemaError(f"field {key} must be a scalar")

    text = str(value)
    if required and not text.strip():
        raise _SchemaError(f"empty field: {key}")
    return text


def _string_list(data: dict[str, Any], key: str) -> List[str]:
    value = data.get(key)
    if value is None:
        return []

    if isinstance(value, str):
        # Accept a comma separated scalar as shorthand for a list.
        return [item.strip() for item in value.split(',') if item.strip()]

    if not isinstance(value, list) or any(isinstance(v, (dict, list)) for v in value):
        raise _SchemaError(f"field {key} must be a list of strings")
    return [str(v) for v in value]


def _arguments(data: dict[str, Any]) -> List[WorkflowArgument]:
    value = data.get('arguments', data.get('args'))
    if value is None:
        return []

    if not isinstance(value, list):
        raise _SchemaError("arguments must be a list")

    arguments = []
    for entry in value:
        if not isinstance(entry, dict):
            raise _SchemaError("each argument must be a mapping")
        arguments.append(WorkflowArgument(
            name=_scalar(entry, 'name', required=True),
            description=_scalar(entry, 'description'),
            default_value=_scalar(entry, 'default_value'),
        ))
    return arguments


def parse_workflow(text: str) -> Optional[Workflow]:
    """
    Parse a workflow document.

    Required: ``name`` and ``command``. Optional: ``description``,
    ``tags``, ``shells`` (each one of bash, zsh, fish, powershell),
    ``arguments`` (list of ``name``/``description``/``default_value``),
    ``source_url``, ``author``, ``author_url``.

    Returns:
        Workflow, or None if the document is invalid
    """
    try:
        data = _load_mapping(text)
        shells = [s.lower() for s in _string_list(data, 'shells')]
        unknown = [s for s in shells if s not in SHELL_NAMES]
        if unknown:
            raise _SchemaError(f"unknown shells: {', '.join(unknown)}")

        return Workflow(
            name=_scalar(data, 'name', required=True),
            command=_scalar(data, 'command', required=True),
            description=_scalar(data, 'description'),
            tags=_string_list(data, 'tags'),
            shells=shells,
            arguments=_arguments(data),
            source_url=_scalar(data, 'source_url'),
            author=_scalar(data, 'author'),
            author_url=_scalar(data, 'author_url'),
        )
    except _SchemaError as e:
        _logger.debug("Rejected workflow document", context={'reason': str(e)})
        return None


def _color_group(data: Any, group: str) -> ColorGroup:
    if not isinstance(data, dict):
        raise _SchemaError(f"terminal_colors.{group} must be a mapping")

    colors = {}
    for name in COLOR_NAMES:
        colors[name] = _scalar(data, name, required=True)
    return ColorGroup(**colors)


def parse_theme(text: str) -> Optional[Theme]:
    """
    Parse a theme document.

    Required: ``accent``, ``background``, ``foreground`` and a
    ``terminal_colors`` mapping with ``normal`` and ``bright`` groups,
    each naming all eight colors. ``details`` is optional.

    Returns:
        Theme, or None if the document is invalid
    """
    try:
        data = _load_mapping(text)

        palette = data.get('terminal_colors')
        if not isinstance(palette, dict):
            raise _SchemaError("missing field: terminal_colors")

        return Theme(
            accent=_scalar(data, 'accent', required=True),
            background=_scalar(data, 'background', required=True),
            foreground=_scalar(data, 'foreground', required=True),
            details=_scalar(data, 'details') or "darker",
            terminal_colors=TerminalColors(
                normal=_color_group(palette.get('normal'), 'normal'),
                bright=_color_group(palette.get('bright'), 'bright'),
            ),
        )
    except _SchemaError as e:
        _logger.debug("Rejected theme document", context={'reason': str(e)})
        return None
