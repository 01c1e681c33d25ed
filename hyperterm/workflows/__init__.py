"""
HyperTerm Workflows Module

Parameterized command templates and color themes loaded from YAML.
"""

from .models import (
    COLOR_NAMES,
    ColorGroup,
    TerminalColors,
    Theme,
    Workflow,
    WorkflowArgument,
)
from .loader import parse_theme, parse_workflow
from .registry import WorkflowRegistry

__all__ = [
    'COLOR_NAMES',
    'ColorGroup',
    'TerminalColors',
    'Theme',
    'Workflow',
    'WorkflowArgument',
    'parse_theme',
    'parse_workflow',
    'WorkflowRegistry',
]
