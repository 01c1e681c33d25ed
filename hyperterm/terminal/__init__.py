"""
HyperTerm Terminal Module

Output-side building blocks:
- Output line records and the bounded session log
- Command history with recall
- Escape sequence processing into styled segments
"""

from .output import LineKind, OutputLine, LineFactory, OutputLog
from .history import CommandHistory
from .escape import (
    EscapeSequenceProcessor,
    StyleState,
    StyledSegment,
    TextStyle,
    PALETTE,
    strip_sequences,
)

__all__ = [
    'LineKind',
    'OutputLine',
    'LineFactory',
    'OutputLog',
    'CommandHistory',
    'EscapeSequenceProcessor',
    'StyleState',
    'StyledSegment',
    'TextStyle',
    'PALETTE',
    'strip_sequences',
]
