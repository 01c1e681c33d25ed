"""
Escape Sequence Processor

Interprets VT100/ANSI control sequences in text and splits it into
styled segments:
- SGR (Select Graphic Rendition): bold, italic, underline, inverse,
  strikethrough, 16-color foreground and background
- Cursor positioning (H, f) and relative moves (A, B, C, D)
- Erase in display/line (J, K), accepted without effect

Style state carries over between calls on the same processor until an
SGR reset (code 0) or a new processor is created.

Author: YSNRFD
Version: 1.0.0
"""

import re
from dataclasses import dataclass, replace
from typing import Iterator, List, Optional

from hyperterm.logger import get_logger


ESC = '\x1b'
CSI = ESC + '['

# Foreground palette indexed by SGR code; backgrounds use code - 10.
PALETTE: dict[int, str] = {
    30: "#000000",  # Black
    31: "#ff0000",  # Red
    32: "#00ff00",  # Green
    33: "#ffff00",  # Yellow
    34: "#0000ff",  # Blue
    35: "#ff00ff",  # Magenta
    36: "#00ffff",  # Cyan
    37: "#ffffff",  # White
    90: "#808080",  # Bright Black (Gray)
    91: "#ff8080",  # Bright Red
    92: "#80ff80",  # Bright Green
    93: "#ffff80",  # Bright Yellow
    94: "#8080ff",  # Bright Blue
    95: "#ff80ff",  # Bright Magenta
    96: "#80ffff",  # Bright Cyan
    97: "#ffffff",  # Bright White
}

_COLOR_CODES = {color: code for code, color in reversed(list(PALETTE.items()))}

_SET_FLAGS = {1: 'bold', 3: 'italic', 4: 'underline', 7: 'inverse', 9: 'strikethrough'}
_CLEAR_FLAGS = {22: 'bold', 23: 'italic', 24: 'underline', 27: 'inverse', 29: 'strikethrough'}

_LEADING_DIGITS = re.compile(r'\d+')


@dataclass(frozen=True)
class TextStyle:
    """Snapshot of the attributes that apply to a run of text."""
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False
    inverse: bool = False
    foreground: Optional[str] = None
    background: Optional[str] = None

    @property
    def is_plain(self) -> bool:
        return self == TextStyle()

    def effective_colors(self) -> tuple[Optional[str], Optional[str]]:
        """
        Colors a renderer should paint with.

        Inverse is kept as a flag rather than baked into the stored
        colors, so the swap happens here.
        """
        if self.inverse:
            return self.background, self.foreground
        return self.foreground, self.background

    def to_sgr(self) -> str:
        """Encode the snapshot as a single SGR sequence."""
        codes = ['0']
        for code, flag in _SET_FLAGS.items():
            if getattr(self, flag):
                codes.append(str(code))
        if self.foreground in _COLOR_CODES:
            codes.append(str(_COLOR_CODES[self.foreground]))
        if self.background in _COLOR_CODES:
            codes.append(str(_COLOR_CODES[self.background] + 10))
        return f"{CSI}{';'.join(codes)}m"


@dataclass
class StyleState:
    """Mutable processor state: cursor plus current text attributes."""
    cursor_x: int = 0
    cursor_y: int = 0
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strikethrough: bool = False
    inverse: bool = False
    foreground: Optional[str] = None
    background: Optional[str] = None

    def snapshot(self) -> TextStyle:
        return TextStyle(
            bold=self.bold,
            italic=self.italic,
            underline=self.underline,
            strikethrough=self.strikethrough,
            inverse=self.inverse,
            foreground=self.foreground,
            background=self.background,
        )

    def reset_attributes(self) -> None:
        """SGR 0: clear every flag and both colors; the cursor stays."""
        self.bold = False
        self.italic = False
        self.underline = False
        self.strikethrough = False
        self.inverse = False
        self.foreground = None
        self.background = None


@dataclass(frozen=True)
class StyledSegment:
    """A run of literal text with the style it was written in."""
    text: str
    style: TextStyle


def _is_terminator(char: str) -> bool:
    return char.isascii() and char.isalpha()


def _parse_params(body: str) -> List[int]:
    params = []
    for token in body.split(';'):
        match = _LEADING_DIGITS.match(token)
        params.append(int(match.group()) if match else 0)
    return params


class EscapeSequenceProcessor:
    """
    Converts text with control sequences into styled segments.

    Example:
        >>> processor = EscapeSequenceProcessor()
        >>> [s.text for s in processor.process("\\x1b[1mBold\\x1b[0m plain")]
        ['Bold', ' plain']
    """

    def __init__(self):
        self._logger = get_logger('escape')
        self._state = StyleState()

    @property
    def state(self) -> StyleState:
        """Copy of the current state."""
        return replace(self._state)

    def reset(self) -> None:
        """Return to the state of a freshly created processor."""
        self._state = StyleState()

    def process(self, text: str) -> List[StyledSegment]:
        """Process text and return all of its segments."""
        return list(self.iter_segments(text))

    def iter_segments(self, text: str) -> Iterator[StyledSegment]:
        """
        Yield segments of text in order.

        A pending literal run is flushed with the style in effect before
        each control sequence. A sequence with no terminator before the
        end of input is dropped.
        """
        pending: List[str] = []
        i = 0
        length = len(text)

        while i < length:
            if text.startswith(CSI, i):
                if pending:
                    yield StyledSegment(''.join(pending), self._state.snapshot())
                    pending = []

                j = i + 2
                while j < length and not _is_terminator(text[j]):
                    j += 1

                if j >= length:
                    self._logger.debug(
                        "Dropped unterminated control sequence",
                        context={'sequence': repr(text[i:])}
                    )
                    return

                self._apply(text[j], text[i + 2:j])
                i = j + 1
            else:
                pending.append(text[i])
                i += 1

        if pending:
            yield StyledSegment(''.join(pending), self._state.snapshot())

    def _apply(self, command: str, body: str) -> None:
        params = _parse_params(body)
        state = self._state

        if command == 'm':
            self._apply_sgr(params)
        elif command in ('H', 'f'):
            row = params[0] if params[0] else 1
            col = params[1] if len(params) > 1 and params[1] else 1
            state.cursor_y = row - 1
            state.cursor_x = col - 1
        elif command == 'A':
            state.cursor_y = max(0, state.cursor_y - (params[0] or 1))
        elif command == 'B':
            state.cursor_y += params[0] or 1
        elif command == 'C':
            state.cursor_x += params[0] or 1
        elif command == 'D':
            state.cursor_x = max(0, state.cursor_x - (params[0] or 1))
        elif command in ('J', 'K'):
            # Erasing is left to whatever renders the segments.
            pass

    def _apply_sgr(self, params: List[int]) -> None:
        state = self._state

        for code in params:
            if code == 0:
                state.reset_attributes()
            elif code in _SET_FLAGS:
                setattr(state, _SET_FLAGS[code], True)
            elif code in _CLEAR_FLAGS:
                setattr(state, _CLEAR_FLAGS[code], False)
            elif code == 39:
                state.foreground = None
            elif code == 49:
                state.background = None
            elif 30 <= code <= 37 or 90 <= code <= 97:
                state.foreground = PALETTE[code]
            elif 40 <= code <= 47 or 100 <= code <= 107:
                state.background = PALETTE[code - 10]


def strip_sequences(text: str) -> str:
    """Remove every control sequence, keeping only literal text."""
    return ''.join(segment.text for segment in EscapeSequenceProcessor().iter_segments(text))
