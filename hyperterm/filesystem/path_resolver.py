"""
Path Resolver Module

Turns path strings into segment lists for the virtual file system.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass
from typing import List, Sequence


SEPARATOR = '/'


@dataclass
class ParsedPath:
    """A parsed path with its components."""
    is_absolute: bool
    components: List[str]

    def __str__(self) -> str:
        if self.is_absolute:
            return SEPARATOR + SEPARATOR.join(self.components)
        return SEPARATOR.join(self.components) if self.components else '.'


class PathResolver:
    """
    Parses and renders filesystem paths.

    Resolution against the tree itself happens in the VFS, which walks
    the components one node at a time.
    """

    @staticmethod
    def parse(path: str) -> ParsedPath:
        """
        Parse a path into components.

        Empty and ``.`` components are dropped; ``..`` is kept for the
        VFS to apply while walking.
        """
        is_absolute = path.startswith(SEPARATOR)
        components = [c for c in path.split(SEPARATOR) if c and c != '.']
        return ParsedPath(is_absolute=is_absolute, components=components)

    @staticmethod
    def to_string(segments: Sequence[str]) -> str:
        """Render a segment list as an absolute path."""
        if not segments:
            return SEPARATOR
        return SEPARATOR + SEPARATOR.join(segments)

    @staticmethod
    def is_valid_name(name: str) -> bool:
        """Check that a name can be used for a single directory entry."""
        return bool(name) and name not in ('.', '..') and SEPARATOR not in name
