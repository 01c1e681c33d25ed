"""
HyperTerm Filesystem Module

Provides the in-memory virtual file system:
- File and directory nodes
- Path resolution
- Current directory tracking
"""

from .node import FileNode, FileType
from .path_resolver import PathResolver, ParsedPath
from .vfs import VirtualFileSystem
from .default_tree import DEFAULT_RC_FILES, build_default_tree

__all__ = [
    'FileNode',
    'FileType',
    'PathResolver',
    'ParsedPath',
    'VirtualFileSystem',
    'DEFAULT_RC_FILES',
    'build_default_tree',
]
