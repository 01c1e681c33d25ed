"""
File Node Module

Tree nodes of the virtual filesystem. A directory owns its children by
name; nodes keep no reference to their parent.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, List


DEFAULT_DIRECTORY_SIZE = 4096
DEFAULT_DIRECTORY_PERMISSIONS = "drwxr-xr-x"
DEFAULT_FILE_PERMISSIONS = "-rw-r--r--"


class FileType(Enum):
    """Types of nodes."""
    FILE = "file"
    DIRECTORY = "directory"


@dataclass
class FileNode:
    """
    A file or directory in the virtual filesystem.

    Files carry ``content``; directories carry ``children``. The size of
    a file is always the length of its content.
    """

    name: str
    file_type: FileType
    permissions: str = DEFAULT_FILE_PERMISSIONS
    content: str = ""
    children: dict[str, 'FileNode'] = field(default_factory=dict, repr=False)
    modified: datetime = field(default_factory=datetime.now)
    directory_size: int = field(default=DEFAULT_DIRECTORY_SIZE, repr=False)

    @classmethod
    def directory(
        cls,
        name: str,
        children: Optional[dict[str, 'FileNode']] = None,
        permissions: str = DEFAULT_DIRECTORY_PERMISSIONS,
        size: int = DEFAULT_DIRECTORY_SIZE
    ) -> 'FileNode':
        """Create a directory node."""
        return cls(
            name=name,
            file_type=FileType.DIRECTORY,
            permissions=permissions,
            children=dict(children or {}),
            directory_size=size,
        )

    @classmethod
    def file(
        cls,
        name: str,
        content: str = "",
        permissions: str = DEFAULT_FILE_PERMISSIONS
    ) -> 'FileNode':
        """Create a regular file node."""
        return cls(
            name=name,
            file_type=FileType.FILE,
            permissions=permissions,
            content=content,
        )

    @property
    def is_directory(self) -> bool:
        return self.file_type == FileType.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.file_type == FileType.FILE

    @property
    def size(self) -> int:
        if self.is_directory:
            return self.directory_size
        return len(self.content)

    def get_child(self, name: str) -> Optional['FileNode']:
        """Look up a direct child by name."""
        if not self.is_directory:
            return None
        return self.children.get(name)

    def add_child(self, node: 'FileNode') -> bool:
        """
        Attach a child node.

        Returns:
            False if this is not a directory or the name is taken
        """
        if not self.is_directory or node.name in self.children:
            return False

        self.children[node.name] = node
        self.modified = datetime.now()
        return True

    def list_children(self) -> List['FileNode']:
        """All immediate children, in insertion order."""
        if not self.is_directory:
            return []
        return list(self.children.values())
