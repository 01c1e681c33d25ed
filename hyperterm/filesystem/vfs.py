"""
Virtual File System (VFS) Module

An in-memory directory tree with current-directory tracking:
- Hierarchical directory tree owned from a single root
- Path resolution (absolute, relative, . and ..)
- Directory listing, file reading, file and directory creation

None of the operations raise on ordinary not-found or already-exists
conditions; they report through boolean or ``None`` results.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, List

from .node import FileNode
from .path_resolver import PathResolver
from .default_tree import build_default_tree
from hyperterm.core.config_loader import FilesystemConfig, get_config
from hyperterm.logger import get_logger


class VirtualFileSystem:
    """
    Virtual File System.

    Each session owns exactly one instance. The current directory is kept
    as a list of segment names; the root is the empty list.

    Example:
        >>> vfs = VirtualFileSystem()
        >>> vfs.change_directory('/home/user')
        True
        >>> vfs.create_file('notes.txt', 'hello')
        True
        >>> vfs.read_file('notes.txt')
        'hello'
    """

    def __init__(
        self,
        root: Optional[FileNode] = None,
        config: Optional[FilesystemConfig] = None
    ):
        self._logger = get_logger('filesystem')
        self._config = config or get_config().filesystem
        self._root = root if root is not None else build_default_tree(
            directory_size=self._config.directory_size,
            directory_permissions=self._config.directory_permissions,
            file_permissions=self._config.file_permissions,
        )
        self._current_path: List[str] = []

    @classmethod
    def empty(cls, config: Optional[FilesystemConfig] = None) -> 'VirtualFileSystem':
        """Create a filesystem with nothing but an empty root directory."""
        cfg = config or get_config().filesystem
        root = FileNode.directory(
            '/',
            permissions=cfg.directory_permissions,
            size=cfg.directory_size,
        )
        return cls(root=root, config=cfg)

    @property
    def root(self) -> FileNode:
        return self._root

    @property
    def current_path(self) -> List[str]:
        """Copy of the current directory segments."""
        return list(self._current_path)

    def current_directory(self) -> FileNode:
        """
        Get the directory node at the current path.

        Falls back to the deepest directory that still exists, which is
        the root at worst.
        """
        current = self._root
        for segment in self._current_path:
            child = current.get_child(segment)
            if child is None or not child.is_directory:
                break
            current = child
        return current

    def current_path_string(self) -> str:
        """The current directory as an absolute path string."""
        return PathResolver.to_string(self._current_path)

    def _walk(self, path: str) -> Optional[tuple[List[str], FileNode]]:
        """
        Walk a path through the tree one component at a time.

        A stack of visited nodes is kept so ``..`` returns to the real
        parent. Every component before the last must name an existing
        directory.

        Returns:
            (segments, node) of the target, or None
        """
        parsed = PathResolver.parse(path)
        names: List[str] = []
        nodes: List[FileNode] = [self._root]

        if not parsed.is_absolute:
            for segment in self._current_path:
                child = nodes[-1].get_child(segment)
                if child is None or not child.is_directory:
                    break
                names.append(segment)
                nodes.append(child)

        for component in parsed.components:
            if not nodes[-1].is_directory:
                return None

            if component == '..':
                if names:
                    names.pop()
                    nodes.pop()
                continue

            child = nodes[-1].get_child(component)
            if child is None:
                return None
            names.append(component)
            nodes.append(child)

        return names, nodes[-1]

    def resolve_path(self, path: str) -> Optional[FileNode]:
        """
        Resolve a path to a node.

        Absolute paths start at the root, relative ones at the current
        directory. ``..`` steps up one level and stops at the root, but
        only after the components before it were found.

        Args:
            path: Path to resolve

        Returns:
            The node, or None if any component is missing or a
            non-final component is not a directory
        """
        found = self._walk(path)
        return found[1] if found is not None else None

    def exists(self, path: str) -> bool:
        """Check if a path exists."""
        return self.resolve_path(path) is not None

    def is_directory(self, path: str) -> bool:
        """Check if a path is a directory."""
        node = self.resolve_path(path)
        return node is not None and node.is_directory

    def is_file(self, path: str) -> bool:
        """Check if a path is a regular file."""
        node = self.resolve_path(path)
        return node is not None and node.is_file

    def list_directory(self, path: Optional[str] = None) -> List[FileNode]:
        """
        List the immediate children of a directory.

        Args:
            path: Directory to list; the current directory if omitted

        Returns:
            Child nodes, or an empty list if the path is missing or
            is not a directory
        """
        target = self.resolve_path(path) if path else self.current_directory()
        if target is None or not target.is_directory:
            return []
        return target.list_children()

    def change_directory(self, path: str) -> bool:
        """
        Change the current directory.

        Args:
            path: Target directory

        Returns:
            True on success; False (state untouched) if the target is
            missing or is not a directory
        """
        if path == '/':
            self._current_path = []
            return True

        if path == '..':
            if self._current_path:
                self._current_path.pop()
            return True

        if path == '.':
            return True

        found = self._walk(path)

        if found is None or not found[1].is_directory:
            self._logger.debug(
                "Directory change rejected",
                context={'path': path}
            )
            return False

        self._current_path = found[0]
        return True

    def read_file(self, path: str) -> Optional[str]:
        """
        Read a file's content.

        Returns:
            The content, or None if the path is missing or a directory
        """
        node = self.resolve_path(path)
        if node is None or not node.is_file:
            return None
        return node.content

    def create_directory(self, name: str) -> bool:
        """
        Create a directory inside the current directory.

        Returns:
            False (no mutation) if the name is invalid or already taken
        """
        if not PathResolver.is_valid_name(name):
            return False

        node = FileNode.directory(
            name,
            permissions=self._config.directory_permissions,
            size=self._config.directory_size,
        )
        created = self.current_directory().add_child(node)

        if created:
            self._logger.debug(
                "Directory created",
                context={'cwd': self.current_path_string(), 'name': name}
            )
        return created

    def create_file(self, name: str, content: str = "") -> bool:
        """
        Create a file inside the current directory.

        Returns:
            False (no mutation) if the name is invalid or already taken
        """
        if not PathResolver.is_valid_name(name):
            return False

        node = FileNode.file(name, content, permissions=self._config.file_permissions)
        created = self.current_directory().add_child(node)

        if created:
            self._logger.debug(
                "File created",
                context={'cwd': self.current_path_string(), 'name': name, 'size': node.size}
            )
        return created
