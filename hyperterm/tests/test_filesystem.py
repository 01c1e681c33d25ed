#!/usr/bin/env python3
"""
HyperTerm Filesystem Tests

Run with: python -m pytest hyperterm/tests/test_filesystem.py -v

Author: YSNRFD
Version: 1.0.0
"""

import sys
import unittest

from hyperterm.filesystem import (
    FileNode,
    FileType,
    PathResolver,
    VirtualFileSystem,
    DEFAULT_RC_FILES,
)


class TestPathResolver(unittest.TestCase):
    """Test path parsing and rendering."""

    def test_parse(self):
        """Test splitting a path into components."""
        parsed = PathResolver.parse('/home//user/./docs/')
        self.assertTrue(parsed.is_absolute)
        self.assertEqual(parsed.components, ['home', 'user', 'docs'])
        self.assertEqual(str(parsed), '/home/user/docs')

        parsed = PathResolver.parse('docs')
        self.assertFalse(parsed.is_absolute)

    def test_to_string(self):
        """Test rendering segments as a path."""
        self.assertEqual(PathResolver.to_string([]), '/')
        self.assertEqual(PathResolver.to_string(['home', 'user']), '/home/user')

    def test_valid_names(self):
        """Test entry name validation."""
        self.assertTrue(PathResolver.is_valid_name('notes.txt'))
        self.assertFalse(PathResolver.is_valid_name(''))
        self.assertFalse(PathResolver.is_valid_name('..'))
        self.assertFalse(PathResolver.is_valid_name('a/b'))


class TestFileNode(unittest.TestCase):
    """Test file and directory nodes."""

    def test_sizes(self):
        """Test that files report content length and directories a fixed size."""
        self.assertEqual(FileNode.file('a', 'hello').size, 5)
        self.assertEqual(FileNode.directory('d', size=4096).size, 4096)

    def test_add_child(self):
        """Test attaching children."""
        parent = FileNode.directory('d')
        self.assertTrue(parent.add_child(FileNode.file('a')))
        self.assertFalse(parent.add_child(FileNode.file('a')))
        self.assertFalse(FileNode.file('f').add_child(FileNode.file('a')))
        self.assertEqual(parent.get_child('a').file_type, FileType.FILE)


class TestVirtualFileSystem(unittest.TestCase):
    """Test the virtual file system."""

    def setUp(self):
        self.vfs = VirtualFileSystem()

    def test_starts_at_root(self):
        """Test the initial current directory."""
        self.assertEqual(self.vfs.current_path_string(), '/')
        self.assertEqual(self.vfs.current_path, [])

    def test_seeded_tree(self):
        """Test the default tree contents."""
        self.assertTrue(self.vfs.is_file('/home/user/welcome.txt'))
        self.assertTrue(self.vfs.is_directory('/home/user/documents'))
        self.assertTrue(self.vfs.is_directory('/usr/bin'))
        for path, _ in DEFAULT_RC_FILES.values():
            self.assertTrue(self.vfs.is_file(path), path)

    def test_resolve_matches_change_directory(self):
        """A path that resolves to a directory can be entered, and vice versa."""
        for path in ('/home', '/home/user', 'home/user/..', '/usr/bin', '/nope', '/home/user/welcome.txt'):
            vfs = VirtualFileSystem()
            node = vfs.resolve_path(path)
            expected = node is not None and node.is_directory
            self.assertEqual(vfs.change_directory(path), expected, path)

    def test_dotdot_paths(self):
        """Test .. inside paths, clamped at the root."""
        self.assertIs(self.vfs.resolve_path('/home/../usr'), self.vfs.resolve_path('/usr'))
        self.assertIs(self.vfs.resolve_path('../../..'), self.vfs.root)

        self.vfs.change_directory('/home/user')
        self.assertTrue(self.vfs.change_directory('documents/../..'))
        self.assertEqual(self.vfs.current_path_string(), '/home')

    def test_dotdot_after_missing_name_fails(self):
        """Test that .. cannot cancel a component that does not exist."""
        self.assertFalse(self.vfs.change_directory('nope/..'))
        self.assertEqual(self.vfs.current_path_string(), '/')

        self.vfs.change_directory('/home/user')
        self.assertIsNone(self.vfs.read_file('ghost/../welcome.txt'))
        self.assertIsNone(self.vfs.resolve_path('ghost/..'))
        self.assertEqual(self.vfs.read_file('documents/../welcome.txt'), self.vfs.read_file('welcome.txt'))

    def test_dotdot_through_file_fails(self):
        """Test that a file cannot be stepped through."""
        self.vfs.change_directory('/home/user')
        self.assertIsNone(self.vfs.resolve_path('welcome.txt/..'))
        self.assertFalse(self.vfs.change_directory('welcome.txt/..'))
        self.assertIsNone(self.vfs.read_file('welcome.txt/x'))
        self.assertEqual(self.vfs.current_path_string(), '/home/user')

    def test_failed_change_directory_keeps_state(self):
        """Test that a failed cd leaves the current directory alone."""
        self.vfs.change_directory('/home/user')
        self.assertFalse(self.vfs.change_directory('nope'))
        self.assertFalse(self.vfs.change_directory('welcome.txt'))
        self.assertEqual(self.vfs.current_path_string(), '/home/user')

    def test_change_directory_special_forms(self):
        """Test /, .. and . targets."""
        self.vfs.change_directory('/home/user')
        self.assertTrue(self.vfs.change_directory('..'))
        self.assertEqual(self.vfs.current_path_string(), '/home')
        self.assertTrue(self.vfs.change_directory('.'))
        self.assertEqual(self.vfs.current_path_string(), '/home')
        self.assertTrue(self.vfs.change_directory('/'))
        self.assertEqual(self.vfs.current_path_string(), '/')
        self.assertTrue(self.vfs.change_directory('..'))
        self.assertEqual(self.vfs.current_path_string(), '/')

    def test_current_path_is_a_copy(self):
        """Test that callers cannot mutate the current path."""
        self.vfs.change_directory('/home')
        self.vfs.current_path.append('user')
        self.assertEqual(self.vfs.current_path_string(), '/home')

    def test_create_directory(self):
        """Test directory creation and duplicates."""
        self.vfs.change_directory('/home/user')
        self.assertTrue(self.vfs.create_directory('projects'))
        self.assertFalse(self.vfs.create_directory('projects'))
        self.assertFalse(self.vfs.create_directory('welcome.txt'))
        self.assertTrue(self.vfs.is_directory('/home/user/projects'))

        names = [node.name for node in self.vfs.list_directory()]
        self.assertEqual(names.count('projects'), 1)

    def test_create_file_duplicate_keeps_content(self):
        """Test that creating an existing name fails without changes."""
        self.vfs.create_file('a.txt', 'first')
        self.assertFalse(self.vfs.create_file('a.txt', 'second'))
        self.assertEqual(self.vfs.read_file('a.txt'), 'first')

    def test_invalid_names_rejected(self):
        """Test that path-like names are not created."""
        self.assertFalse(self.vfs.create_file('a/b'))
        self.assertFalse(self.vfs.create_directory('..'))
        self.assertFalse(self.vfs.create_directory(''))

    def test_read_file_round_trip(self):
        """Test that content comes back unchanged, newlines included."""
        content = "line one\nline two\n\nlast"
        self.vfs.create_file('multi.txt', content)
        self.assertEqual(self.vfs.read_file('multi.txt'), content)
        self.assertEqual(self.vfs.read_file('/multi.txt'), content)

    def test_read_file_missing_or_directory(self):
        """Test read_file on paths that are not files."""
        self.assertIsNone(self.vfs.read_file('missing.txt'))
        self.assertIsNone(self.vfs.read_file('/home'))

    def test_list_directory(self):
        """Test listing a given path and missing paths."""
        names = [node.name for node in self.vfs.list_directory('/home/user')]
        self.assertIn('welcome.txt', names)
        self.assertIn('documents', names)
        self.assertEqual(self.vfs.list_directory('/nope'), [])
        self.assertEqual(self.vfs.list_directory('/home/user/welcome.txt'), [])

    def test_empty_filesystem(self):
        """Test the bare-root constructor."""
        vfs = VirtualFileSystem.empty()
        self.assertEqual(vfs.list_directory(), [])

    def test_sessions_do_not_share_trees(self):
        """Test that two filesystems are independent."""
        other = VirtualFileSystem()
        self.vfs.create_file('only-here.txt')
        self.assertFalse(other.exists('/only-here.txt'))


def run_tests():
    """Run all tests."""
    loader = unittest.TestLoader()
    suite = loader.loadTestsFromModule(sys.modules[__name__])

    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    return 0 if result.wasSuccessful() else 1


if __name__ == '__main__':
    sys.exit(run_tests())
