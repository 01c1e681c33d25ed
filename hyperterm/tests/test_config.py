#!/usr/bin/env python3
"""
HyperTerm Configuration, Logging and Exception Tests

Author: YSNRFD
Version: 1.0.0
"""

import json
import os
import sys
import tempfile
import unittest

from hyperterm.core import ConfigLoader, get_config
from hyperterm.exceptions import (
    AlreadyExistsError,
    CommandException,
    ConfigLoadError,
    ConfigValidationError,
    InternalCommandError,
    InvalidArgumentError,
    NotFoundError,
)
from hyperterm.logger import Logger, LogLevel, get_logger


class TestExceptions(unittest.TestCase):
    """Test the exception hierarchy."""

    def test_rendering(self):
        """Test the single-line error format."""
        self.assertEqual(str(NotFoundError('cd', 'nope')), "cd: nope: No such file or directory")
        self.assertEqual(str(AlreadyExistsError('mkdir', 'docs')), "mkdir: docs: File exists")
        self.assertEqual(str(InvalidArgumentError('cat', 'missing operand')), "cat: missing operand")

    def test_codes(self):
        """Test error codes and hierarchy."""
        self.assertEqual(NotFoundError('cd', 'x').error_code, 4001)
        self.assertEqual(InvalidArgumentError('cd', 'x').error_code, 4002)
        self.assertEqual(AlreadyExistsError('cd', 'x').error_code, 4003)
        self.assertIsInstance(NotFoundError('cd'), CommandException)

    def test_internal_error(self):
        """Test the generic wrapper keeps its cause."""
        cause = RuntimeError("boom")
        exc = InternalCommandError('ls', cause=cause)
        self.assertEqual(str(exc), "Error executing ls")
        self.assertIs(exc.cause, cause)
        self.assertEqual(exc.error_code, 4004)


class TestConfig(unittest.TestCase):
    """Test the configuration system."""

    def tearDown(self):
        ConfigLoader().reset()

    def test_singleton(self):
        """Test that the loader is shared."""
        self.assertIs(ConfigLoader(), ConfigLoader())

    def test_defaults(self):
        """Test values when nothing has been loaded."""
        config = get_config()
        self.assertEqual(config.session.max_output_lines, 1000)
        self.assertEqual(config.session.max_history, 100)
        self.assertEqual(config.session.max_dispatch_lines, 500)
        self.assertEqual(config.shell.default_shell, 'bash')

    def test_load_file(self):
        """Test loading a JSON file with partial sections."""
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'config.json')
            with open(path, 'w', encoding='utf-8') as f:
                json.dump({'shell': {'hostname': 'box'}, 'session': {'max_history': 10}}, f)

            config = ConfigLoader().load(path)

        self.assertEqual(config.shell.hostname, 'box')
        self.assertEqual(config.shell.username, 'user')
        self.assertEqual(config.session.max_history, 10)
        self.assertEqual(get_config().shell.hostname, 'box')

    def test_bundled_config(self):
        """Test that the packaged config.json loads and matches the defaults."""
        import hyperterm
        path = os.path.join(os.path.dirname(hyperterm.__file__), 'config.json')
        config = ConfigLoader().load(path)
        self.assertEqual(config.terminal.welcome_message, "Welcome to Hyper Terminal v1.0.0")

    def test_load_errors(self):
        """Test missing and malformed files."""
        with self.assertRaises(ConfigLoadError):
            ConfigLoader().load('/definitely/not/here.json')

        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'bad.json')
            with open(path, 'w', encoding='utf-8') as f:
                f.write('{not json')
            with self.assertRaises(ConfigLoadError):
                ConfigLoader().load(path)

    def test_validation(self):
        """Test rejected values."""
        with self.assertRaises(ConfigValidationError):
            ConfigLoader().load_dict({'session': {'max_history': 0}})
        with self.assertRaises(ConfigValidationError):
            ConfigLoader().load_dict({'shell': {'default_shell': 'tcsh'}})
        with self.assertRaises(ConfigValidationError):
            ConfigLoader().load_dict({'logging': {'level': 'LOUD'}})

    def test_get_and_set(self):
        """Test dot-notation access."""
        loader = ConfigLoader()
        self.assertEqual(loader.get('session.max_dispatch_lines'), 500)
        self.assertEqual(loader.get('session.nope', 'fallback'), 'fallback')

        loader.set('shell.hostname', 'devbox')
        self.assertEqual(loader.get('shell.hostname'), 'devbox')

        with self.assertRaises(ConfigValidationError):
            loader.set('session.max_history', -1)
        self.assertEqual(loader.get('session.max_history'), 100)

        with self.assertRaises(ConfigValidationError):
            loader.set('shell.nope', 1)

    def test_to_dict(self):
        """Test dictionary export."""
        data = ConfigLoader().to_dict()
        self.assertEqual(data['session']['max_command_length'], 100)


class TestLogger(unittest.TestCase):
    """Test the logging system."""

    def test_logger_singleton(self):
        """Test one instance per subsystem."""
        Logger.initialize(level=LogLevel.DEBUG, console_output=False)

        self.assertIs(Logger('test1'), Logger('test1'))
        self.assertIs(get_logger('test1'), Logger('test1'))
        self.assertIsNot(Logger('test1'), Logger('test2'))

    def test_session_logs(self):
        """Test the in-memory log buffer."""
        Logger.initialize(level=LogLevel.DEBUG, console_output=False)

        get_logger('test3').warning("Something odd", session='7', context={'k': 'v'})
        logs = Logger.get_session_logs(subsystem='test3')

        self.assertTrue(logs)
        self.assertEqual(logs[-1]['message'], "Something odd")
        self.assertEqual(logs[-1]['session'], '7')
        self.assertEqual(logs[-1]['context'], {'k': 'v'})


def run_tests():
    """Run all tests."""
    loader = unittest.TestLoader()
    suite = loader.loadTestsFromModule(sys.modules[__name__])

    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    return 0 if result.wasSuccessful() else 1


if __name__ == '__main__':
    sys.exit(run_tests())
