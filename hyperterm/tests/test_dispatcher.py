#!/usr/bin/env python3
"""
HyperTerm Dispatcher and Built-in Command Tests

Author: YSNRFD
Version: 1.0.0
"""

import sys
import unittest

from hyperterm.session import TerminalSession
from hyperterm.shell import HELP_TEXT, CommandParser
from hyperterm.terminal import LineKind


THEME_YAML = """accent: "#112233"
background: "#000000"
foreground: "#eeeeee"
terminal_colors:
  normal: {black: "#000000", red: "#aa0000", green: "#00aa00", yellow: "#aaaa00", blue: "#0000aa", magenta: "#aa00aa", cyan: "#00aaaa", white: "#aaaaaa"}
  bright: {black: "#555555", red: "#ff5555", green: "#55ff55", yellow: "#ffff55", blue: "#5555ff", magenta: "#ff55ff", cyan: "#55ffff", white: "#ffffff"}
"""


class TestCommandParser(unittest.TestCase):
    """Test command line parsing."""

    def test_parse(self):
        """Test whitespace splitting and lower-casing."""
        cmd = CommandParser().parse("  LS   -la  /home ")
        self.assertEqual(cmd.command, "ls")
        self.assertEqual(cmd.args, ["-la", "/home"])
        self.assertEqual(cmd.remainder, "-la  /home")
        self.assertEqual(cmd.arg(5, "x"), "x")

    def test_blank(self):
        """Test empty input."""
        self.assertEqual(CommandParser().parse("   ").command, "")


class DispatcherTestCase(unittest.TestCase):
    """Shared helpers."""

    def setUp(self):
        self.session = TerminalSession("test")

    def run_command(self, line):
        return self.session.dispatcher.dispatch(line)

    def texts(self, line):
        return [out.text for out in self.run_command(line)]


class TestDispatcher(DispatcherTestCase):
    """Test the dispatch pipeline."""

    def test_empty_input(self):
        """Test that blank input yields nothing."""
        self.assertEqual(self.run_command(""), [])
        self.assertEqual(self.run_command("    "), [])

    def test_unknown_command(self):
        """Test the not-found line."""
        lines = self.run_command("frobnicate now")
        self.assertEqual(len(lines), 1)
        self.assertEqual(lines[0].kind, LineKind.ERROR)
        self.assertEqual(
            lines[0].text,
            'Command not found: frobnicate. Type "help" for available commands.'
        )

    def test_command_name_is_case_insensitive(self):
        """Test that PWD runs pwd."""
        self.assertEqual(self.texts("PWD"), ["/"])

    def test_echo(self):
        """Test the echo prefix rule."""
        lines = self.run_command("echo hi there")
        self.assertEqual([l.text for l in lines], ["hi there"])
        self.assertEqual(lines[0].kind, LineKind.OUTPUT)

    def test_echo_prefix(self):
        """Test that any name starting with echo echoes its arguments."""
        self.assertEqual(self.texts("echoing a b"), ["a b"])
        self.assertEqual(self.texts("echo"), [""])

    def test_overlong_command(self):
        """Test that very long command names are rejected."""
        lines = self.run_command("x" * 101)
        self.assertEqual([l.text for l in lines], ["Invalid command"])
        self.assertEqual(lines[0].kind, LineKind.ERROR)

    def test_output_truncated(self):
        """Test that a handler's output is capped per dispatch."""
        self.session.dispatcher.builtins.register('flood', lambda cmd: [str(i) for i in range(600)])

        lines = self.run_command("flood")
        self.assertEqual(len(lines), 500)
        self.assertEqual(lines[-1].text, "499")

    def test_handler_crash_is_contained(self):
        """Test that an unexpected exception becomes one error line."""
        def broken(cmd):
            raise RuntimeError("boom")

        self.session.dispatcher.builtins.register('broken', broken)
        lines = self.run_command("broken")

        self.assertEqual([l.text for l in lines], ["Error executing broken"])
        self.assertEqual(lines[0].kind, LineKind.ERROR)

    def test_alias_expansion(self):
        """Test that aliases are applied before lookup."""
        self.session.profiles.set_alias('where', 'pwd')
        self.assertEqual(self.texts("where"), ["/"])


class TestFilesystemCommands(DispatcherTestCase):
    """Test ls, cd, pwd, mkdir, touch and cat."""

    def test_ls_empty_directory(self):
        """Test the empty listing line."""
        self.run_command("cd /home/user/documents")
        self.assertEqual(self.texts("ls"), ["Directory is empty"])

    def test_ls_format(self):
        """Test one line per entry with a trailing slash on directories."""
        lines = self.texts("ls /usr")
        self.assertEqual(len(lines), 1)
        self.assertTrue(lines[0].startswith("drwxr-xr-x     4096 "))
        self.assertTrue(lines[0].endswith(" bin/"))

    def test_ls_ignores_flags(self):
        """Test that option flags do not count as paths."""
        self.run_command("cd /usr")
        self.assertEqual(self.texts("ls -la"), self.texts("ls"))

    def test_cd_and_pwd(self):
        """Test moving around."""
        self.assertEqual(self.run_command("cd /home/user"), [])
        self.assertEqual(self.texts("pwd"), ["/home/user"])
        self.run_command("cd ..")
        self.assertEqual(self.texts("pwd"), ["/home"])
        self.run_command("cd")
        self.assertEqual(self.texts("pwd"), ["/"])

    def test_cd_missing(self):
        """Test the cd error line."""
        lines = self.run_command("cd nope")
        self.assertEqual([l.text for l in lines], ["cd: nope: No such file or directory"])
        self.assertEqual(lines[0].kind, LineKind.ERROR)
        self.assertEqual(self.texts("pwd"), ["/"])

    def test_mkdir(self):
        """Test creation and the duplicate error."""
        self.assertEqual(self.run_command("mkdir projects"), [])
        self.assertEqual(self.texts("mkdir projects"), ["mkdir: projects: File exists"])
        self.assertEqual(self.texts("mkdir"), ["mkdir: missing operand"])

    def test_touch_and_cat(self):
        """Test creating an empty file and reading it back."""
        self.assertEqual(self.run_command("touch notes.txt"), [])
        self.assertEqual(self.run_command("touch notes.txt"), [])
        self.assertEqual(self.texts("cat notes.txt"), [""])

    def test_cat(self):
        """Test multi-line output and errors."""
        self.assertEqual(
            self.texts("cat /home/user/welcome.txt"),
            ["Welcome to Hyper Terminal!", "This is a simulated file system."]
        )
        self.assertEqual(self.texts("cat missing.txt"), ["cat: missing.txt: No such file or directory"])
        self.assertEqual(self.texts("cat"), ["cat: missing operand"])


class TestInfoCommands(DispatcherTestCase):
    """Test fixed-text commands."""

    def test_help(self):
        """Test the help listing."""
        lines = self.texts("help")
        self.assertEqual(lines, HELP_TEXT)
        self.assertEqual(lines[0], "Available commands:")

    def test_clear_dispatch(self):
        """Test that clear is known to the dispatcher."""
        self.assertTrue(self.session.dispatcher.builtins.is_builtin("clear"))
        self.assertEqual(self.run_command("clear"), [])

    def test_identity(self):
        """Test whoami, uname and version."""
        self.assertEqual(self.texts("whoami"), ["user"])
        self.assertTrue(self.texts("uname")[0].startswith("Hyper Terminal v1.0.0"))
        self.assertEqual(len(self.texts("version")), 3)
        self.assertEqual(len(self.texts("date")), 1)


class TestShellCommands(DispatcherTestCase):
    """Test shell, source, env, export, alias and history."""

    def test_shell(self):
        """Test showing and switching personas."""
        self.assertEqual(self.texts("shell"), ["Current shell: Bash"])
        self.assertEqual(self.texts("shell zsh"), ["Switched to Zsh"])
        self.assertEqual(
            self.texts("shell tcsh"),
            ["shell: tcsh: Available shells: bash, zsh, fish, powershell"]
        )
        self.assertEqual(self.texts("shell"), ["Current shell: Zsh"])

    def test_source(self):
        """Test loading an rc file and using an alias from it."""
        self.assertEqual(
            self.texts("source /home/user/.bashrc"),
            ["Loaded configuration from /home/user/.bashrc"]
        )
        self.run_command("cd /home/user")
        self.assertEqual(self.texts("ll"), self.texts("ls"))
        self.assertEqual(self.texts("source nope"), ["source: nope: No such file or directory"])

    def test_export_and_env(self):
        """Test setting a variable."""
        self.assertEqual(self.run_command("export FOO=bar"), [])
        self.assertIn("FOO=bar", self.texts("env"))
        self.assertEqual(self.texts("export =x"), ["export: =x: not a valid identifier"])

    def test_export_is_all_or_nothing(self):
        """Test that one bad argument leaves every variable unset."""
        self.assertEqual(self.texts("export AAA=1 bad"), ["export: bad: not a valid identifier"])
        self.assertIsNone(self.session.profiles.get_variable('AAA'))

        self.assertEqual(self.run_command("export AAA=1 BBB=2"), [])
        self.assertEqual(self.session.profiles.get_variable('BBB'), '2')

    def test_alias(self):
        """Test defining and listing aliases."""
        self.assertEqual(self.run_command("alias here='pwd'"), [])
        self.assertIn("alias here='pwd'", self.texts("alias"))
        self.assertEqual(self.texts("here"), ["/"])

    def test_history(self):
        """Test the numbered listing."""
        self.session.submit("pwd")
        self.session.submit("whoami")
        self.assertEqual(self.texts("history"), ["1  pwd", "2  whoami"])


class TestWorkflowCommands(DispatcherTestCase):
    """Test workflow and theme commands."""

    def test_workflows_listing(self):
        """Test the listing and its usage footer."""
        lines = self.texts("workflows")
        self.assertEqual(lines[0], "Available workflows:")
        self.assertIn("  Git Status - Show the working tree status", lines)
        self.assertIn("    Arguments: path, pattern", lines)

    def test_workflows_search(self):
        """Test searching."""
        self.assertEqual(self.texts("workflows search docker")[0], "Found 1 workflow(s):")
        self.assertEqual(self.texts("workflows search zzz"), ["No workflows found matching: zzz"])

    def test_workflow_render(self):
        """Test a multi-word name followed by arguments."""
        lines = self.texts("workflow Find Files pattern=*.py")
        self.assertEqual(lines[0], "Executing workflow: Find Files")
        self.assertEqual(lines[1], "Command: find . -name '*.py'")

    def test_workflow_missing(self):
        """Test the unknown workflow error."""
        self.assertEqual(self.texts("workflow nope"), ["workflow: nope: Workflow not found"])

    def test_load_workflow(self):
        """Test loading a workflow from the filesystem."""
        self.session.filesystem.create_file(
            'hello.yml', 'name: Hello\ncommand: echo hello {{who}}\ndescription: Greets'
        )
        lines = self.texts("load-workflow hello.yml")
        self.assertEqual(lines[0], "Loaded workflow: Hello")

        self.assertEqual(self.texts("workflow hello who=world")[1], "Command: echo hello world")

    def test_load_workflow_invalid(self):
        """Test a malformed document."""
        self.session.filesystem.create_file('bad.yml', 'name: [unclosed')
        self.assertEqual(
            self.texts("load-workflow bad.yml"),
            ["load-workflow: bad.yml: Invalid workflow format"]
        )

    def test_themes(self):
        """Test loading and switching themes."""
        self.session.filesystem.create_file('mine.yml', THEME_YAML)

        lines = self.texts("load-theme mine mine.yml")
        self.assertEqual(lines[0], "Loaded theme: mine")
        self.assertIn("  mine", self.texts("themes"))

        self.assertEqual(self.texts("theme mine"), ["Switched to theme: mine"])
        self.assertEqual(self.session.active_theme, "mine")
        self.assertEqual(self.texts("theme nope"), ["theme: nope: Theme not found"])

    def test_vt100(self):
        """Test the escape sequence demos produce output."""
        self.assertEqual(self.texts("vt100")[1], "\x1b[1mBold text\x1b[0m")
        self.assertEqual(len(self.texts("vt100 colors")), 8)
        self.assertEqual(self.texts("vt100 other")[0], "VT100 Test Options:")
        self.assertTrue(self.texts("vt100-demo"))
        self.assertTrue(self.texts("vt100-colors"))


def run_tests():
    """Run all tests."""
    loader = unittest.TestLoader()
    suite = loader.loadTestsFromModule(sys.modules[__name__])

    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    return 0 if result.wasSuccessful() else 1


if __name__ == '__main__':
    sys.exit(run_tests())
