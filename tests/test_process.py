"""
Tests for Process class.

Tests cover:
- Process initialization
- Argument vector construction
- Exit code management
- Error reporting and propagation during execution
"""

import pytest

from wish_shell.context import CommandContext
from wish_shell.control_flow import ExitShell
from wish_shell.exceptions import ERROR_MESSAGE, FatalShellError, InvalidArgumentError
from wish_shell.process import Process


class TestProcessInitialization:
    """Test Process class initialization."""

    def test_process_creation_with_minimal_args(self):
        process = Process(command='test', args=['arg1', 'arg2'])

        assert process.command == 'test'
        assert process.args == ['arg1', 'arg2']
        assert process.redirect is None
        assert isinstance(process.context, CommandContext)
        assert process.exit_code == 0

    def test_argv_starts_with_command(self):
        """Test argv[0] is the command name as typed."""
        process = Process(command='ls', args=['-l'])
        assert process.argv == ['ls', '-l']

    def test_repr(self):
        process = Process(command='ls', args=['-l'], redirect='out.txt')
        assert repr(process) == 'Process(ls -l > out.txt)'


class TestProcessExecution:
    """Test process execution."""

    def test_execute_returns_exit_code(self):
        process = Process(command='test', args=[], executor=lambda p: 5)
        assert process.execute() == 5
        assert process.exit_code == 5

    def test_executor_receives_process(self):
        seen = []
        process = Process(command='test', args=['a'], executor=lambda p: seen.append(p) or 0)
        process.execute()
        assert seen == [process]

    def test_no_executor(self, capfd):
        process = Process(command='nothing', args=[])
        assert process.execute() == 127
        assert capfd.readouterr().err == ERROR_MESSAGE

    def test_shell_error_reported(self, capfd):
        def executor(process):
            raise InvalidArgumentError('test', 'too many arguments')

        process = Process(command='test', args=[], executor=executor)
        assert process.execute() == 1
        assert capfd.readouterr().err == ERROR_MESSAGE

    def test_unexpected_error_reported(self, capfd):
        def executor(process):
            raise RuntimeError('boom')

        process = Process(command='test', args=[], executor=executor)
        assert process.execute() == 1
        assert capfd.readouterr().err == ERROR_MESSAGE

    def test_control_flow_propagates(self):
        def executor(process):
            raise ExitShell(0)

        with pytest.raises(ExitShell):
            Process(command='exit', args=[], executor=executor).execute()

    def test_fatal_error_propagates(self, capfd):
        def executor(process):
            raise FatalShellError('out of memory')

        with pytest.raises(FatalShellError):
            Process(command='path', args=[], executor=executor).execute()
        assert capfd.readouterr().err == ''
