"""
Tests for the exception hierarchy and the uniform error report.
"""

import pytest

from wish_shell.exceptions import (
    ERROR_MESSAGE,
    CommandError,
    CommandNotFoundError,
    DirectoryChangeError,
    ExecFailedError,
    ExecutionError,
    FatalShellError,
    InvalidArgumentError,
    InvalidRedirectionError,
    MissingCommandError,
    MultipleRedirectionError,
    ParsingError,
    RedirectionOpenError,
    ShellError,
    SpawnError,
    report_error,
)


class TestHierarchy:
    """Test exception classes and their attributes."""

    @pytest.mark.parametrize('error, base', [
        (InvalidRedirectionError('ls >', 'missing target'), ParsingError),
        (MultipleRedirectionError('ls > a > b'), ParsingError),
        (MissingCommandError('> a'), ParsingError),
        (CommandNotFoundError('nope'), CommandError),
        (InvalidArgumentError('cd', 'too many arguments'), CommandError),
        (DirectoryChangeError('/x', 'No such file or directory'), CommandError),
        (SpawnError('ls', 'Resource temporarily unavailable'), ExecutionError),
        (RedirectionOpenError('/x/out', 'No such file or directory'), ExecutionError),
        (ExecFailedError('/bin/x', 'Exec format error'), ExecutionError),
        (FatalShellError('out of memory'), ShellError),
    ])
    def test_subclasses(self, error, base):
        assert isinstance(error, base)
        assert isinstance(error, ShellError)

    def test_command_not_found_exit_code(self):
        error = CommandNotFoundError('nope')
        assert error.exit_code == 127
        assert error.command == 'nope'
        assert str(error) == 'nope: command not found'

    def test_parsing_error_keeps_job(self):
        error = MultipleRedirectionError('ls > a > b')
        assert error.job == 'ls > a > b'
        assert error.exit_code == 2


class TestReportError:
    """Test the single user-visible error message."""

    def test_message_text(self):
        assert ERROR_MESSAGE == 'An error has occurred\n'

    def test_writes_to_stderr(self, capfd):
        report_error()
        out, err = capfd.readouterr()
        assert out == ''
        assert err == ERROR_MESSAGE

    def test_cause_is_not_shown(self, capfd):
        """Test the internal message never reaches the user."""
        report_error(CommandNotFoundError('secret-name'))
        assert capfd.readouterr().err == ERROR_MESSAGE
