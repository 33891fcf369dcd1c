"""
Custom exception hierarchy for wish-shell.

Internally every failure has its own exception class so the cause can be
logged and tested. Externally they all collapse into a single, literal
message written to the error stream: the user never sees which kind of
error happened.

Usage:
    from wish_shell.exceptions import ShellError, report_error

    try:
        process.execute()
    except ShellError as e:
        report_error(e)
"""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

# The one and only error text shown to the user
ERROR_MESSAGE = "An error has occurred\n"


class ShellError(Exception):
    """
    Base class for all shell errors.

    All custom exceptions should inherit from this class.
    This allows catching all shell-specific errors with a single except clause.

    Attributes:
        message: Internal description (logged, never shown)
        exit_code: Suggested exit code (default: 1)
    """

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message)
        self.message = message
        self.exit_code = exit_code

    def __str__(self):
        return self.message


# =============================================================================
# Parsing Errors
# =============================================================================

class ParsingError(ShellError):
    """
    Base class for parsing-related errors.

    Raised when a job string cannot be turned into a command.
    """

    def __init__(self, message: str, job: Optional[str] = None):
        super().__init__(message, exit_code=2)
        self.job = job


class InvalidRedirectionError(ParsingError):
    """
    Raised when a redirection is malformed.

    Example:
        raise InvalidRedirectionError("ls >", "missing redirection target")
    """

    def __init__(self, job: str, details: str):
        super().__init__(f"Invalid redirection: {details}", job=job)


class MultipleRedirectionError(ParsingError):
    """
    Raised when a job contains more than one '>' operator.

    Example:
        raise MultipleRedirectionError("ls > a > b")
    """

    def __init__(self, job: str):
        super().__init__("Only one redirection is allowed per command", job=job)


class MissingCommandError(ParsingError):
    """
    Raised when a job has a redirection but nothing to run.

    Example:
        raise MissingCommandError("> out.txt")
    """

    def __init__(self, job: str):
        super().__init__("No command before redirection", job=job)


# =============================================================================
# Command Errors
# =============================================================================

class CommandError(ShellError):
    """
    Base class for command-related errors.

    Raised when a command cannot be dispatched or is misused.
    """

    def __init__(self, command: str, message: str, exit_code: int = 1):
        super().__init__(message, exit_code)
        self.command = command


class CommandNotFoundError(CommandError):
    """
    Raised when a command does not resolve in any search directory.

    Example:
        raise CommandNotFoundError("nonexistent")
    """

    def __init__(self, command: str):
        message = f"{command}: command not found"
        super().__init__(command, message, exit_code=127)


class InvalidArgumentError(CommandError):
    """
    Raised when a built-in gets the wrong number of arguments.

    Example:
        raise InvalidArgumentError("cd", "expected exactly one argument")
    """

    def __init__(self, command: str, details: str):
        super().__init__(command, f"{command}: {details}", exit_code=1)


class DirectoryChangeError(CommandError):
    """
    Raised when ``cd`` cannot change to the requested directory.

    Example:
        raise DirectoryChangeError("/missing", "No such file or directory")
    """

    def __init__(self, path: str, details: str):
        super().__init__("cd", f"cd: {path}: {details}", exit_code=1)
        self.path = path


# =============================================================================
# Execution Errors
# =============================================================================

class ExecutionError(ShellError):
    """
    Base class for process creation and program execution failures.
    """
    pass


class SpawnError(ExecutionError):
    """
    Raised when a child process cannot be created.

    Example:
        raise SpawnError("ls", "Resource temporarily unavailable")
    """

    def __init__(self, command: str, details: str):
        super().__init__(f"Cannot fork for '{command}': {details}")
        self.command = command


class RedirectionOpenError(ExecutionError):
    """
    Raised in a child when the redirection target cannot be opened.

    Example:
        raise RedirectionOpenError("/no/such/dir/out.txt", "No such file or directory")
    """

    def __init__(self, path: str, details: str):
        super().__init__(f"Cannot open {path} for writing: {details}")
        self.path = path


class ExecFailedError(ExecutionError):
    """
    Raised in a child when the program image cannot be replaced.

    Example:
        raise ExecFailedError("/bin/broken", "Exec format error")
    """

    def __init__(self, executable: str, details: str):
        super().__init__(f"Cannot execute {executable}: {details}")
        self.executable = executable


# =============================================================================
# Fatal Errors
# =============================================================================

class FatalShellError(ShellError):
    """
    Raised when the shell cannot continue at all.

    Covers failed startup (bad arguments, unreadable batch file) and memory
    exhaustion while building the search path. Whoever owns the process
    reports it and exits with ``exit_code``.
    """

    def __init__(self, message: str, exit_code: int = 1):
        super().__init__(message, exit_code)


# =============================================================================
# Utility Functions
# =============================================================================

def report_error(error: Optional[BaseException] = None) -> None:
    """
    Write the uniform error message to file descriptor 2.

    The message goes straight to the descriptor so it lands in the right
    place even inside a forked child whose stderr was redirected, and is
    never stuck in a Python-level buffer when the child calls ``os._exit``.

    Args:
        error: The underlying cause, logged at DEBUG level only
    """
    if error is not None:
        logger.debug("error: %s", error)
    os.write(2, ERROR_MESSAGE.encode())
