"""
External command execution.

An external command runs in a freshly forked child. The child sets up the
optional output redirection and replaces itself with the resolved program;
the parent blocks until that child is gone.
"""

import logging
import os

from .exceptions import (
    CommandNotFoundError,
    ExecFailedError,
    RedirectionOpenError,
    ShellError,
    SpawnError,
    report_error,
)
from .exit_codes import EXIT_FAILURE, EXIT_SUCCESS
from .process import Process
from .utils.io_wrappers import flush_std_streams

logger = logging.getLogger(__name__)

# O_WRONLY | O_CREAT | O_TRUNC with rw-r--r--
REDIRECT_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
REDIRECT_MODE = 0o644


class ExternalRunner:
    """Runs a Process as a child program found on the search path"""

    def __call__(self, process: Process) -> int:
        return self.run(process)

    def run(self, process: Process) -> int:
        """
        Resolve, fork, exec and wait.

        The child's exit status is logged but not returned: the shell does
        not act on it.

        Args:
            process: Process to run; its argv is passed to the program as is

        Returns:
            Always 0 once the child has been waited on

        Raises:
            CommandNotFoundError: Name not found on the search path (no fork)
            SpawnError: fork() failed
        """
        executable = process.context.resolve_command(process.command)
        if executable is None:
            raise CommandNotFoundError(process.command)

        flush_std_streams()
        try:
            pid = os.fork()
        except OSError as e:
            raise SpawnError(process.command, e.strerror or str(e))

        if pid == 0:
            self._exec_child(executable, process)

        logger.debug("forked %d for %r", pid, process)
        _, status = os.waitpid(pid, 0)
        logger.debug("child %d exited with status %d", pid, status)
        return EXIT_SUCCESS

    def _exec_child(self, executable: str, process: Process) -> None:
        """
        Child side of run(). Never returns.

        On any failure the uniform error goes to the child's stderr, which
        may already point at the redirection file.
        """
        try:
            if process.redirect is not None:
                self._redirect_output(process.redirect)
            try:
                os.execv(executable, process.argv)
            except (OSError, ValueError) as e:
                # ValueError: an argument holds a NUL byte
                raise ExecFailedError(executable, getattr(e, "strerror", None) or str(e))
        except ShellError as e:
            report_error(e)
        finally:
            os._exit(EXIT_FAILURE)

    @staticmethod
    def _redirect_output(target: str) -> None:
        """
        Point stdout and stderr at target, sharing one open file.

        Both descriptors refer to the same open file description, so writes
        from either stream interleave in order at a single offset.

        Raises:
            RedirectionOpenError: If target cannot be opened for writing
        """
        try:
            fd = os.open(target, REDIRECT_FLAGS, REDIRECT_MODE)
        except (OSError, ValueError) as e:
            raise RedirectionOpenError(target, getattr(e, "strerror", None) or str(e))
        os.dup2(fd, 1)
        os.dup2(fd, 2)
        if fd > 2:
            os.close(fd)
