"""Process class for a single parsed command"""

import logging
from typing import Callable, List, Optional

from .context import CommandContext
from .control_flow import ControlFlowException
from .exceptions import CommandNotFoundError, FatalShellError, ShellError, report_error
from .exit_codes import EXIT_FAILURE

logger = logging.getLogger(__name__)


class Process:
    """Represents one command of a job, bound to the code that runs it"""

    def __init__(
        self,
        command: str,
        args: List[str],
        redirect: Optional[str] = None,
        executor: Optional[Callable[['Process'], int]] = None,
        context: Optional[CommandContext] = None,
    ):
        """
        Initialize a process

        Args:
            command: Command name, exactly as typed
            args: Command arguments (without the command name)
            redirect: File receiving stdout and stderr, or None
            executor: Callable that executes the command
            context: CommandContext for this execution
        """
        self.command = command
        self.args = args
        self.redirect = redirect
        self.executor = executor
        self.context = context if context is not None else CommandContext()
        self.exit_code = 0

    @property
    def argv(self) -> List[str]:
        """Full argument vector; argv[0] is the unresolved command name"""
        return [self.command] + self.args

    def execute(self) -> int:
        """
        Execute the process

        Any ShellError is reported with the uniform message and turned into
        an exit code. Control flow requests and fatal errors propagate.

        Returns:
            Exit code (0 for success, non-zero for error)
        """
        if self.executor is None:
            error = CommandNotFoundError(self.command)
            report_error(error)
            self.exit_code = error.exit_code
            return self.exit_code

        try:
            self.exit_code = self.executor(self)
        except (ControlFlowException, FatalShellError):
            raise
        except ShellError as e:
            report_error(e)
            self.exit_code = e.exit_code
        except Exception as e:
            logger.debug("unexpected failure in '%s'", self.command, exc_info=True)
            report_error(e)
            self.exit_code = EXIT_FAILURE

        return self.exit_code

    def __repr__(self):
        args_str = ' '.join(self.args) if self.args else ''
        target = f" > {self.redirect}" if self.redirect is not None else ''
        return f"Process({self.command} {args_str}{target})"
