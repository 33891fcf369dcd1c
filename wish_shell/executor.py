"""
ShellExecutor - runs raw command lines.

A line without '&' is parsed and executed right here, so built-ins like
``cd`` and ``path`` change the shell itself. A line with one or more '&'
is split into jobs, each forked into its own child, and the executor
returns only after every child has terminated.
"""

import logging
from typing import Optional

from .builtins import get_builtin, is_builtin
from .context import CommandContext
from .exceptions import ParsingError, SpawnError, report_error
from .exit_codes import EXIT_SUCCESS
from .job_manager import JobManager
from .parser import JOB_SEPARATOR, CommandParser, ParsedCommand
from .process import Process
from .runner import ExternalRunner

logger = logging.getLogger(__name__)


class ShellExecutor:
    """Parses lines and dispatches their jobs"""

    def __init__(self, context: CommandContext, parser: Optional[CommandParser] = None):
        self.context = context
        self.parser = parser or CommandParser()
        self.external_runner = ExternalRunner()

    def execute_line(self, line: str) -> None:
        """
        Execute one raw input line.

        Blank lines do nothing. If forking fails part way through a
        parallel line, the children already started are still waited on
        before the error is reported and the rest of the line is dropped.

        Args:
            line: Line as read, trailing newline included or not
        """
        line = self.parser.clean_line(line)
        if self.parser.is_blank(line):
            return

        if JOB_SEPARATOR not in line:
            self.execute_job(line)
            return

        jobs = JobManager(self.execute_job)
        try:
            for job in self.parser.split_jobs(line):
                jobs.launch(job)
        except SpawnError as e:
            jobs.wait_for_all()
            report_error(e)
            return
        jobs.wait_for_all()

    def execute_job(self, job: str) -> int:
        """
        Parse and execute a single job in the current process.

        Args:
            job: Job text without '&'

        Returns:
            Exit code of the job; 0 for an empty job
        """
        try:
            parsed = self.parser.parse_job(job)
        except ParsingError as e:
            report_error(e)
            return e.exit_code

        if parsed is None:
            return EXIT_SUCCESS

        return self.create_process(parsed).execute()

    def create_process(self, parsed: ParsedCommand) -> Process:
        """
        Bind a parsed command to its executor.

        Built-ins win over anything on the search path.
        """
        if is_builtin(parsed.command):
            executor = get_builtin(parsed.command)
            logger.debug("dispatching %r to builtin", parsed)
        else:
            executor = self.external_runner
            logger.debug("dispatching %r to external", parsed)
        return Process(
            command=parsed.command,
            args=parsed.args[1:],
            redirect=parsed.redirect,
            executor=executor,
            context=self.context,
        )
