"""Parallel job management for wish-shell.

This module provides the JobManager class which handles:
- Forking one child per job of a line containing '&'
- Recording each child's handle
- Waiting for every recorded child before the line is done
"""

import logging
import os
from dataclasses import dataclass
from typing import Callable, List

from .control_flow import ExitShell
from .exceptions import FatalShellError, SpawnError, report_error
from .exit_codes import EXIT_FATAL, EXIT_SUCCESS
from .utils.io_wrappers import flush_std_streams

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChildHandle:
    """A forked job that has not been waited on yet.

    Attributes:
        pid: Process id returned by fork()
        job: The job text the child runs
    """

    pid: int
    job: str


class JobManager:
    """Forks jobs and joins them.

    Every handle returned by ``launch`` is waited on exactly once, by the
    next call to ``wait_for_all``.

    Attributes:
        _children: Handles launched since the last wait_for_all()
        _run_job: Callable that parses and executes one job string
    """

    def __init__(self, run_job: Callable[[str], int]):
        """Initialize an empty job table.

        Args:
            run_job: Called in the child with the job text
        """
        self._run_job = run_job
        self._children: List[ChildHandle] = []

    def launch(self, job: str) -> ChildHandle:
        """Fork a child that runs one job and then terminates.

        Args:
            job: Job text (no '&')

        Returns:
            Handle of the new child

        Raises:
            SpawnError: If fork() fails; earlier children stay recorded
        """
        flush_std_streams()
        try:
            pid = os.fork()
        except OSError as e:
            raise SpawnError(job.strip(), e.strerror or str(e))

        if pid == 0:
            self._run_in_child(job)

        handle = ChildHandle(pid=pid, job=job)
        self._children.append(handle)
        logger.debug("launched job %r as pid %d", job, pid)
        return handle

    def _run_in_child(self, job: str) -> None:
        """Run job in this (child) process, then exit. Never returns."""
        exit_code = EXIT_SUCCESS
        try:
            exit_code = self._run_job(job)
        except ExitShell as e:
            # 'exit' inside a parallel job ends only this child
            exit_code = e.exit_code
        except FatalShellError as e:
            report_error(e)
            exit_code = e.exit_code
        except BaseException:
            logger.debug("job %r crashed", job, exc_info=True)
            exit_code = EXIT_FATAL
        finally:
            flush_std_streams()
            os._exit(exit_code)

    def wait_for_all(self) -> List[ChildHandle]:
        """Block until every launched child has terminated.

        Exit statuses are discarded.

        Returns:
            The handles that were waited on, in launch order
        """
        waited = self._children
        self._children = []
        for handle in waited:
            try:
                _, status = os.waitpid(handle.pid, 0)
            except ChildProcessError:
                # Already reaped by someone else; nothing left to wait for
                logger.debug("pid %d was already reaped", handle.pid)
                continue
            logger.debug("job pid %d exited with status %d", handle.pid, status)
        return waited

    def pending(self) -> List[ChildHandle]:
        """Get the handles not yet waited on.

        Returns:
            Copy of the pending handle list
        """
        return list(self._children)

    def __len__(self) -> int:
        return len(self._children)
