"""
EXIT command - leave the shell.
"""

from ..control_flow import ExitShell
from ..exit_codes import EXIT_SUCCESS
from ..process import Process
from . import register_command
from .base import validate_arg_count


@register_command('exit')
def cmd_exit(process: Process) -> int:
    """
    Exit the shell

    Usage: exit

    Takes no arguments. The search path is released and ExitShell is raised;
    whoever owns the current process turns that into termination. Inside a
    parallel job that is only the job's child.
    """
    validate_arg_count(process, max_args=0)
    process.context.path_manager.clear()
    raise ExitShell(EXIT_SUCCESS)
