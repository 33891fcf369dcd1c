"""
PATH command - replace the command search path.
"""

from ..process import Process
from . import register_command


@register_command('path')
def cmd_path(process: Process) -> int:
    """
    Set the directories searched for external commands

    Usage: path [dir...]

    The old search path is discarded. With no arguments the new path is
    empty and only built-ins work. Directories are kept in the order given,
    duplicates included.

    Examples:
      path                 # only built-ins
      path /bin /usr/bin   # search /bin first, then /usr/bin
    """
    process.context.path_manager.set_search_path(process.args)
    return 0
