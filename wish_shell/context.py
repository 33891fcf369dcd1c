"""
CommandContext - Encapsulates all context needed for command execution.

This module provides the CommandContext dataclass that decouples commands
from the Shell class. Built-ins reach the search path and the working
directory through it, never through the shell object itself.
"""

from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING

from .path_manager import PathManager, SearchPath

if TYPE_CHECKING:
    from .shell import Shell


@dataclass
class CommandContext:
    """
    Encapsulates all context needed for command execution.

    A forked job receives a copy of the context as it was at fork time;
    anything a built-in changes there stays in that child.

    Example:
        >>> ctx = CommandContext(path_manager=PathManager(['/bin', '/usr/bin']))
        >>> list(ctx.search_path)
        ['/bin', '/usr/bin']
    """

    path_manager: PathManager = field(default_factory=PathManager)
    interactive: bool = False

    # Optional Shell reference, for callers that need the owning shell
    _shell: Optional['Shell'] = None

    @property
    def search_path(self) -> SearchPath:
        return self.path_manager.search_path

    @property
    def cwd(self) -> str:
        return self.path_manager.get_cwd()

    def resolve_command(self, name: str) -> Optional[str]:
        """
        Resolve a command name against the current search path.

        Args:
            name: Command name as typed

        Returns:
            Full executable path or None
        """
        return self.path_manager.resolve_command(name)

    def __repr__(self):
        """String representation for debugging"""
        return (
            f"CommandContext(search_path={list(self.search_path)!r}, "
            f"interactive={self.interactive})"
        )
