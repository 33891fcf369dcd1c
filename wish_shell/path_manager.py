"""Search path and working directory management for wish-shell.

This module provides the PathManager class which handles:
- The search path registry (directories searched for external commands)
- Command resolution against that registry
- Changing the current working directory
"""

import logging
import os
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Tuple

from .config import DEFAULT_SEARCH_PATH
from .exceptions import DirectoryChangeError, FatalShellError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchPath:
    """An immutable, ordered snapshot of search directories.

    Order is lookup priority. Duplicates are kept as given. An empty
    snapshot means only built-ins can run.

    Attributes:
        directories: Directory strings, highest priority first
    """

    directories: Tuple[str, ...] = ()

    def __post_init__(self):
        for directory in self.directories:
            if not isinstance(directory, str) or not directory:
                raise ValueError(f"Invalid search directory: {directory!r}")

    def __iter__(self) -> Iterator[str]:
        return iter(self.directories)

    def __len__(self) -> int:
        return len(self.directories)

    def is_empty(self) -> bool:
        return not self.directories


class PathManager:
    """Manages the search path and the working directory.

    The registry is never edited in place: ``set_search_path`` swaps in a
    new SearchPath snapshot. A forked job gets its own copy of the manager,
    so a ``path`` command there is invisible to the parent and to siblings.

    Attributes:
        search_path: The current SearchPath snapshot
    """

    def __init__(self, directories: Iterable[str] = DEFAULT_SEARCH_PATH):
        """Initialize the path manager.

        Args:
            directories: Initial search directories (default: /bin)

        Raises:
            FatalShellError: If the initial path cannot be allocated
        """
        self.search_path = SearchPath()
        self.set_search_path(directories)

    def set_search_path(self, directories: Iterable[str]) -> SearchPath:
        """Replace the whole search path.

        Args:
            directories: New directories in priority order; may be empty

        Returns:
            The newly installed snapshot

        Raises:
            FatalShellError: If memory runs out while building the snapshot
        """
        try:
            snapshot = SearchPath(tuple(directories))
        except MemoryError as e:
            raise FatalShellError(f"Out of memory while setting search path: {e}")
        self.search_path = snapshot
        logger.debug("search path is now %s", list(snapshot))
        return snapshot

    def clear(self) -> None:
        """Drop every search directory."""
        self.search_path = SearchPath()

    def resolve_command(self, name: str) -> Optional[str]:
        """Find the executable for a bare command name.

        Each directory is tried in order as ``<dir>/<name>``. The host's
        own PATH is never consulted, so with an empty search path nothing
        resolves. Results are not cached.

        Args:
            name: Command name exactly as typed

        Returns:
            Full path of the first executable match, or None

        Examples:
            With search path ['/bin', '/usr/bin']:
                resolve_command('ls') -> '/bin/ls'
                resolve_command('nope') -> None
        """
        for directory in self.search_path:
            candidate = f"{directory}/{name}"
            if self._is_executable(candidate):
                logger.debug("resolved %s -> %s", name, candidate)
                return candidate
        logger.debug("could not resolve %s in %s", name, list(self.search_path))
        return None

    @staticmethod
    def _is_executable(candidate: str) -> bool:
        """True if candidate exists and the user may execute it.

        Only permission is checked. A directory with the command's name
        matches, and exec then fails in the child.
        """
        try:
            return os.access(candidate, os.X_OK)
        except ValueError:
            # Embedded NUL: no such file can exist
            return False

    def get_cwd(self) -> str:
        """Get the current working directory.

        Returns:
            Absolute path of the process working directory
        """
        return os.getcwd()

    def change_directory(self, path: str) -> None:
        """Change the process working directory.

        Args:
            path: New directory path (can be relative or absolute)

        Raises:
            DirectoryChangeError: If the directory cannot be entered
        """
        try:
            os.chdir(path)
        except (OSError, ValueError) as e:
            raise DirectoryChangeError(path, getattr(e, "strerror", None) or str(e))
        logger.debug("cwd is now %s", os.getcwd())
