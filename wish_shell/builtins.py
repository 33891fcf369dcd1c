"""
Built-in shell commands registry.

All built-in commands live in the commands/ directory.
This module loads them and exposes lookup helpers.
"""

from typing import Callable, Optional

from .commands import load_all_commands

# Load all command modules to populate the registry
BUILTINS = load_all_commands()


def get_builtin(command: str) -> Optional[Callable]:
    """
    Get a built-in command executor.

    Matching is exact: no prefixes, no aliases.

    Args:
        command: The command name to look up

    Returns:
        The command function, or None if not found

    Example:
        >>> executor = get_builtin('cd')
        >>> if executor:
        ...     executor(process)
    """
    return BUILTINS.get(command)


def is_builtin(command: str) -> bool:
    return command in BUILTINS
