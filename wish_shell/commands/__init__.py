"""
Built-in command registry.

Each module in this package defines one built-in and registers it with
``register_command``. ``load_all_commands`` imports them all so the
registry is populated.
"""

import importlib
from typing import Callable, Dict

BUILTINS: Dict[str, Callable] = {}

_COMMAND_MODULES = ('exit_cmd', 'cd', 'path')


def register_command(name: str):
    """
    Decorator registering a function as the built-in ``name``.

    Example:
        @register_command('cd')
        def cmd_cd(process):
            ...
    """
    def decorator(func: Callable) -> Callable:
        BUILTINS[name] = func
        return func
    return decorator


def load_all_commands() -> Dict[str, Callable]:
    """Import every command module and return the registry."""
    for module in _COMMAND_MODULES:
        importlib.import_module(f'{__name__}.{module}')
    return BUILTINS
