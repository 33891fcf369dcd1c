"""Runtime configuration for wish-shell.

This module provides the ShellConfig dataclass which holds:
- The default search path installed at startup
- The interactive prompt
- The diagnostic log level
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

DEFAULT_SEARCH_PATH: Tuple[str, ...] = ("/bin",)
DEFAULT_PROMPT = "wish> "
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class ShellConfig:
    """Settings fixed for the lifetime of one shell.

    Attributes:
        default_path: Search directories installed at startup
        prompt: Text printed before each read in interactive mode
        log_level: Level name for the wish_shell logger
    """

    default_path: Tuple[str, ...] = DEFAULT_SEARCH_PATH
    prompt: str = DEFAULT_PROMPT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ShellConfig":
        """Build a config from ``WISH_*`` environment variables.

        The host's ``PATH`` is deliberately not consulted: commands resolve
        only through the shell's own search path.

        Args:
            environ: Mapping to read from (default: os.environ)

        Returns:
            ShellConfig with any overrides applied
        """
        if environ is None:
            environ = os.environ
        return cls(
            prompt=environ.get("WISH_PROMPT", DEFAULT_PROMPT),
            log_level=environ.get("WISH_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
