"""Allow running the shell with ``python -m wish_shell``."""

import sys

from .cli import main

sys.exit(main())
