"""
I/O helpers for code that forks.

Python-level buffers are copied into a child by fork. Anything still
pending there would be written twice, once by each process, so buffers
are flushed right before every fork.
"""

import sys


def flush_std_streams() -> None:
    """Flush sys.stdout and sys.stderr, ignoring streams that are gone."""
    for stream in (sys.stdout, sys.stderr):
        if stream is None:
            continue
        try:
            stream.flush()
        except (OSError, ValueError):
            # Closed or broken stream: nothing left to duplicate
            pass
