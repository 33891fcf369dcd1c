"""
Exit code constants used by the shell and its child processes.
"""

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

# Status of a forked job child whose job raised a fatal error
EXIT_FATAL = 1
