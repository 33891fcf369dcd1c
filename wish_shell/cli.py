"""
Command-line entry point for wish-shell.

    wish              interactive, prompt before each line
    wish <batchfile>  read commands from a file, no prompt

Any other invocation is a startup error reported with the uniform message.
The usual argument parser is not used because its usage text would break
that contract.
"""

import sys
from typing import List, Optional

from .config import ShellConfig
from .exceptions import FatalShellError, report_error
from .exit_codes import EXIT_FAILURE
from .log import configure_logging
from .shell import Shell


# Lines are split on "\n" only and undecodable bytes survive as surrogates,
# so arguments reach execv and open() as the bytes that were typed.
INPUT_ENCODING = sys.getfilesystemencoding()
INPUT_NEWLINE = '\n'
INPUT_ERRORS = 'surrogateescape'


def _prepare_stdin() -> None:
    """Switch sys.stdin to the same decoding rules as a batch file."""
    reconfigure = getattr(sys.stdin, 'reconfigure', None)
    if reconfigure is not None:
        reconfigure(encoding=INPUT_ENCODING, newline=INPUT_NEWLINE, errors=INPUT_ERRORS)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the shell.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Process exit status
    """
    args = sys.argv[1:] if argv is None else argv
    config = ShellConfig.from_env()
    configure_logging(config.log_level)

    if len(args) > 1:
        report_error(FatalShellError(f"expected at most one batch file, got {len(args)} arguments"))
        return EXIT_FAILURE

    try:
        if args:
            try:
                stream = open(args[0], 'r', encoding=INPUT_ENCODING,
                              newline=INPUT_NEWLINE, errors=INPUT_ERRORS)
            except OSError as e:
                raise FatalShellError(f"cannot open batch file {args[0]}: {e.strerror or e}")
            with stream:
                return Shell(config).run(stream, interactive=False)
        _prepare_stdin()
        return Shell(config).run(sys.stdin, interactive=True)
    except FatalShellError as e:
        report_error(e)
        return e.exit_code
