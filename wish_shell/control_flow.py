"""
Control flow exceptions.

These are not errors: they carry a request out of the command that issued
it, up to whichever loop owns the current execution context.
"""


class ControlFlowException(Exception):
    """Base class for control flow requests raised by built-in commands"""
    pass


class ExitShell(ControlFlowException):
    """
    Raised by the ``exit`` built-in.

    The interactive loop turns this into a normal return with ``exit_code``;
    a forked job child turns it into ``os._exit(exit_code)``.
    """

    def __init__(self, exit_code: int = 0):
        super().__init__(exit_code)
        self.exit_code = exit_code
