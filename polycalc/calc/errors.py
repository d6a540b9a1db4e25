"""
Calculator errors.  Each carries the message the driver prints after
`ERROR <line>`.
"""


class CalcError(Exception):
    """Base exception for calculator input errors.

    Parameters
    ----------
    message : str
        The message reported for the offending line.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class StackUnderflow(CalcError):
    """Raised when a command needs more polynomials than the stack holds."""

    def __init__(self, message: str = "STACK UNDERFLOW"):
        super().__init__(message)


class WrongPoly(CalcError):
    """Raised for a malformed or out-of-range polynomial literal."""

    def __init__(self, message: str = "WRONG POLY"):
        super().__init__(message)


class WrongCommand(CalcError):
    """Raised for an unknown command or trailing text after a command."""

    def __init__(self, message: str = "WRONG COMMAND"):
        super().__init__(message)


class WrongArgument(CalcError):
    """Raised for a missing or invalid command argument.

    The message is command specific, e.g. ``DEG BY WRONG VARIABLE``.
    """

    def __init__(self, message: str):
        super().__init__(message)


class NestingTooDeep(CalcError):
    """Raised when a polynomial is nested deeper than the recursion limit allows."""

    def __init__(self, message: str = "TOO DEEP"):
        super().__init__(message)
