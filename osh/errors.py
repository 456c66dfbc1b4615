import sys
from enum import Enum


class ErrorKind(Enum):
    """Every failure the shell knows about: (message, fatal)."""

    INPUT_UNAVAILABLE = ("", False)
    ALLOCATION_FAILURE = ("memory error", True)
    PROCESS_CREATION_FAILURE = ("internal error: system call failed", True)
    COMMAND_NOT_FOUND = ("command not found", False)
    INVALID_ARGUMENT = ("invalid argument", False)
    EMPTY_HISTORY = ("history is empty", False)
    GENERAL_UNCLASSIFIED = ("unexpected error", True)

    def __init__(self, message, fatal):
        self.message = message
        self.fatal = fatal


class ShellError(Exception):
    """Raised by a pipeline stage; aborts the current line."""

    def __init__(self, kind, detail=None):
        self.kind = kind
        self.detail = detail
        super().__init__(kind.message if detail is None else f"{kind.message}: {detail}")

    @property
    def fatal(self):
        return self.kind.fatal


def report_error(err, stream=None):
    """
    Print the diagnostic for err.
    Returns: True if the shell must stop
    """
    if err.kind.message:
        print(f"osh: {err.kind.message}", file=stream or sys.stderr)
    return err.fatal
