"""Error and warning reporting for the interpreter."""

from __future__ import annotations


def format_message(kind: str, line: object, offset: int, message: str) -> str:
    """Render a diagnostic in the interpreter's one-line format."""
    return f"[line] {line}. [{kind}]: {offset} {message}"


class InterpreterError(Exception):
    """A fatal error while lexing, parsing or running a program."""

    def __init__(self, line: object, message: str, offset: int = 0) -> None:
        self.line = line
        self.message = message
        self.offset = offset
        super().__init__(format_message("error", line, offset, message))


def warn(line: object, message: str, offset: int = 0) -> None:
    """Print a non-fatal warning to standard output."""
    print(format_message("warning", line, offset, message))