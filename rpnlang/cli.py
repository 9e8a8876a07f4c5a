"""Command-line entry point: run a program file."""

from __future__ import annotations

import sys

from .errors import InterpreterError, format_message
from .rpn import RPN


def main(argv: list[str] | None = None) -> int:
    """Compile and run the program named by the first argument."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(format_message("error", 0, 0, "Provide file as an argument"))
        return 1
    try:
        handle = open(args[0], encoding="utf-8")
    except OSError:
        print("Error opening file")
        return 1
    try:
        with handle:
            machine = RPN(handle)
            machine.generate()
        machine.execute()
    except InterpreterError as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())