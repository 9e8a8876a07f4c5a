"""A small C-like language: lexer, LL(1) parser to reverse Polish notation, and a stack machine."""

__version__ = "0.1.0"
__all__ = ["tokens", "errors", "lexer", "rpn", "cli"]