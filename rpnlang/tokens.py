"""Token kinds, tokens and character classification."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto


class TokenType(IntEnum):
    """Every kind of token, in the order the grammar tables index them."""

    INT = 0
    INTARR = auto()
    IF = auto()
    ELSE = auto()
    WHILE = auto()
    CIN = auto()
    COUT = auto()
    IDENTIFIER = auto()
    INTEGER = auto()
    PLUS = auto()
    MINUS = auto()
    ASSIGN = auto()
    MULTIPLY = auto()
    DIVIDE = auto()
    OPEN_ROUND_BRACKET = auto()
    CLOSE_ROUND_BRACKET = auto()
    OPEN_SQUARE_BRACKET = auto()
    CLOSE_SQUARE_BRACKET = auto()
    EQUALITY = auto()
    GREATER = auto()
    LESS = auto()
    INEQUALITY = auto()
    OPEN_CURLY_BRACKET = auto()
    CLOSE_CURLY_BRACKET = auto()
    SEMICOLON = auto()
    TERMINAL = auto()

    # Helper tokens used while generating and running the program.
    START = auto()
    EMPTY = auto()
    JUMP_FALSE = auto()
    TAG_PLACE = auto()
    JUMP = auto()
    INDEXING = auto()
    FREE = auto()
    FILL_ARRAY = auto()

    # Semantic actions fired by the parser.
    PROGRAM1 = auto()
    PROGRAM2 = auto()
    PROGRAM3 = auto()
    PROGRAM4 = auto()
    PROGRAM5 = auto()
    PROGRAM11 = auto()
    PROGRAM12 = auto()
    PROGRAM14 = auto()
    PROGRAM15 = auto()


@dataclass(frozen=True)
class Token:
    """A token kind with its optional literal text."""

    type: TokenType
    literal: str = ""

    def __str__(self) -> str:
        if self.literal:
            return self.literal
        return str(int(self.type))


class CharacterKind(Enum):
    """Broad class of a single source character."""

    NUMBER = auto()
    STRING = auto()
    UNDETERMINED = auto()


def classify_character(character: str) -> CharacterKind:
    """Tell whether a character is an ASCII digit, an ASCII letter or neither."""
    if "0" <= character <= "9":
        return CharacterKind.NUMBER
    if "a" <= character <= "z" or "A" <= character <= "Z":
        return CharacterKind.STRING
    return CharacterKind.UNDETERMINED