"""Line-oriented lexer producing one token at a time."""

from __future__ import annotations

from .errors import warn
from .tokens import CharacterKind, Token, TokenType, classify_character

TERMINALS: dict[str, TokenType] = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "=": TokenType.ASSIGN,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    "(": TokenType.OPEN_ROUND_BRACKET,
    ")": TokenType.CLOSE_ROUND_BRACKET,
    "[": TokenType.OPEN_SQUARE_BRACKET,
    "]": TokenType.CLOSE_SQUARE_BRACKET,
    "{": TokenType.OPEN_CURLY_BRACKET,
    "}": TokenType.CLOSE_CURLY_BRACKET,
    "~": TokenType.EQUALITY,
    ">": TokenType.GREATER,
    "<": TokenType.LESS,
    "!": TokenType.INEQUALITY,
    ";": TokenType.SEMICOLON,
}

KEYWORDS: dict[str, TokenType] = {
    "int": TokenType.INT,
    "intarr": TokenType.INTARR,
    "while": TokenType.WHILE,
    "if": TokenType.IF,
    "else": TokenType.ELSE,
    "cin": TokenType.CIN,
    "cout": TokenType.COUT,
}

# Operator precedence carried in the literal of arithmetic tokens.
_PRECEDENCE = {
    TokenType.PLUS: "1",
    TokenType.MINUS: "1",
    TokenType.MULTIPLY: "2",
    TokenType.DIVIDE: "2",
}


class Lexer:
    """Scans tokens out of a single source line."""

    terminals = TERMINALS
    keywords = KEYWORDS

    def _terminal(self, ch: str) -> Token:
        kind = self.terminals[ch]
        return Token(kind, _PRECEDENCE.get(kind, ""))

    def _delimited(self, text: str, kind: TokenType) -> Token:
        if kind is TokenType.IDENTIFIER and text in self.keywords:
            return Token(self.keywords[text], text)
        return Token(kind, text)

    def scan_token(self, line: str, offset: int) -> tuple[Token, int]:
        """Scan the next token from ``offset``; return it with the new offset.

        A word made of letters and digits takes the kind of its last
        character. Keywords are only recognised when the word is followed
        by a delimiter on the same line. When nothing but whitespace or
        unexpected characters remains, a START token is returned.
        """
        start = pos = offset
        kind: TokenType | None = None
        while pos < len(line):
            ch = line[pos]
            if ch == " ":
                if kind is None:
                    pos += 1
                    start = pos
                    continue
                return self._delimited(line[start:pos], kind), pos
            if ch in self.terminals:
                if kind is None:
                    return self._terminal(ch), pos + 1
                return self._delimited(line[start:pos], kind), pos
            char_kind = classify_character(ch)
            if char_kind is CharacterKind.NUMBER:
                kind = TokenType.INTEGER
                pos += 1
                continue
            if char_kind is CharacterKind.STRING:
                kind = TokenType.IDENTIFIER
                pos += 1
                continue
            if kind is not None:
                return self._delimited(line[start:pos], kind), pos
            warn(line, f"Unexpected character: {ch}", pos)
            pos += 1
            start = pos
        if kind is None:
            return Token(TokenType.START), pos
        return Token(kind, line[start:pos]), pos


def tokenize(line: str) -> list[Token]:
    """Return every token on a line, in order."""
    lexer = Lexer()
    tokens: list[Token] = []
    offset = 0
    while offset < len(line):
        token, offset = lexer.scan_token(line, offset)
        if token.type is not TokenType.START:
            tokens.append(token)
    return tokens