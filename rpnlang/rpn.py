"""Predictive parser that emits reverse Polish notation, and its executor."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable
from enum import IntEnum
from typing import TextIO

from .errors import InterpreterError, warn
from .lexer import Lexer
from .tokens import Token, TokenType


class NonTerminal(IntEnum):
    """Grammar non-terminals, numbered apart from the terminal token kinds."""

    P = 100
    A = 101
    C = 102
    D = 103
    E = 104
    S = 105
    U = 106
    T = 107
    V = 108
    F = 109
    H = 110
    Z = 111


_T = TokenType
_N = NonTerminal
_E = TokenType.EMPTY

# (non-terminal, lookahead) -> (right-hand side, action attached to each symbol)
_RULES: dict[tuple[NonTerminal, TokenType], tuple[tuple, tuple]] = {
    (_N.P, _T.INT): (
        (_T.INT, _T.IDENTIFIER, _T.ASSIGN, _N.S, _T.SEMICOLON, _N.P),
        (_T.PROGRAM11, _T.IDENTIFIER, _E, _E, _T.ASSIGN, _E),
    ),
    (_N.P, _T.INTARR): (
        (_T.INTARR, _T.IDENTIFIER, _T.OPEN_SQUARE_BRACKET, _N.S,
         _T.CLOSE_SQUARE_BRACKET, _T.SEMICOLON, _N.P),
        (_T.PROGRAM12, _T.IDENTIFIER, _E, _E, _E, _E, _E),
    ),
    (_N.P, _T.OPEN_CURLY_BRACKET): (
        (_T.OPEN_CURLY_BRACKET, _N.A, _T.CLOSE_CURLY_BRACKET),
        (_T.PROGRAM14, _E, _T.PROGRAM15),
    ),
    (_N.A, _T.IF): (
        (_T.IF, _T.OPEN_ROUND_BRACKET, _N.C, _T.CLOSE_ROUND_BRACKET,
         _T.OPEN_CURLY_BRACKET, _N.A, _T.CLOSE_CURLY_BRACKET, _N.E, _N.A),
        (_E, _E, _E, _T.PROGRAM1, _E, _E, _E, _E, _T.PROGRAM3),
    ),
    (_N.A, _T.WHILE): (
        (_T.WHILE, _T.OPEN_ROUND_BRACKET, _N.C, _T.CLOSE_ROUND_BRACKET,
         _T.OPEN_CURLY_BRACKET, _N.A, _T.CLOSE_CURLY_BRACKET, _N.A),
        (_T.PROGRAM4, _E, _E, _T.PROGRAM1, _E, _E, _T.PROGRAM5, _E),
    ),
    (_N.A, _T.CIN): (
        (_T.CIN, _T.OPEN_ROUND_BRACKET, _T.IDENTIFIER, _N.H,
         _T.CLOSE_ROUND_BRACKET, _T.SEMICOLON, _N.A),
        (_E, _E, _T.IDENTIFIER, _E, _T.CIN, _E, _E),
    ),
    (_N.A, _T.COUT): (
        (_T.COUT, _T.OPEN_ROUND_BRACKET, _N.S, _T.CLOSE_ROUND_BRACKET,
         _T.SEMICOLON, _N.A),
        (_E, _E, _E, _T.COUT, _E, _E),
    ),
    (_N.A, _T.IDENTIFIER): (
        (_T.IDENTIFIER, _N.H, _T.ASSIGN, _N.S, _T.SEMICOLON, _N.A),
        (_T.IDENTIFIER, _E, _E, _E, _T.ASSIGN, _E),
    ),
    (_N.C, _T.IDENTIFIER): (
        (_T.IDENTIFIER, _N.H, _N.V, _N.U, _N.D),
        (_T.IDENTIFIER, _E, _E, _E, _E),
    ),
    (_N.C, _T.INTEGER): (
        (_T.INTEGER, _N.V, _N.U, _N.D),
        (_T.INTEGER, _E, _E, _E),
    ),
    (_N.C, _T.OPEN_ROUND_BRACKET): (
        (_T.OPEN_ROUND_BRACKET, _N.S, _T.CLOSE_ROUND_BRACKET, _N.V, _N.U, _N.D),
        (_E, _E, _E, _E, _E, _E),
    ),
    (_N.D, _T.EQUALITY): ((_T.EQUALITY, _N.S, _N.Z), (_E, _E, _T.EQUALITY)),
    (_N.D, _T.GREATER): ((_T.GREATER, _N.S, _N.Z), (_E, _E, _T.GREATER)),
    (_N.D, _T.LESS): ((_T.LESS, _N.S, _N.Z), (_E, _E, _T.LESS)),
    (_N.D, _T.INEQUALITY): ((_T.INEQUALITY, _N.S, _N.Z), (_E, _E, _T.INEQUALITY)),
    (_N.E, _T.ELSE): (
        (_T.ELSE, _T.OPEN_CURLY_BRACKET, _N.A, _T.CLOSE_CURLY_BRACKET),
        (_T.PROGRAM2, _E, _E, _E),
    ),
    (_N.S, _T.IDENTIFIER): (
        (_T.IDENTIFIER, _N.H, _N.V, _N.U),
        (_T.IDENTIFIER, _E, _E, _E),
    ),
    (_N.S, _T.INTEGER): ((_T.INTEGER, _N.V, _N.U), (_T.INTEGER, _E, _E)),
    (_N.S, _T.OPEN_ROUND_BRACKET): (
        (_T.OPEN_ROUND_BRACKET, _N.S, _T.CLOSE_ROUND_BRACKET, _N.V, _N.U),
        (_E, _E, _E, _E, _E),
    ),
    (_N.U, _T.PLUS): ((_T.PLUS, _N.T, _N.U), (_E, _E, _T.PLUS)),
    (_N.U, _T.MINUS): ((_T.MINUS, _N.T, _N.U), (_E, _E, _T.MINUS)),
    (_N.T, _T.IDENTIFIER): ((_T.IDENTIFIER, _N.H, _N.V), (_T.IDENTIFIER, _E, _E)),
    (_N.T, _T.INTEGER): ((_T.INTEGER, _N.V), (_T.INTEGER, _E)),
    (_N.T, _T.OPEN_ROUND_BRACKET): (
        (_T.OPEN_ROUND_BRACKET, _N.S, _T.CLOSE_ROUND_BRACKET, _N.V),
        (_E, _E, _E, _E),
    ),
    (_N.V, _T.MULTIPLY): ((_T.MULTIPLY, _N.F, _N.V), (_E, _E, _T.MULTIPLY)),
    (_N.V, _T.DIVIDE): ((_T.DIVIDE, _N.F, _N.V), (_E, _E, _T.DIVIDE)),
    (_N.F, _T.IDENTIFIER): ((_T.IDENTIFIER, _N.H), (_T.IDENTIFIER, _E)),
    (_N.F, _T.INTEGER): ((_T.INTEGER,), (_T.INTEGER,)),
    (_N.F, _T.OPEN_ROUND_BRACKET): (
        (_T.OPEN_ROUND_BRACKET, _N.S, _T.CLOSE_ROUND_BRACKET),
        (_E, _E, _E),
    ),
    (_N.H, _T.OPEN_SQUARE_BRACKET): (
        (_T.OPEN_SQUARE_BRACKET, _N.S, _T.CLOSE_SQUARE_BRACKET),
        (_E, _E, _T.INDEXING),
    ),
}

# Non-terminals that derive the empty string on any lookahead without a rule.
_NULLABLE = frozenset({_N.A, _N.E, _N.U, _N.V, _N.H, _N.Z})

_OPERATIONS = frozenset({
    _T.PLUS, _T.MINUS, _T.MULTIPLY, _T.DIVIDE, _T.ASSIGN, _T.TAG_PLACE, _T.JUMP_FALSE,
})

_GRAMMAR_ERROR = "Syntactic Analysis: grammar error"


def _truncating_divide(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


class RPN:
    """Compiles a program to reverse Polish notation and runs it."""

    def __init__(
        self,
        lines: Iterable[str],
        input_stream: TextIO | None = None,
        output_stream: TextIO | None = None,
    ) -> None:
        self._lines = lines
        self.input_stream = input_stream if input_stream is not None else sys.stdin
        self.output_stream = output_stream if output_stream is not None else sys.stdout
        self.rpn: list[Token] = []
        self.variables: dict[str, int] = {}
        self.arrays: dict[str, list[int]] = {}
        self._symbols: list[TokenType | NonTerminal] = [NonTerminal.P]
        self._actions: list[TokenType] = [TokenType.EMPTY]
        self._tags: list[int] = []
        self._data: list[Token] = []
        self._pending_input: deque[str] = deque()

    # -- generation -------------------------------------------------------

    def generate(self) -> None:
        """Parse every line and fill ``self.rpn``."""
        lexer = Lexer()
        for raw in self._lines:
            line = raw.rstrip("\n")
            offset = 0
            while offset < len(line):
                token, offset = lexer.scan_token(line, offset)
                if token.type is TokenType.START:
                    continue
                if token.type in (TokenType.IDENTIFIER, TokenType.INTEGER):
                    self._data.append(token)
                self._consume(token, line, offset)

    def _consume(self, token: Token, line: str, offset: int) -> None:
        while True:
            if not self._symbols:
                raise InterpreterError(line, _GRAMMAR_ERROR, offset)
            symbol = self._symbols[-1]
            if isinstance(symbol, TokenType):
                if symbol is not token.type:
                    raise InterpreterError(line, _GRAMMAR_ERROR, offset)
                self._symbols.pop()
                self._fire(self._actions.pop(), line, offset)
                return
            rule = _RULES.get((symbol, token.type))
            if rule is None:
                if symbol not in _NULLABLE:
                    raise InterpreterError(line, _GRAMMAR_ERROR, offset)
                rule = ((), ())
            self._symbols.pop()
            self._fire(self._actions.pop(), line, offset)
            symbols, actions = rule
            self._symbols.extend(reversed(symbols))
            self._actions.extend(reversed(actions))

    def _fire(self, action: TokenType, line: str, offset: int) -> None:
        if action is TokenType.EMPTY:
            return
        rpn = self.rpn
        if action is TokenType.PROGRAM1:
            self._tags.append(len(rpn))
            rpn.append(Token(TokenType.TAG_PLACE))
            rpn.append(Token(TokenType.JUMP_FALSE))
        elif action is TokenType.PROGRAM2:
            position = self._tags.pop()
            rpn[position] = Token(TokenType.TAG_PLACE, str(len(rpn) + 2))
            self._tags.append(len(rpn))
            rpn.append(Token(TokenType.TAG_PLACE))
            rpn.append(Token(TokenType.JUMP))
        elif action is TokenType.PROGRAM3:
            position = self._tags.pop()
            rpn[position] = Token(TokenType.TAG_PLACE, str(len(rpn)))
        elif action is TokenType.PROGRAM4:
            self._tags.append(len(rpn))
        elif action is TokenType.PROGRAM5:
            position = self._tags.pop()
            rpn[position] = Token(TokenType.TAG_PLACE, str(len(rpn) + 2))
            rpn.append(Token(TokenType.TAG_PLACE, str(self._tags[-1])))
            rpn.append(Token(TokenType.JUMP))
        elif action is TokenType.PROGRAM11:
            self.variables[""] = 0
        elif action is TokenType.PROGRAM12:
            self.arrays[""] = []
        elif action is TokenType.PROGRAM14:
            rpn.append(Token(TokenType.FILL_ARRAY))
        elif action is TokenType.PROGRAM15:
            rpn.append(Token(TokenType.FREE))
        elif action in (TokenType.IDENTIFIER, TokenType.INTEGER):
            if not self._data:
                raise InterpreterError(line, _GRAMMAR_ERROR, offset)
            rpn.append(self._data.pop())
        else:
            rpn.append(Token(action))

    # -- helpers ----------------------------------------------------------

    def is_number(self, token: Token) -> bool:
        """True for integer literal tokens."""
        return token.type is TokenType.INTEGER

    def is_operation(self, token: Token) -> bool:
        """True for tokens that act on the execution stack."""
        return token.type in _OPERATIONS

    def token_to_value(self, token: Token) -> int:
        """Value of a literal, or of a variable (0 with a warning if unset)."""
        if token.type is TokenType.IDENTIFIER:
            name = token.literal
            if name not in self.variables:
                warn("No line", f"Variable {name} not initialized")
                return 0
            return self.variables[name]
        return self._literal_int(token)

    @staticmethod
    def _literal_int(token: Token) -> int:
        try:
            return int(token.literal)
        except ValueError:
            raise InterpreterError(
                "Execution time", f"Not a number: {token.literal!r}"
            ) from None

    @staticmethod
    def _pop(stack: list[Token]) -> Token:
        if not stack:
            raise InterpreterError("Execution time", "Execution stack empty")
        return stack.pop()

    def _read_int(self) -> int:
        while not self._pending_input:
            line = self.input_stream.readline()
            if not line:
                return 0
            self._pending_input.extend(line.split())
        try:
            return int(self._pending_input.popleft())
        except ValueError:
            return 0

    def _element(self, ref: tuple[str, int]) -> int:
        return self.arrays[ref[0]][ref[1]]

    # -- execution --------------------------------------------------------

    def execute(self) -> int:
        """Run the generated program; return the value left on top, or 0."""
        result: list[Token] = []
        tags: list[Token] = []
        indexed: list[tuple[str, int]] = []
        pop = self._pop
        value_of = self.token_to_value

        binary = {
            TokenType.PLUS: lambda a, b: a + b,
            TokenType.MINUS: lambda a, b: a - b,
            TokenType.MULTIPLY: lambda a, b: a * b,
            TokenType.GREATER: lambda a, b: int(a > b),
            TokenType.LESS: lambda a, b: int(a < b),
            TokenType.EQUALITY: lambda a, b: int(a == b),
            TokenType.INEQUALITY: lambda a, b: int(a != b),
        }

        i = 0
        while i < len(self.rpn):
            token = self.rpn[i]
            kind = token.type
            if kind in binary:
                right = value_of(pop(result))
                left = value_of(pop(result))
                result.append(Token(TokenType.INTEGER, str(binary[kind](left, right))))
            elif kind is TokenType.DIVIDE:
                right = value_of(pop(result))
                left = value_of(pop(result))
                if right == 0:
                    raise InterpreterError("Execution time", "Division by zero")
                result.append(
                    Token(TokenType.INTEGER, str(_truncating_divide(left, right)))
                )
            elif kind is TokenType.ASSIGN:
                value = value_of(pop(result))
                if indexed:
                    name, index = indexed.pop()
                    self.arrays[name][index] = value
                else:
                    self.variables[pop(result).literal] = value
            elif kind is TokenType.JUMP_FALSE:
                if self._literal_int(pop(result)) == 0:
                    i = self._literal_int(pop(tags)) - 1
            elif kind is TokenType.JUMP:
                i = self._literal_int(pop(tags)) - 1
            elif kind is TokenType.COUT:
                if indexed:
                    value = self._element(indexed[-1])
                else:
                    value = value_of(pop(result))
                print(value, file=self.output_stream)
            elif kind is TokenType.CIN:
                result.append(Token(TokenType.INTEGER, str(self._read_int())))
            elif kind is TokenType.FILL_ARRAY:
                size = value_of(pop(result))
                name = pop(result).literal
                if size < 0:
                    raise InterpreterError("Execution time", "Negative array size")
                self.arrays[name] = [0] * size
            elif kind is TokenType.FREE:
                self.arrays.clear()
            elif kind is TokenType.INDEXING:
                index = value_of(pop(result))
                name = pop(result).literal
                array = self.arrays.get(name)
                if array is None or not 0 <= index < len(array):
                    raise InterpreterError(
                        "Execution time", f"Bad array access {name}[{index}]"
                    )
                indexed.append((name, index))
            elif kind is TokenType.TAG_PLACE:
                tags.append(token)
            else:
                result.append(token)
            i += 1

        if result:
            return self._literal_int(result[-1])
        return 0