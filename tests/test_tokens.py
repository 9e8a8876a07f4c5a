import pytest

from rpnlang.tokens import CharacterKind, Token, TokenType, classify_character


@pytest.mark.parametrize("ch", list("0123456789"))
def test_digits_are_numbers(ch):
    assert classify_character(ch) is CharacterKind.NUMBER


@pytest.mark.parametrize("ch", ["a", "z", "A", "Z", "m", "Q"])
def test_ascii_letters_are_strings(ch):
    assert classify_character(ch) is CharacterKind.STRING


@pytest.mark.parametrize("ch", ["_", " ", "+", "@", "\t", "é", "{"])
def test_other_characters_are_undetermined(ch):
    assert classify_character(ch) is CharacterKind.UNDETERMINED


def test_identifier_and_integer_positions_fixed_by_tables():
    # The lexer's transition table indexes by kind minus 7.
    assert str(Token(TokenType.IDENTIFIER)) == "7"
    assert str(Token(TokenType.INTEGER)) == "8"


def test_token_order_terminals_before_helpers():
    assert str(Token(TokenType.INT)) == "0"
    assert str(Token(TokenType.TERMINAL)) == "25"
    assert str(Token(TokenType.START)) == "26"


def test_str_of_token_with_literal_is_literal():
    assert str(Token(TokenType.IDENTIFIER, "count")) == "count"
    assert str(Token(TokenType.PLUS, "1")) == "1"


@pytest.mark.parametrize("kind", list(TokenType))
def test_str_of_token_without_literal_is_kind_number(kind):
    assert str(Token(kind)) == str(int(kind))


def test_token_default_literal_empty_and_equality():
    assert Token(TokenType.SEMICOLON).literal == ""
    assert Token(TokenType.INTEGER, "5") == Token(TokenType.INTEGER, "5")
    assert Token(TokenType.INTEGER, "5") != Token(TokenType.IDENTIFIER, "5")