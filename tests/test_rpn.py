import io

import pytest

from rpnlang.errors import InterpreterError
from rpnlang.rpn import RPN
from rpnlang.tokens import Token, TokenType


def run(source, stdin=""):
    out = io.StringIO()
    machine = RPN(source.splitlines(), io.StringIO(stdin), out)
    machine.generate()
    value = machine.execute()
    return machine, value, out.getvalue()


def test_arithmetic_precedence():
    src = "int x = 4 ;\nintarr a [ 3 ] ;\n{\ncout ( x * 2 + 1 ) ;\n}\n"
    _, value, out = run(src)
    assert out == "9\n"
    assert value == 0


def test_assignment_sets_variable():
    src = "intarr a [ 1 ] ;\nint x = 5 ;\n{\n}\n"
    machine, _, out = run(src)
    assert machine.variables["x"] == 5
    assert out == ""


def test_generated_code_for_declaration():
    machine = RPN(["int x = 5 ;"], io.StringIO(), io.StringIO())
    machine.generate()
    assert [t.type for t in machine.rpn] == [
        TokenType.IDENTIFIER, TokenType.INTEGER, TokenType.ASSIGN,
    ]
    assert machine.rpn[0].literal == "x"


def test_while_loop_counts():
    src = (
        "int i = 0 ;\nintarr a [ 1 ] ;\n{\nwhile ( i < 3 ) {\n"
        "cout ( i ) ;\ni = i + 1 ;\n}\n}\n"
    )
    machine, _, out = run(src)
    assert out.split() == ["0", "1", "2"]
    assert machine.variables["i"] == 3


@pytest.mark.parametrize("x, expected", [("1", "10"), ("2", "20")])
def test_if_else(x, expected):
    src = (
        f"int x = {x} ;\nintarr a [ 1 ] ;\n{{\nif ( x ~ 1 ) {{\ncout ( 10 ) ;\n}} "
        "else {\ncout ( 20 ) ;\n}\n}\n"
    )
    _, _, out = run(src)
    assert out == expected + "\n"


def test_array_store_and_load():
    src = "intarr a [ 2 ] ;\n{\na [ 1 ] = 7 ;\ncout ( a [ 1 ] ) ;\n}\n"
    _, _, out = run(src)
    assert out == "7\n"


def test_cin_value_returned():
    src = "intarr a [ 1 ] ;\n{\ncin ( x ) ;\n}\n"
    _, value, _ = run(src, stdin="42\n")
    assert value == 42


def test_grammar_error():
    machine = RPN(["int = 5 ;"], io.StringIO(), io.StringIO())
    with pytest.raises(InterpreterError, match="grammar error"):
        machine.generate()


def test_empty_stack_error():
    with pytest.raises(InterpreterError, match="Execution stack empty"):
        run("{ }\n")


def test_division_by_zero():
    src = "intarr a [ 1 ] ;\n{\ncout ( 1 / 0 ) ;\n}\n"
    with pytest.raises(InterpreterError):
        run(src)


def test_is_number_and_operation():
    machine = RPN([], io.StringIO(), io.StringIO())
    assert machine.is_number(Token(TokenType.INTEGER, "3"))
    assert not machine.is_number(Token(TokenType.IDENTIFIER, "x"))
    assert machine.is_operation(Token(TokenType.JUMP_FALSE))
    assert not machine.is_operation(Token(TokenType.COUT))


def test_token_to_value(capsys):
    machine = RPN([], io.StringIO(), io.StringIO())
    machine.variables["y"] = 11
    assert machine.token_to_value(Token(TokenType.IDENTIFIER, "y")) == 11
    assert machine.token_to_value(Token(TokenType.INTEGER, "-4")) == -4
    assert machine.token_to_value(Token(TokenType.IDENTIFIER, "missing")) == 0
    assert "[warning]" in capsys.readouterr().out