from rpnlang.errors import InterpreterError, format_message, warn


def test_format_message_layout():
    assert format_message("error", "x = 1;", 3, "boom") == "[line] x = 1;. [error]: 3 boom"


def test_format_message_kind_is_embedded():
    text = format_message("warning", "abc", 0, "careful")
    assert text.startswith("[line] abc. [warning]: 0 ")
    assert text.endswith("careful")


def test_interpreter_error_message_and_fields():
    err = InterpreterError("int a = ;", "Syntactic Analysis: grammar error", 8)
    assert err.line == "int a = ;"
    assert err.offset == 8
    assert err.message == "Syntactic Analysis: grammar error"
    assert str(err) == format_message("error", "int a = ;", 8, "Syntactic Analysis: grammar error")


def test_interpreter_error_default_offset_zero():
    err = InterpreterError("Execution time", "Execution stack empty")
    assert err.offset == 0
    assert str(err) == "[line] Execution time. [error]: 0 Execution stack empty"


def test_interpreter_error_explicit_offset_in_text():
    err = InterpreterError("Execution time", "Execution stack empty", 5)
    assert err.line == "Execution time"
    assert err.message == "Execution stack empty"
    assert str(err) == "[line] Execution time. [error]: 5 Execution stack empty"


def test_warn_prints_to_stdout(capsys):
    warn("No line", "Variable not initialized")
    out = capsys.readouterr().out
    assert out == format_message("warning", "No line", 0, "Variable not initialized") + "\n"


def test_warn_with_offset(capsys):
    warn("a @ b", "Unexpected character: @", 2)
    out = capsys.readouterr().out
    assert out.strip() == "[line] a @ b. [warning]: 2 Unexpected character: @"