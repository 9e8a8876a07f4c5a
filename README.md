# rpnlang

An interpreter for a small C-like teaching language. Each source line is
split into tokens, the tokens are parsed by a table-driven LL(1) parser,
the parser emits a program in reverse Polish notation, and that program is
run on a stack machine.

## Installing

```
pip install .
```

## Running a program

```
rpnlang program.txt
```

The same entry point can be started with `python -m rpnlang.cli program.txt`.

Values printed with `cout` go to standard output, one per line. The command
exits with status 0 on success and 1 when no file is given, the file cannot
be opened, or the program has a syntax or run-time error. Errors are printed
to standard output in the form

```
[line] <source line>. [error]: <offset> <message>
```

Warnings (an unexpected character, which is skipped; a variable read before
it was given a value, which then reads as 0) use the same form with
`[warning]` and do not stop the run.

## The language

A program is a list of declarations followed by one block in braces:

```
int x = 0;
intarr a[3];
{
  while (x < 3) {
    a[x] = x * x;
    cout(a[x]);
    x = x + 1;
  }
  if (x > 1) {
    cout(1);
  } else {
    cout(2);
  }
}
```

- `int name = expr;` declares an integer variable and sets it.
- `intarr name[expr];` declares an integer array, all zeros. The array is
  allocated when the block starts, so a program needs exactly one array
  declaration, written after the `int` declarations. Arrays are released
  when the block ends.
- Statements: `name = expr;`, `name[expr] = expr;`, `cout(expr);`,
  `if (cond) { ... }` with an optional `else { ... }`, and
  `while (cond) { ... }`.
- Arithmetic: `+`, `-`, `*`, `/` (integer division rounding toward zero;
  dividing by zero is an error) and parentheses.
- Conditions compare two expressions with `~` (equal), `!` (not equal),
  `>` or `<`.
- An array element can be the target of an assignment or the argument of
  `cout`; it cannot be used inside a larger expression. Indexing outside
  the array is an error.
- Tokens never span lines, and a keyword is only recognised when something
  follows it on the same line (a space, a bracket or another symbol).

## Using it from Python

```python
import io
from rpnlang.rpn import RPN

source = ["int x = 6;", "intarr a[1];", "{ cout(x * 7); }"]
out = io.StringIO()
machine = RPN(source, io.StringIO(), out)
machine.generate()
machine.execute()
print(out.getvalue())  # 42
```

`RPN(lines, input_stream, output_stream)` takes any iterable of lines;
the streams default to standard input and output. After `generate()` the
compiled program is in `machine.rpn` as a list of `Token`s; after
`execute()` the variables are in `machine.variables`. `execute()` returns
the integer left on top of the stack, or 0. Errors raise
`rpnlang.errors.InterpreterError`.

The lexer can be used alone too:

```python
from rpnlang.lexer import tokenize

for token in tokenize("x = x + 1;"):
    print(token.type.name, str(token))
```

`Lexer().scan_token(line, offset)` returns one token and the offset after
it. A `Token` is a frozen dataclass of a `TokenType` and a literal string.

## What it does not do

`cin(name);` is accepted by the parser and reads one integer from the
input stream, but the value is left on the machine's stack and is not
stored in `name`. There is no interactive mode and no way to read a value
into a variable.

## Tests

```
pip install .[test]
pytest
```