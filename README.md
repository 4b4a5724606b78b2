# treelox

treelox is a tree-walking interpreter for a small, dynamically typed scripting
language. The language has numbers, strings, booleans and `nil`, variables with
block scope, and `print`, `if`/`else`, `while` and `for` statements.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running

Start an interactive session by running the command with no arguments:

```
treelox
```

The prompt is `> `. Each line you type is scanned, parsed and run at once;
variables defined on one line stay available on the next. Empty lines are
ignored. Type `exit` or `quit`, or end the input, to leave. Errors on one line
do not end the session.

Run a script by passing its path:

```
treelox program.lox
```

The same entry point can be started with `python -m treelox.cli`.

Exit status when running a script:

- `0` when the script ran without errors (also when the path could not be
  opened; a message is written to standard error in that case),
- `10` when the script has syntax errors; nothing is executed then,
- `20` when an error occurred at run time,
- `1` when reading the file failed in some other way.

## The language

```
var greeting = "Hello";
var name = "world";
print greeting + ", " + name;

var total = 0;
for (var i = 1; i <= 10; i = i + 1) {
  total = total + i;
}
print total;

var n = 3;
while (n > 0) {
  if (n == 2) print "two"; else print n;
  n = n - 1;
}
```

- Values: numbers (`12`, `3.5`), strings in double quotes (no escape
  sequences; a string may span lines), `true`, `false` and `nil`.
- Variables: `var x;` (starts as `nil`) or `var x = expr;`, and assignment
  `x = expr;`. Assigning to or reading a variable that was never declared is a
  run-time error. Blocks `{ ... }` open a new scope.
- Arithmetic: `+ - * /` on numbers; `+` also joins two strings. Division by
  zero gives an infinity or NaN rather than an error.
- Comparison: `< <= > >=` on numbers, and `==` / `!=` on any values. Values of
  different types are never equal.
- Logic: `!`, `and`, `or`. Only `false` and `nil` count as false; `and` and
  `or` return one of their operands. Both operands of `and` and `or` are
  always evaluated.
- `for (init; condition; update) body`: the initializer is required (a `var`
  declaration or an expression statement); the condition and update may be
  left out, and an empty condition loops forever.
- Comments start with `//` and run to the end of the line.
- `print` shows numbers with six decimal places, so `print 1 + 2;` shows
  `3.000000`.

Errors are written to standard error, for example
`[Error]:Line 1. Expected ';' after expression, found 'eof'` or
`[Runtime Error]:Line 1. Operands must be numbers.`

After a syntax error the parser skips to the next statement boundary and
keeps going, so several syntax errors can be reported in one run. A run-time
error stops the program; one raised inside a block is reported and execution
continues after that block.

## What it does not do

The words `fun`, `class`, `return`, `this` and `super` are reserved, but the
language has no functions, classes or return statements: using them is a
syntax error. There are no built-in functions and no way to read input from a
program.

## Using it from Python

```python
import io
from treelox.cli import Lox

out = io.StringIO()
lox = Lox(out=out, err=io.StringIO())
lox.run('print "hi";')
print(out.getvalue())  # "hi\n"
```

`Lox.run_file(path)` runs a script and returns the exit status described
above; `Lox.repl(stdin)` runs the interactive loop over any text stream.

The stages are also available on their own:

- `treelox.scanner.scan(source, reporter)` returns a list of
  `treelox.tokens.Token`, always ending with an `EOF_TOKEN`.
- `treelox.parser.parse(tokens, reporter)` returns a list of statement nodes
  from `treelox.syntax`.
- `treelox.interpreter.Interpreter(reporter, out)` runs them with
  `interpret(statements)`; `execute` and `evaluate` work on single nodes.
  `treelox.interpreter.stringify` and `is_truthy` expose how values print and
  which count as true.

Diagnostics go through `treelox.errors.ErrorReporter`, whose `had_error` and
`had_runtime_error` flags record whether anything went wrong; `reset()` clears
them. Run-time failures are raised as `treelox.errors.LoxRuntimeError` and
variable scopes are `treelox.environment.Environment` objects.