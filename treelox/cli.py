"""Command-line entry point: run a script file or an interactive prompt."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from treelox.errors import ErrorReporter
from treelox.interpreter import Interpreter
from treelox.parser import parse
from treelox.scanner import scan

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_SYNTAX_ERROR = 10
EXIT_RUNTIME_ERROR = 20


class Lox:
    """Runs source text through scanner, parser and interpreter."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None) -> None:
        self.out = out
        self.err = err
        self.reporter = ErrorReporter(err)
        self.interpreter = Interpreter(self.reporter, out)

    def _out(self) -> TextIO:
        return self.out if self.out is not None else sys.stdout

    def _err(self) -> TextIO:
        return self.err if self.err is not None else sys.stderr

    def run(self, source: str) -> None:
        """Scan, parse and execute one piece of source text."""
        tokens = scan(source, self.reporter)
        if self.reporter.had_error:
            return
        statements = parse(tokens, self.reporter)
        if self.reporter.had_error:
            return
        self.interpreter.interpret(statements)

    def run_file(self, path: str) -> int:
        """Run a script file and return the process exit status."""
        try:
            handle = open(path, encoding="utf-8")
        except OSError:
            self._err().write("[Error]: Input path can not be opened.")
            return EXIT_OK
        with handle:
            source = handle.read()
        self.run(source)
        if self.reporter.had_error:
            return EXIT_SYNTAX_ERROR
        if self.reporter.had_runtime_error:
            return EXIT_RUNTIME_ERROR
        return EXIT_OK

    def repl(self, stdin: TextIO | None = None) -> None:
        """Read and run lines until 'exit', 'quit' or end of input."""
        stream = stdin if stdin is not None else sys.stdin
        while True:
            self._out().write("> ")
            self._out().flush()
            raw = stream.readline()
            if raw == "":
                break
            line = raw.rstrip("\r\n")
            if not line:
                continue
            if line in ("exit", "quit"):
                break
            self.run(line)
            self.reporter.reset()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the prompt with no arguments, or run the script named by one."""
    args = list(sys.argv[1:] if argv is None else argv)
    lox = Lox()
    if not args:
        lox.repl()
    elif len(args) == 1:
        try:
            return lox.run_file(args[0])
        except Exception as error:  # noqa: BLE001 - report anything that escapes
            sys.stderr.write(f"[Error]: {error}\n")
            return EXIT_FAILURE
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())