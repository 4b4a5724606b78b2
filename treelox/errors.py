"""Error types and the reporter that records and prints diagnostics."""

from __future__ import annotations

import sys
from typing import TextIO

from treelox.tokens import Token, TokenKind, token_kind_to_str


class ParseError(Exception):
    """Raised inside the parser to unwind to a synchronisation point."""


class LoxRuntimeError(Exception):
    """An error raised while evaluating a program."""

    def __init__(self, token: Token, message: str) -> None:
        super().__init__(message)
        self.token = token
        self.message = message


def _format_number(value: float) -> str:
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


class ErrorReporter:
    """Writes diagnostics to a stream and remembers whether any occurred."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream
        self.had_error = False
        self.had_runtime_error = False

    def _write(self, text: str) -> None:
        (self.stream if self.stream is not None else sys.stderr).write(text)

    def error(self, reason: str, line: int) -> None:
        """Report a compile-time error on a line."""
        self.had_error = True
        self._write(f"[Error]:Line {line}. {reason}\n")

    def token_error(self, reason: str, token: Token) -> None:
        """Report a compile-time error, naming the offending token."""
        if token.kind in (TokenKind.IDENTIFIER, TokenKind.STRING):
            found = str(token.literal)
        elif token.kind is TokenKind.NUMBER:
            found = _format_number(token.literal)
        else:
            found = token_kind_to_str(token.kind)
        self.error(f"{reason}, found '{found}'", token.line)

    def runtime_error(self, error: LoxRuntimeError) -> None:
        """Report an error raised during execution."""
        self.had_runtime_error = True
        self._write(f"[Runtime Error]:Line {error.token.line}. {error.message}\n")

    def warning(self, reason: str, line: int) -> None:
        """Report a warning; it does not mark the run as failed."""
        self._write(f"[Warning]:Line {line}. {reason}.\n")

    def reset(self) -> None:
        """Forget earlier errors."""
        self.had_error = False
        self.had_runtime_error = False