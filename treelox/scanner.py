"""Turns source text into a list of tokens."""

from __future__ import annotations

from treelox.errors import ErrorReporter
from treelox.tokens import KEYWORDS, Token, TokenKind

_SINGLE = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    "-": TokenKind.MINUS,
    "+": TokenKind.PLUS,
    ";": TokenKind.SEMICOLON,
    "*": TokenKind.STAR,
}

# Operators that may be followed by '=': (alone, with '=').
_WITH_EQUAL = {
    "!": (TokenKind.BANG, TokenKind.BANG_EQUAL),
    "=": (TokenKind.EQUAL, TokenKind.EQUAL_EQUAL),
    ">": (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
    "<": (TokenKind.LESS, TokenKind.LESS_EQUAL),
}


def _is_digit(char: str) -> bool:
    return char != "" and char in "0123456789"


def _is_word_char(char: str) -> bool:
    return char != "" and char.isascii() and (char.isalnum() or char == "_")


class Scanner:
    """A single-pass scanner over one source string."""

    def __init__(self, source: str, reporter: ErrorReporter | None = None) -> None:
        self._source = source
        self._reporter = reporter if reporter is not None else ErrorReporter()
        self._current = 0
        self._line = 1
        self._tokens: list[Token] = []

    def scan_tokens(self) -> list[Token]:
        """Scan the whole source; the last token is always EOF."""
        self._current = 0
        self._line = 1
        self._tokens = []
        while not self._at_end():
            self._scan_token()
        self._tokens.append(Token(TokenKind.EOF_TOKEN, "", self._line))
        return self._tokens

    def _at_end(self) -> bool:
        return self._current >= len(self._source)

    def _peek(self, offset: int = 0) -> str:
        index = self._current + offset
        return self._source[index] if index < len(self._source) else ""

    def _advance(self) -> str:
        char = self._source[self._current]
        self._current += 1
        return char

    def _match(self, expected: str) -> bool:
        if self._peek() == expected:
            self._current += 1
            return True
        return False

    def _add(self, kind: TokenKind, literal: str | float = "") -> None:
        self._tokens.append(Token(kind, literal, self._line))

    def _scan_token(self) -> None:
        char = self._advance()
        if char in _SINGLE:
            self._add(_SINGLE[char])
        elif char == "/":
            if self._match("/"):
                self._skip_comment()
            else:
                self._add(TokenKind.SLASH)
        elif char in _WITH_EQUAL:
            alone, paired = _WITH_EQUAL[char]
            self._add(paired if self._match("=") else alone)
        elif char == '"':
            self._string()
        elif char in " \t":
            pass
        elif char in "\n\r":
            self._line += 1
        elif _is_digit(char):
            self._number()
        elif _is_word_char(char):
            self._identifier()
        else:
            self._reporter.error(f"Illegal char {char} found", self._line)

    def _skip_comment(self) -> None:
        while not self._at_end():
            if self._advance() == "\n":
                self._line += 1
                break

    def _number(self) -> None:
        start = self._current - 1
        while _is_digit(self._peek()):
            self._advance()
        if self._peek() == "." and _is_digit(self._peek(1)):
            self._advance()
            while _is_digit(self._peek()):
                self._advance()
        self._add(TokenKind.NUMBER, float(self._source[start : self._current]))

    def _string(self) -> None:
        start = self._current
        while self._peek() not in ('"', ""):
            if self._peek() == "\n":
                self._line += 1
            self._advance()
        if self._at_end():
            self._reporter.error("Unterminated string literal", self._line)
            return
        text = self._source[start : self._current]
        self._advance()
        self._add(TokenKind.STRING, text)

    def _identifier(self) -> None:
        start = self._current - 1
        while _is_word_char(self._peek()):
            self._advance()
        word = self._source[start : self._current]
        if word in KEYWORDS:
            self._add(KEYWORDS[word])
        else:
            self._add(TokenKind.IDENTIFIER, word)


def scan(source: str, reporter: ErrorReporter | None = None) -> list[Token]:
    """Scan ``source`` and return its tokens."""
    return Scanner(source, reporter).scan_tokens()