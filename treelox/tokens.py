"""Token kinds and the token record produced by the scanner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union

LoxValue = Union[None, str, float, bool]
"""A runtime value: nil (``None``), a string, a number or a boolean."""


class TokenKind(Enum):
    """Every kind of token the scanner can produce."""

    # Single-character tokens.
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACE = auto()
    RIGHT_BRACE = auto()
    COMMA = auto()
    DOT = auto()
    MINUS = auto()
    PLUS = auto()
    SEMICOLON = auto()
    SLASH = auto()
    STAR = auto()

    # One or two character tokens.
    BANG = auto()
    BANG_EQUAL = auto()
    EQUAL = auto()
    EQUAL_EQUAL = auto()
    GREATER = auto()
    GREATER_EQUAL = auto()
    LESS = auto()
    LESS_EQUAL = auto()

    # Literals.
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # Keywords.
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    EOF_TOKEN = auto()


KEYWORDS: dict[str, TokenKind] = {
    "and": TokenKind.AND,
    "class": TokenKind.CLASS,
    "else": TokenKind.ELSE,
    "false": TokenKind.FALSE,
    "fun": TokenKind.FUN,
    "for": TokenKind.FOR,
    "if": TokenKind.IF,
    "nil": TokenKind.NIL,
    "or": TokenKind.OR,
    "print": TokenKind.PRINT,
    "return": TokenKind.RETURN,
    "super": TokenKind.SUPER,
    "this": TokenKind.THIS,
    "true": TokenKind.TRUE,
    "var": TokenKind.VAR,
    "while": TokenKind.WHILE,
}

_KIND_TEXT: dict[TokenKind, str] = {
    TokenKind.LEFT_PAREN: "(",
    TokenKind.RIGHT_PAREN: ")",
    TokenKind.LEFT_BRACE: "{",
    TokenKind.RIGHT_BRACE: "}",
    TokenKind.COMMA: ",",
    TokenKind.DOT: ".",
    TokenKind.MINUS: "-",
    TokenKind.PLUS: "+",
    TokenKind.SEMICOLON: ";",
    TokenKind.SLASH: "/",
    TokenKind.STAR: "*",
    TokenKind.BANG: "!",
    TokenKind.BANG_EQUAL: "!=",
    TokenKind.EQUAL: "=",
    TokenKind.EQUAL_EQUAL: "==",
    TokenKind.GREATER: ">",
    TokenKind.GREATER_EQUAL: ">=",
    TokenKind.LESS: "<",
    TokenKind.LESS_EQUAL: "<=",
    TokenKind.IDENTIFIER: "identifier",
    TokenKind.STRING: "string",
    TokenKind.NUMBER: "number",
    **{kind: word for word, kind in KEYWORDS.items()},
    TokenKind.EOF_TOKEN: "eof",
}


@dataclass(frozen=True)
class Token:
    """A lexical token with its literal value and source line."""

    kind: TokenKind
    literal: LoxValue = None
    line: int = 0


def token_kind_to_str(kind: TokenKind) -> str:
    """Return the text used to show a token kind in messages."""
    return _KIND_TEXT.get(kind, "")