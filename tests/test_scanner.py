import io

import pytest

from treelox.errors import ErrorReporter
from treelox.scanner import Scanner, scan
from treelox.tokens import Token, TokenKind as K


def kinds(tokens):
    return [t.kind for t in tokens]


@pytest.fixture
def reporter():
    return ErrorReporter(io.StringIO())


def test_single_character_tokens(reporter):
    tokens = scan("(){},.-+;*/", reporter)
    assert kinds(tokens) == [
        K.LEFT_PAREN, K.RIGHT_PAREN, K.LEFT_BRACE, K.RIGHT_BRACE, K.COMMA,
        K.DOT, K.MINUS, K.PLUS, K.SEMICOLON, K.STAR, K.SLASH, K.EOF_TOKEN,
    ]
    assert not reporter.had_error


def test_one_and_two_character_operators(reporter):
    tokens = scan("! != = == > >= < <=", reporter)
    assert kinds(tokens) == [
        K.BANG, K.BANG_EQUAL, K.EQUAL, K.EQUAL_EQUAL,
        K.GREATER, K.GREATER_EQUAL, K.LESS, K.LESS_EQUAL, K.EOF_TOKEN,
    ]


def test_number_literals(reporter):
    tokens = scan("123.45 7", reporter)
    assert [t.literal for t in tokens[:2]] == [123.45, 7.0]
    assert kinds(tokens[:2]) == [K.NUMBER, K.NUMBER]


def test_trailing_dot_is_separate_token(reporter):
    tokens = scan("12.", reporter)
    assert kinds(tokens) == [K.NUMBER, K.DOT, K.EOF_TOKEN]
    assert tokens[0].literal == 12.0


def test_string_literal(reporter):
    tokens = scan('"hello world"', reporter)
    assert tokens[0] == Token(K.STRING, "hello world", 1)


def test_multiline_string_counts_lines(reporter):
    tokens = scan('"a\nb"', reporter)
    assert tokens[0].literal == "a\nb"
    assert tokens[0].line == 2


def test_unterminated_string_reports_error(reporter):
    tokens = scan('"abc', reporter)
    assert kinds(tokens) == [K.EOF_TOKEN]
    assert reporter.had_error
    assert reporter.stream.getvalue() == "[Error]:Line 1. Unterminated string literal\n"


def test_keywords_and_identifiers(reporter):
    tokens = scan("var x_1 = nil; while whilst", reporter)
    assert kinds(tokens) == [
        K.VAR, K.IDENTIFIER, K.EQUAL, K.NIL, K.SEMICOLON, K.WHILE, K.IDENTIFIER, K.EOF_TOKEN,
    ]
    assert tokens[1].literal == "x_1"
    assert tokens[6].literal == "whilst"


def test_comment_is_skipped_and_line_advances(reporter):
    tokens = scan("// note\nprint", reporter)
    assert kinds(tokens) == [K.PRINT, K.EOF_TOKEN]
    assert tokens[0].line == 2


def test_illegal_character(reporter):
    tokens = scan("@", reporter)
    assert kinds(tokens) == [K.EOF_TOKEN]
    assert reporter.stream.getvalue() == "[Error]:Line 1. Illegal char @ found\n"


def test_newlines_advance_line_numbers(reporter):
    tokens = scan("a\nb\n\nc", reporter)
    assert [t.line for t in tokens] == [1, 2, 4, 4]


def test_carriage_return_counts_as_line_break(reporter):
    tokens = scan("a\r\nb", reporter)
    assert tokens[1].line == 3


def test_eof_token_shape(reporter):
    tokens = scan("", reporter)
    assert tokens == [Token(K.EOF_TOKEN, "", 1)]


def test_scanner_class_matches_scan_function(reporter):
    source = "print 1 + 2;"
    assert Scanner(source, reporter).scan_tokens() == scan(source, reporter)


def test_scan_is_repeatable(reporter):
    scanner = Scanner("x = 1;", reporter)
    first = scanner.scan_tokens()
    second = scanner.scan_tokens()
    assert kinds(first) == [K.IDENTIFIER, K.EQUAL, K.NUMBER, K.SEMICOLON, K.EOF_TOKEN]
    assert kinds(second) == kinds(first)
    assert [t.literal for t in second[:3]] == ["x", "", 1.0]