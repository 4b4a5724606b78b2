import io

import pytest

from treelox.errors import ErrorReporter, LoxRuntimeError
from treelox.tokens import Token, TokenKind


@pytest.fixture
def stream():
    return io.StringIO()


def test_error_writes_line_and_reason(stream):
    reporter = ErrorReporter(stream)
    reporter.error("bad", 3)
    assert stream.getvalue() == "[Error]:Line 3. bad\n"
    assert reporter.had_error
    assert not reporter.had_runtime_error


def test_token_error_identifier(stream):
    reporter = ErrorReporter(stream)
    reporter.token_error("Expected expression", Token(TokenKind.IDENTIFIER, "foo", 2))
    assert stream.getvalue() == "[Error]:Line 2. Expected expression, found 'foo'\n"


def test_token_error_string(stream):
    reporter = ErrorReporter(stream)
    reporter.token_error("Expected ';'", Token(TokenKind.STRING, "hi", 1))
    assert stream.getvalue().endswith("found 'hi'\n")


def test_token_error_integral_number_has_no_fraction(stream):
    reporter = ErrorReporter(stream)
    reporter.token_error("Expected ';'", Token(TokenKind.NUMBER, 3.0, 1))
    assert stream.getvalue() == "[Error]:Line 1. Expected ';', found '3'\n"


def test_token_error_fractional_number(stream):
    reporter = ErrorReporter(stream)
    reporter.token_error("Expected ';'", Token(TokenKind.NUMBER, 1.5, 1))
    assert "found '1.5'" in stream.getvalue()


def test_token_error_punctuation_uses_kind_text(stream):
    reporter = ErrorReporter(stream)
    reporter.token_error("Expected expression", Token(TokenKind.SEMICOLON, "", 7))
    assert stream.getvalue() == "[Error]:Line 7. Expected expression, found ';'\n"


def test_token_error_eof(stream):
    reporter = ErrorReporter(stream)
    reporter.token_error("Expected '}' after block", Token(TokenKind.EOF_TOKEN, "", 2))
    assert stream.getvalue().endswith("found 'eof'\n")


def test_runtime_error(stream):
    reporter = ErrorReporter(stream)
    err = LoxRuntimeError(Token(TokenKind.MINUS, "", 4), "Operand must be a number.")
    reporter.runtime_error(err)
    assert stream.getvalue() == "[Runtime Error]:Line 4. Operand must be a number.\n"
    assert reporter.had_runtime_error
    assert not reporter.had_error


def test_warning_does_not_set_flags(stream):
    reporter = ErrorReporter(stream)
    reporter.warning("careful", 5)
    assert stream.getvalue() == "[Warning]:Line 5. careful.\n"
    assert not reporter.had_error


def test_reset_clears_flags(stream):
    reporter = ErrorReporter(stream)
    reporter.error("bad", 1)
    reporter.runtime_error(LoxRuntimeError(Token(TokenKind.PLUS), "x"))
    reporter.reset()
    assert (reporter.had_error, reporter.had_runtime_error) == (False, False)


def test_default_stream_is_stderr(capsys):
    ErrorReporter().error("oops", 9)
    assert capsys.readouterr().err == "[Error]:Line 9. oops\n"


def test_runtime_error_carries_token_and_message():
    token = Token(TokenKind.IDENTIFIER, "a", 2)
    with pytest.raises(LoxRuntimeError) as info:
        raise LoxRuntimeError(token, "Undefined variable 'a'")
    assert info.value.token == token
    assert str(info.value) == "Undefined variable 'a'"


def test_token_error_sets_error_flag_only(stream):
    reporter = ErrorReporter(stream)
    reporter.token_error("Expected expression", Token(TokenKind.PLUS, "", 1))
    assert (reporter.had_error, reporter.had_runtime_error) == (True, False)