import pytest

from treelox.environment import Environment
from treelox.errors import LoxRuntimeError
from treelox.tokens import Token, TokenKind


def _name(text, line=1):
    return Token(TokenKind.IDENTIFIER, text, line)


def test_define_then_get():
    env = Environment()
    env.define(_name("a"), 1.0)
    assert env.get(_name("a")) == 1.0


def test_define_overwrites():
    env = Environment()
    env.define(_name("a"), "one")
    env.define(_name("a"), True)
    assert env.get(_name("a")) is True


def test_nil_value_is_stored():
    env = Environment()
    env.define(_name("a"), None)
    assert env.get(_name("a")) is None


def test_get_undefined_raises_with_token():
    name = _name("missing", 7)
    with pytest.raises(LoxRuntimeError) as info:
        Environment().get(name)
    assert info.value.token == name
    assert info.value.message == "Undefined variable 'missing'"


def test_assign_undefined_raises():
    with pytest.raises(LoxRuntimeError, match="Undefined variable 'x'"):
        Environment().assign(_name("x"), 1.0)


def test_child_reads_parent():
    parent = Environment()
    parent.define(_name("a"), "outer")
    child = Environment(parent)
    assert child.get(_name("a")) == "outer"
    assert child.parent is parent


def test_assign_reaches_parent():
    parent = Environment()
    parent.define(_name("a"), 1.0)
    child = Environment(parent)
    child.assign(_name("a"), 2.0)
    assert parent.get(_name("a")) == 2.0


def test_shadowing_leaves_parent_untouched():
    parent = Environment()
    parent.define(_name("a"), "outer")
    child = Environment(parent)
    child.define(_name("a"), "inner")
    child.assign(_name("a"), "changed")
    assert child.get(_name("a")) == "changed"
    assert parent.get(_name("a")) == "outer"


def test_parent_does_not_see_child():
    parent = Environment()
    child = Environment(parent)
    child.define(_name("a"), 1.0)
    with pytest.raises(LoxRuntimeError):
        parent.get(_name("a"))