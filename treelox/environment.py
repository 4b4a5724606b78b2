"""Variable scopes chained to their enclosing scope."""

from __future__ import annotations

from treelox.errors import LoxRuntimeError
from treelox.tokens import LoxValue, Token


class Environment:
    """A scope mapping variable names to values, with an optional parent."""

    def __init__(self, parent: Environment | None = None) -> None:
        self.parent = parent
        self._values: dict[str, LoxValue] = {}

    @staticmethod
    def _key(name: Token) -> str:
        return str(name.literal)

    def define(self, name: Token, value: LoxValue) -> None:
        """Create or overwrite a variable in this scope."""
        self._values[self._key(name)] = value

    def assign(self, name: Token, value: LoxValue) -> None:
        """Set an existing variable in the nearest scope that holds it."""
        key = self._key(name)
        scope: Environment | None = self
        while scope is not None:
            if key in scope._values:
                scope._values[key] = value
                return
            scope = scope.parent
        raise LoxRuntimeError(name, f"Undefined variable '{key}'")

    def get(self, name: Token) -> LoxValue:
        """Look up a variable, searching enclosing scopes outward."""
        key = self._key(name)
        scope: Environment | None = self
        while scope is not None:
            if key in scope._values:
                return scope._values[key]
            scope = scope.parent
        raise LoxRuntimeError(name, f"Undefined variable '{key}'")