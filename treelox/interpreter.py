"""Tree-walking evaluator for parsed programs."""

from __future__ import annotations

import math
import operator
import sys
from collections.abc import Callable, Iterable, Iterator
from contextlib import contextmanager
from typing import TextIO

from treelox.environment import Environment
from treelox.errors import ErrorReporter, LoxRuntimeError
from treelox.syntax import (
    AssignmentExpr,
    BinaryExpr,
    BlockStatement,
    Expr,
    ExprStatement,
    ForStatement,
    GroupingExpr,
    IfStatement,
    LiteralExpr,
    LogicalExpr,
    PrintStatement,
    Stmt,
    UnaryExpr,
    VarStatement,
    VariableExpr,
    WhileStatement,
)
from treelox.tokens import LoxValue, Token, TokenKind


def is_truthy(value: LoxValue) -> bool:
    """Only nil and false are falsey; every other value is truthy."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def stringify(value: LoxValue) -> str:
    """Render a value the way ``print`` shows it."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return f"{value:.6f}"
    return "nil"


def _is_number(value: LoxValue) -> bool:
    return isinstance(value, float)


def _lox_equal(left: LoxValue, right: LoxValue) -> bool:
    # Values of different types are never equal (so true != 1).
    return type(left) is type(right) and left == right


def _divide(left: float, right: float) -> float:
    """IEEE division: a zero divisor gives an infinity or NaN."""
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


_NUMERIC_OPS: dict[TokenKind, Callable[[float, float], LoxValue]] = {
    TokenKind.MINUS: operator.sub,
    TokenKind.STAR: operator.mul,
    TokenKind.SLASH: _divide,
    TokenKind.GREATER: operator.gt,
    TokenKind.GREATER_EQUAL: operator.ge,
    TokenKind.LESS: operator.lt,
    TokenKind.LESS_EQUAL: operator.le,
}


def _literal_value(token: Token) -> LoxValue:
    if token.kind in (TokenKind.STRING, TokenKind.NUMBER):
        return token.literal
    if token.kind is TokenKind.TRUE:
        return True
    if token.kind is TokenKind.FALSE:
        return False
    return None


class Interpreter:
    """Executes statements, keeping global state between calls."""

    def __init__(
        self, reporter: ErrorReporter | None = None, out: TextIO | None = None
    ) -> None:
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.out = out
        self.globals = Environment()
        self._environment = self.globals

    def _write(self, text: str) -> None:
        (self.out if self.out is not None else sys.stdout).write(text)

    @contextmanager
    def _scope(self) -> Iterator[Environment]:
        previous = self._environment
        self._environment = Environment(previous)
        try:
            yield self._environment
        finally:
            self._environment = previous

    def interpret(self, statements: Iterable[Stmt]) -> None:
        """Run statements in order; a runtime error stops the run and is reported."""
        try:
            for stmt in statements:
                self.execute(stmt)
        except LoxRuntimeError as error:
            self.reporter.runtime_error(error)

    def execute(self, stmt: Stmt) -> None:
        """Execute a single statement."""
        match stmt:
            case ExprStatement(expression):
                self.evaluate(expression)
            case PrintStatement(expression):
                self._write(stringify(self.evaluate(expression)) + "\n")
            case VarStatement(name, initializer):
                value = None if initializer is None else self.evaluate(initializer)
                self._environment.define(name, value)
            case BlockStatement(statements):
                self._execute_block(statements)
            case IfStatement(condition, then_branch, else_branch):
                if is_truthy(self.evaluate(condition)):
                    self.execute(then_branch)
                elif else_branch is not None:
                    self.execute(else_branch)
            case WhileStatement(condition, body):
                while is_truthy(self.evaluate(condition)):
                    self.execute(body)
            case ForStatement(initializer, condition, update, body):
                with self._scope():
                    self.execute(initializer)
                    while is_truthy(self.evaluate(condition)):
                        self.execute(body)
                        self.evaluate(update)
            case _:
                raise TypeError(f"unknown statement: {stmt!r}")

    def _execute_block(self, statements: Iterable[Stmt]) -> None:
        # A block reports its own runtime errors and lets the program go on.
        with self._scope():
            try:
                for stmt in statements:
                    self.execute(stmt)
            except LoxRuntimeError as error:
                self.reporter.runtime_error(error)

    def evaluate(self, expr: Expr) -> LoxValue:
        """Compute the value of an expression."""
        match expr:
            case LiteralExpr(token):
                return _literal_value(token)
            case GroupingExpr(inner):
                return self.evaluate(inner)
            case UnaryExpr(op, operand):
                return self._unary(op, operand)
            case BinaryExpr(op, left, right):
                return self._binary(op, left, right)
            case VariableExpr(name):
                return self._environment.get(name)
            case AssignmentExpr(name, value_expr):
                value = self.evaluate(value_expr)
                self._environment.assign(name, value)
                return value
            case LogicalExpr(op, left, right):
                # Both operands are evaluated before the operator is applied.
                left_value = self.evaluate(left)
                right_value = self.evaluate(right)
                if op.kind is TokenKind.AND:
                    return right_value if is_truthy(left_value) else left_value
                return left_value if is_truthy(left_value) else right_value
            case _:
                raise TypeError(f"unknown expression: {expr!r}")

    def _unary(self, op: Token, operand: Expr) -> LoxValue:
        value = self.evaluate(operand)
        if op.kind is TokenKind.MINUS:
            if _is_number(value):
                return -value
            raise LoxRuntimeError(op, "Operand must be a number.")
        if op.kind is TokenKind.BANG:
            return not is_truthy(value)
        return None

    def _binary(self, op: Token, left_expr: Expr, right_expr: Expr) -> LoxValue:
        # The right operand is evaluated first.
        right = self.evaluate(right_expr)
        left = self.evaluate(left_expr)
        kind = op.kind

        if kind is TokenKind.PLUS:
            if _is_number(left) and _is_number(right):
                return left + right
            if isinstance(left, str) and isinstance(right, str):
                return left + right
            raise LoxRuntimeError(op, "Operands must be numbers or doubles.")
        if kind in _NUMERIC_OPS:
            if _is_number(left) and _is_number(right):
                return _NUMERIC_OPS[kind](left, right)
            raise LoxRuntimeError(op, "Operands must be numbers.")
        if kind is TokenKind.EQUAL_EQUAL:
            return _lox_equal(left, right)
        if kind is TokenKind.BANG_EQUAL:
            return not _lox_equal(left, right)
        return None