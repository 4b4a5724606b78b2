"""Syntax tree nodes for expressions and statements."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from treelox.tokens import Token


class Expr:
    """Base class of expression nodes."""

    __slots__ = ()


class Stmt:
    """Base class of statement nodes."""

    __slots__ = ()


@dataclass(frozen=True)
class BinaryExpr(Expr):
    op: Token
    left: Expr
    right: Expr


@dataclass(frozen=True)
class UnaryExpr(Expr):
    op: Token
    operand: Expr


@dataclass(frozen=True)
class LiteralExpr(Expr):
    """A literal; its value is derived from the token's kind and literal."""

    token: Token


@dataclass(frozen=True)
class GroupingExpr(Expr):
    expression: Expr


@dataclass(frozen=True)
class VariableExpr(Expr):
    name: Token


@dataclass(frozen=True)
class AssignmentExpr(Expr):
    name: Token
    value: Expr


@dataclass(frozen=True)
class LogicalExpr(Expr):
    op: Token
    left: Expr
    right: Expr


@dataclass(frozen=True)
class ExprStatement(Stmt):
    expression: Expr


@dataclass(frozen=True)
class PrintStatement(Stmt):
    expression: Expr


@dataclass(frozen=True)
class VarStatement(Stmt):
    name: Token
    initializer: Optional[Expr] = None


@dataclass(frozen=True)
class BlockStatement(Stmt):
    statements: tuple[Stmt, ...] = ()


@dataclass(frozen=True)
class IfStatement(Stmt):
    condition: Expr
    then_branch: Stmt
    else_branch: Optional[Stmt] = None


@dataclass(frozen=True)
class WhileStatement(Stmt):
    condition: Expr
    body: Stmt


@dataclass(frozen=True)
class ForStatement(Stmt):
    initializer: Stmt
    condition: Expr
    update: Expr
    body: Stmt