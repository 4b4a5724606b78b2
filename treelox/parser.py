"""Recursive-descent parser that builds statements from tokens."""

from __future__ import annotations

from collections.abc import Sequence

from treelox.errors import ErrorReporter, ParseError
from treelox.syntax import (
    AssignmentExpr,
    BinaryExpr,
    BlockStatement,
    Expr,
    ExprStatement,
    ForStatement,
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
from treelox.tokens import Token, TokenKind

_LITERAL_KINDS = frozenset(
    {
        TokenKind.STRING,
        TokenKind.NUMBER,
        TokenKind.TRUE,
        TokenKind.FALSE,
        TokenKind.NIL,
    }
)

_SYNC_KINDS = frozenset(
    {
        TokenKind.SEMICOLON,
        TokenKind.CLASS,
        TokenKind.FUN,
        TokenKind.VAR,
        TokenKind.FOR,
        TokenKind.IF,
        TokenKind.WHILE,
        TokenKind.PRINT,
        TokenKind.RETURN,
    }
)

_EQUALITY = frozenset({TokenKind.BANG_EQUAL, TokenKind.EQUAL_EQUAL})
_COMPARISON = frozenset(
    {
        TokenKind.GREATER,
        TokenKind.GREATER_EQUAL,
        TokenKind.LESS,
        TokenKind.LESS_EQUAL,
    }
)
_TERM = frozenset({TokenKind.MINUS, TokenKind.PLUS})
_FACTOR = frozenset({TokenKind.SLASH, TokenKind.STAR})
_UNARY = frozenset({TokenKind.BANG, TokenKind.MINUS})


class Parser:
    """Parses a token list into a list of statements.

    Syntax errors are reported to the reporter; the parser then skips ahead
    to a likely statement boundary and carries on, leaving the faulty
    declaration out of the result.
    """

    def __init__(
        self, tokens: Sequence[Token], reporter: ErrorReporter | None = None
    ) -> None:
        self._tokens = list(tokens)
        if not self._tokens or self._tokens[-1].kind is not TokenKind.EOF_TOKEN:
            line = self._tokens[-1].line if self._tokens else 0
            self._tokens.append(Token(TokenKind.EOF_TOKEN, "", line))
        self._reporter = reporter if reporter is not None else ErrorReporter()
        self._current = 0

    def parse(self) -> list[Stmt]:
        """Parse every declaration up to the end of input."""
        statements: list[Stmt] = []
        while not self._at_end():
            stmt = self._declaration()
            if stmt is not None:
                statements.append(stmt)
        return statements

    # Token helpers.

    def _peek(self) -> Token:
        if self._current >= len(self._tokens):
            return self._tokens[-1]
        return self._tokens[self._current]

    def _check(self, *kinds: TokenKind) -> bool:
        return self._peek().kind in kinds

    def _at_end(self) -> bool:
        return self._peek().kind is TokenKind.EOF_TOKEN

    def _advance(self) -> Token:
        if self._at_end():
            return self._tokens[-1]
        token = self._tokens[self._current]
        self._current += 1
        return token

    def _match(self, kind: TokenKind) -> bool:
        if self._check(kind):
            self._advance()
            return True
        return False

    def _error(self, reason: str, token: Token) -> ParseError:
        self._reporter.token_error(reason, token)
        return ParseError(reason)

    def _consume(self, kind: TokenKind, reason: str) -> Token:
        if self._check(kind):
            return self._advance()
        raise self._error(reason, self._peek())

    def _synchronize(self) -> None:
        token = self._advance()
        while token.kind is not TokenKind.EOF_TOKEN:
            if token.kind in _SYNC_KINDS:
                return
            token = self._advance()

    # Declarations and statements.

    def _declaration(self) -> Stmt | None:
        try:
            if self._match(TokenKind.VAR):
                return self._var_declaration()
            return self._statement()
        except ParseError:
            self._synchronize()
            return None

    def _var_declaration(self) -> Stmt:
        name = self._consume(TokenKind.IDENTIFIER, "Expected identifier")
        initializer = self._expression() if self._match(TokenKind.EQUAL) else None
        self._consume(TokenKind.SEMICOLON, "Expected ';' after variable declaration")
        return VarStatement(name, initializer)

    def _statement(self) -> Stmt:
        if self._match(TokenKind.PRINT):
            return self._print_statement()
        if self._match(TokenKind.LEFT_BRACE):
            return self._block_statement()
        if self._match(TokenKind.IF):
            return self._if_statement()
        if self._match(TokenKind.WHILE):
            return self._while_statement()
        if self._match(TokenKind.FOR):
            return self._for_statement()
        return self._expr_statement()

    def _expr_statement(self) -> Stmt:
        expr = self._expression()
        self._consume(TokenKind.SEMICOLON, "Expected ';' after expression")
        return ExprStatement(expr)

    def _print_statement(self) -> Stmt:
        expr = self._expression()
        self._consume(TokenKind.SEMICOLON, "Expected ';' after expression")
        return PrintStatement(expr)

    def _block_statement(self) -> Stmt:
        statements: list[Stmt] = []
        while not self._check(TokenKind.RIGHT_BRACE) and not self._at_end():
            stmt = self._declaration()
            if stmt is not None:
                statements.append(stmt)
        self._consume(TokenKind.RIGHT_BRACE, "Expected '}' after block")
        return BlockStatement(tuple(statements))

    def _if_statement(self) -> Stmt:
        self._consume(TokenKind.LEFT_PAREN, "Expected '(' after if")
        condition = self._expression()
        self._consume(TokenKind.RIGHT_PAREN, "Expected ')' after expression")
        then_branch = self._statement()
        else_branch = self._statement() if self._match(TokenKind.ELSE) else None
        return IfStatement(condition, then_branch, else_branch)

    def _while_statement(self) -> Stmt:
        self._consume(TokenKind.LEFT_PAREN, "Expected '(' after while keyword")
        condition = self._expression()
        self._consume(TokenKind.RIGHT_PAREN, "Expected ')' after condition")
        body = self._statement()
        return WhileStatement(condition, body)

    def _for_statement(self) -> Stmt:
        self._consume(TokenKind.LEFT_PAREN, "Expected '(' after for keyword")
        if self._match(TokenKind.VAR):
            initializer = self._var_declaration()
        else:
            initializer = self._expr_statement()

        # An omitted condition loops forever.
        condition: Expr = LiteralExpr(Token(TokenKind.TRUE))
        if not self._check(TokenKind.SEMICOLON):
            condition = self._expression()
        self._consume(TokenKind.SEMICOLON, "Expected ';' after condition")

        # An omitted update evaluates to nil.
        update: Expr = LiteralExpr(Token(TokenKind.EOF_TOKEN, None, 0))
        if not self._check(TokenKind.RIGHT_PAREN):
            update = self._expression()
        self._consume(TokenKind.RIGHT_PAREN, "Expected ')' after update")

        body = self._statement()
        return ForStatement(initializer, condition, update, body)

    # Expressions.

    def _expression(self) -> Expr:
        return self._assignment()

    def _assignment(self) -> Expr:
        start = self._peek()
        expr = self._logical_or()
        if self._match(TokenKind.EQUAL):
            value = self._assignment()
            if isinstance(expr, VariableExpr):
                return AssignmentExpr(expr.name, value)
            raise self._error("Expected variable name", start)
        return expr

    def _logical_or(self) -> Expr:
        left = self._logical_and()
        if self._check(TokenKind.OR):
            op = self._advance()
            return LogicalExpr(op, left, self._logical_and())
        return left

    def _logical_and(self) -> Expr:
        left = self._equality()
        if self._check(TokenKind.AND):
            op = self._advance()
            return LogicalExpr(op, left, self._equality())
        return left

    def _binary_chain(self, kinds: frozenset[TokenKind], operand) -> Expr:
        expr = operand()
        while self._peek().kind in kinds:
            op = self._advance()
            expr = BinaryExpr(op, expr, operand())
        return expr

    def _equality(self) -> Expr:
        return self._binary_chain(_EQUALITY, self._comparison)

    def _comparison(self) -> Expr:
        return self._binary_chain(_COMPARISON, self._term)

    def _term(self) -> Expr:
        return self._binary_chain(_TERM, self._factor)

    def _factor(self) -> Expr:
        return self._binary_chain(_FACTOR, self._unary)

    def _unary(self) -> Expr:
        if self._peek().kind in _UNARY:
            op = self._advance()
            return UnaryExpr(op, self._unary())
        return self._primary()

    def _primary(self) -> Expr:
        if self._peek().kind in _LITERAL_KINDS:
            return LiteralExpr(self._advance())
        if self._check(TokenKind.IDENTIFIER):
            return VariableExpr(self._advance())
        if self._match(TokenKind.LEFT_PAREN):
            expr = self._expression()
            self._consume(TokenKind.RIGHT_PAREN, "Expected ')' after expression")
            return expr
        raise self._error("Expected expression", self._peek())


def parse(tokens: Sequence[Token], reporter: ErrorReporter | None = None) -> list[Stmt]:
    """Parse ``tokens`` into a list of statements."""
    return Parser(tokens, reporter).parse()