"""Recursive-descent parser for expressions."""

from __future__ import annotations

from typing import List, Optional, Sequence, TextIO

from .expressions import Binary, Expression, Grouping, Literal, Unary
from .tokens import Keyword, Token, TokenKind

# Binary operator levels, from lowest to highest precedence:
# equality, comparison, term, factor.
_BINARY_LEVELS = (
    frozenset({TokenKind.BANG_EQUAL, TokenKind.EQUAL_EQUAL}),
    frozenset(
        {
            TokenKind.GREATER,
            TokenKind.GREATER_EQUAL,
            TokenKind.LESS,
            TokenKind.LESS_EQUAL,
        }
    ),
    frozenset({TokenKind.MINUS, TokenKind.PLUS}),
    frozenset({TokenKind.SLASH, TokenKind.STAR}),
)
_UNARY = frozenset({TokenKind.BANG, TokenKind.MINUS})
_LITERAL_KINDS = frozenset({TokenKind.NUMBER, TokenKind.STRING})
_LITERAL_KEYWORDS = frozenset({Keyword.FALSE, Keyword.TRUE, Keyword.NIL})


class ParseError(Exception):
    """Raised when the tokens do not form a supported expression."""


class _Rules:
    """Parsing state over one pass of a token sequence."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self._tokens = tokens
        self._pos = 0

    def _peek_kind(self) -> Optional[TokenKind]:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos].token_type.kind
        return None

    def _advance(self) -> Optional[Token]:
        if self._pos < len(self._tokens):
            token = self._tokens[self._pos]
            self._pos += 1
            return token
        return None

    def expression(self) -> Expression:
        return self._binary(0)

    def _binary(self, level: int) -> Expression:
        if level == len(_BINARY_LEVELS):
            return self._unary()
        operators = _BINARY_LEVELS[level]
        result = self._binary(level + 1)
        while self._peek_kind() in operators:
            operator = self._advance()
            result = Binary(result, operator, self._binary(level + 1))
        return result

    def _unary(self) -> Expression:
        if self._peek_kind() in _UNARY:
            operator = self._advance()
            return Unary(operator, self._unary())
        return self._primary()

    def _primary(self) -> Expression:
        token = self._advance()
        if token is None:
            raise ParseError("Unexpected end of input.")
        token_type = token.token_type
        if token_type.kind in _LITERAL_KINDS or (
            token_type.kind is TokenKind.RESERVED
            and token_type.value in _LITERAL_KEYWORDS
        ):
            return Literal(token)
        if token_type.kind is TokenKind.LEFT_PAREN:
            inner = self.expression()
            closing = self._advance()
            if closing is None or closing.token_type.kind is not TokenKind.RIGHT_PAREN:
                raise ParseError("Expected ')' after expression.")
            return Grouping(inner)
        raise ParseError("Current parser doesn't support this token type.")


class Parser:
    """Builds an expression tree from a list of tokens."""

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.has_errors = False
        self._tokens: List[Token] = list(tokens)

    def parse(self) -> Expression:
        """Parse the tokens as one expression; trailing tokens are ignored.

        Raises ParseError when the tokens do not start a valid expression.
        """
        return _Rules(self._tokens).expression()

    def print_result(self, expression: Expression, out: TextIO) -> None:
        """Write the rendered expression to ``out``."""
        print(expression.render(), file=out)