"""Expression tree produced by the parser."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from .tokens import Token

_UNEVALUATED = "Other"


class Expression(ABC):
    """A node of a parsed expression."""

    @abstractmethod
    def render(self) -> str:
        """The expression in parenthesised prefix form."""

    def evaluate(self) -> str:
        """The value of the expression as text."""
        return _UNEVALUATED


@dataclass(frozen=True)
class Literal(Expression):
    """A number, string, boolean or nil."""

    token: Token

    def render(self) -> str:
        return self.token.parser_text()

    def evaluate(self) -> str:
        return self.token.parser_text()


@dataclass(frozen=True)
class Unary(Expression):
    """A prefix operator applied to one operand."""

    operator: Token
    operand: Expression

    def render(self) -> str:
        return f"({self.operator.parser_text()} {self.operand.render()})"


@dataclass(frozen=True)
class Binary(Expression):
    """An infix operator applied to two operands."""

    left: Expression
    operator: Token
    right: Expression

    def render(self) -> str:
        return (
            f"({self.operator.parser_text()} "
            f"{self.left.render()} {self.right.render()})"
        )


@dataclass(frozen=True)
class Grouping(Expression):
    """A parenthesised expression."""

    expression: Expression

    def render(self) -> str:
        return f"(group {self.expression.render()})"