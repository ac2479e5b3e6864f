"""Token model: keywords, token types, tokens and lexical errors."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class Keyword(Enum):
    """Reserved words of the language."""

    AND = "and"
    CLASS = "class"
    ELSE = "else"
    FALSE = "false"
    FOR = "for"
    FUN = "fun"
    IF = "if"
    NIL = "nil"
    OR = "or"
    PRINT = "print"
    RETURN = "return"
    SUPER = "super"
    THIS = "this"
    TRUE = "true"
    VAR = "var"
    WHILE = "while"

    def parser_text(self) -> str:
        """The keyword as it appears in a parsed expression."""
        return self.value

    def lexer_text(self) -> str:
        """The keyword as printed by the tokenizer."""
        return f"{self.name} {self.value} null"


_RESERVED = frozenset(keyword.value for keyword in Keyword)


def is_reserved_keyword(text: str) -> bool:
    """Tell whether ``text`` is a reserved word."""
    return text in _RESERVED


def format_number(text: str) -> str:
    """Render a numeric lexeme as a float with at least one fractional digit.

    Raises ValueError when ``text`` is not a valid number.
    """
    rendered = repr(float(text))
    if "e" in rendered:
        mantissa, exponent = rendered.split("e")
        return f"{mantissa}e{int(exponent)}"
    return rendered


class TokenKind(Enum):
    """The kinds of token the lexer produces."""

    LEFT_PAREN = "LEFT_PAREN"
    RIGHT_PAREN = "RIGHT_PAREN"
    LEFT_BRACE = "LEFT_BRACE"
    RIGHT_BRACE = "RIGHT_BRACE"
    STAR = "STAR"
    DOT = "DOT"
    COMMA = "COMMA"
    PLUS = "PLUS"
    MINUS = "MINUS"
    SEMICOLON = "SEMICOLON"
    EQUAL = "EQUAL"
    EQUAL_EQUAL = "EQUAL_EQUAL"
    BANG = "BANG"
    BANG_EQUAL = "BANG_EQUAL"
    LESS = "LESS"
    GREATER = "GREATER"
    LESS_EQUAL = "LESS_EQUAL"
    GREATER_EQUAL = "GREATER_EQUAL"
    SLASH = "SLASH"
    STRING = "STRING"
    NUMBER = "NUMBER"
    IDENTIFIER = "IDENTIFIER"
    RESERVED = "RESERVED"
    INVALID_CHAR = "INVALID_CHAR"


_LEXEMES = {
    TokenKind.LEFT_PAREN: "(",
    TokenKind.RIGHT_PAREN: ")",
    TokenKind.LEFT_BRACE: "{",
    TokenKind.RIGHT_BRACE: "}",
    TokenKind.STAR: "*",
    TokenKind.DOT: ".",
    TokenKind.COMMA: ",",
    TokenKind.PLUS: "+",
    TokenKind.MINUS: "-",
    TokenKind.SEMICOLON: ";",
    TokenKind.EQUAL: "=",
    TokenKind.EQUAL_EQUAL: "==",
    TokenKind.BANG: "!",
    TokenKind.BANG_EQUAL: "!=",
    TokenKind.LESS: "<",
    TokenKind.GREATER: ">",
    TokenKind.LESS_EQUAL: "<=",
    TokenKind.GREATER_EQUAL: ">=",
    TokenKind.SLASH: "/",
}

_INVALID_TEXT = "INVALID CHAR"


@dataclass(frozen=True)
class TokenType:
    """A token kind together with its payload, if the kind carries one.

    Strings, numbers and identifiers carry their text; reserved words carry
    a :class:`Keyword`.
    """

    kind: TokenKind
    value: Optional[Union[str, Keyword]] = None

    def parser_text(self) -> str:
        """The token as it appears in a parsed expression."""
        if self.kind in _LEXEMES:
            return _LEXEMES[self.kind]
        if self.kind is TokenKind.RESERVED:
            return self.value.parser_text()
        if self.kind in (TokenKind.STRING, TokenKind.IDENTIFIER):
            return self.value
        if self.kind is TokenKind.NUMBER:
            return format_number(self.value)
        return _INVALID_TEXT

    def lexer_text(self) -> str:
        """The token as printed by the tokenizer."""
        if self.kind in _LEXEMES:
            return f"{self.kind.value} {_LEXEMES[self.kind]} null"
        if self.kind is TokenKind.RESERVED:
            return self.value.lexer_text()
        if self.kind is TokenKind.NUMBER:
            return f"NUMBER {self.value} {format_number(self.value)}"
        if self.kind is TokenKind.STRING:
            return f'STRING "{self.value}" {self.value}'
        if self.kind is TokenKind.IDENTIFIER:
            return f"IDENTIFIER {self.value} null"
        return _INVALID_TEXT


@dataclass(frozen=True)
class LexicalError(ABC):
    """A problem found while scanning, tied to a source line."""

    line: int

    @abstractmethod
    def message(self) -> str:
        """The error as reported to the user."""


@dataclass(frozen=True)
class UnexpectedChar(LexicalError):
    """A character that starts no token."""

    char: str

    def message(self) -> str:
        return f"[line {self.line}] Error: Unexpected character: {self.char}"


@dataclass(frozen=True)
class UnterminatedString(LexicalError):
    """A string literal with no closing quote."""

    def message(self) -> str:
        return f"[line {self.line}] Error: Unterminated string."


@dataclass(frozen=True)
class Token:
    """A scanned token with its position and any error attached to it."""

    token_type: TokenType
    line: int
    column: int
    error: Optional[LexicalError] = None

    def lexer_text(self) -> str:
        """The tokenizer's line for this token, or its error message."""
        if self.error is not None:
            return self.error.message()
        return self.token_type.lexer_text()

    def parser_text(self) -> str:
        """The token as it appears in a parsed expression."""
        return self.token_type.parser_text()