"""Scanner that turns source text into tokens."""

from __future__ import annotations

from typing import Callable, Iterator, List, Optional, TextIO

from .tokens import (
    Keyword,
    LexicalError,
    Token,
    TokenKind,
    TokenType,
    UnexpectedChar,
    UnterminatedString,
    is_reserved_keyword,
)

_SINGLE = {
    "(": TokenKind.LEFT_PAREN,
    ")": TokenKind.RIGHT_PAREN,
    "{": TokenKind.LEFT_BRACE,
    "}": TokenKind.RIGHT_BRACE,
    "*": TokenKind.STAR,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    ",": TokenKind.COMMA,
    ".": TokenKind.DOT,
    ";": TokenKind.SEMICOLON,
}

# Operators that become a two-character token when followed by '='.
_WITH_EQUAL = {
    "!": (TokenKind.BANG, TokenKind.BANG_EQUAL),
    "=": (TokenKind.EQUAL, TokenKind.EQUAL_EQUAL),
    "<": (TokenKind.LESS, TokenKind.LESS_EQUAL),
    ">": (TokenKind.GREATER, TokenKind.GREATER_EQUAL),
}

_EOF_LINE = "EOF  null"


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_letter_or_underscore(char: str) -> bool:
    return "a" <= char <= "z" or "A" <= char <= "Z" or char == "_"


def _is_alphanumeric(char: str) -> bool:
    return _is_digit(char) or _is_letter_or_underscore(char)


class _Cursor:
    """Character stream over a string with one character of lookahead."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        if self._pos >= len(self._text):
            raise StopIteration
        char = self._text[self._pos]
        self._pos += 1
        return char

    def peek(self) -> Optional[str]:
        if self._pos < len(self._text):
            return self._text[self._pos]
        return None

    def skip_if(self, char: str) -> bool:
        if self.peek() == char:
            self._pos += 1
            return True
        return False

    def take_while(self, predicate: Callable[[str], bool]) -> str:
        start = self._pos
        while self._pos < len(self._text) and predicate(self._text[self._pos]):
            self._pos += 1
        return self._text[start:self._pos]

    def take_until(self, char: str) -> tuple[str, bool]:
        """Consume up to and including ``char``; report whether it was found."""
        end = self._text.find(char, self._pos)
        if end < 0:
            taken = self._text[self._pos:]
            self._pos = len(self._text)
            return taken, False
        taken = self._text[self._pos:end]
        self._pos = end + 1
        return taken, True


class Lexer:
    """Collects tokens from scanned source and records whether any failed."""

    def __init__(self) -> None:
        self.tokens: List[Token] = []
        self.has_errors = False

    def scan(self, source: str) -> None:
        """Scan ``source`` and append its tokens."""
        line = 1
        cursor = _Cursor(source)
        for column, char in enumerate(cursor):
            token_type: Optional[TokenType] = None
            error: Optional[LexicalError] = None

            if char in _SINGLE:
                token_type = TokenType(_SINGLE[char])
            elif char == "\n":
                line += 1
            elif char in ("\t", " "):
                pass
            elif char in _WITH_EQUAL:
                plain, with_equal = _WITH_EQUAL[char]
                token_type = TokenType(with_equal if cursor.skip_if("=") else plain)
            elif char == "/":
                if cursor.skip_if("/"):
                    cursor.take_while(lambda c: c != "\n")
                else:
                    token_type = TokenType(TokenKind.SLASH)
            elif char == '"':
                value, terminated = cursor.take_until('"')
                token_type = TokenType(TokenKind.STRING, value)
                if not terminated:
                    error = UnterminatedString(line)
            elif _is_digit(char):
                rest = cursor.take_while(lambda c: _is_digit(c) or c == ".")
                token_type = TokenType(TokenKind.NUMBER, char + rest)
            elif _is_letter_or_underscore(char):
                word = char + cursor.take_while(_is_alphanumeric)
                if is_reserved_keyword(word):
                    token_type = TokenType(TokenKind.RESERVED, Keyword(word))
                else:
                    token_type = TokenType(TokenKind.IDENTIFIER, word)
            else:
                token_type = TokenType(TokenKind.INVALID_CHAR)
                error = UnexpectedChar(line, char)

            if error is not None:
                self.has_errors = True
            if token_type is not None:
                self.tokens.append(Token(token_type, line, column, error))

    def write_tokens(self, out: TextIO, err: TextIO) -> None:
        """Print each token to ``out``, or its error to ``err``, then the EOF line."""
        for token in self.tokens:
            stream = err if token.error is not None else out
            print(token.lexer_text(), file=stream)
        print(_EOF_LINE, file=out)


def tokenize(source: str) -> List[Token]:
    """Scan ``source`` with a fresh lexer and return its tokens."""
    lexer = Lexer()
    lexer.scan(source)
    return lexer.tokens