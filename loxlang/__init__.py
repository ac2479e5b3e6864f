"""Tokenizer and expression parser for the Lox language, with a command line."""

__version__ = "0.1.0"
__all__ = ["tokens", "lexer", "expressions", "parser", "cli"]