"""Command-line entry point: tokenize, parse or evaluate a source file."""

from __future__ import annotations

import sys
from typing import List, Optional

from .lexer import Lexer
from .parser import ParseError, Parser

_PROG = "loxlang"
_LEXICAL_ERROR_STATUS = 65


def _read_source(filename: str) -> str:
    try:
        with open(filename, encoding="utf-8") as handle:
            return handle.read()
    except (OSError, UnicodeDecodeError):
        print(f"Failed to read file {filename}", file=sys.stderr)
        return ""


def main(argv: Optional[List[str]] = None) -> int:
    """Run a command on a file and return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        print(f"Usage: {_PROG} tokenize <filename>", file=sys.stderr)
        return 0

    command, filename = args[0], args[1]
    source = _read_source(filename)
    if not source:
        print("EOF  null")
        return 0

    lexer = Lexer()
    lexer.scan(source)

    if command == "tokenize":
        lexer.write_tokens(sys.stdout, sys.stderr)
        return _LEXICAL_ERROR_STATUS if lexer.has_errors else 0

    if command in ("parse", "evaluate"):
        if lexer.has_errors:
            return _LEXICAL_ERROR_STATUS
        parser = Parser(lexer.tokens)
        try:
            expression = parser.parse()
        except ParseError as error:
            print(error, file=sys.stderr)
            return _LEXICAL_ERROR_STATUS
        if command == "parse":
            parser.print_result(expression, sys.stdout)
        else:
            print(expression.evaluate())
        return 0

    print(f"Unknown command: {command}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())