# loxlang

A small front end for the Lox language. It turns Lox source into tokens,
parses a single expression into a syntax tree and prints that tree in a
parenthesised prefix form.

## Installation

```
pip install .
```

## Command line

```
loxlang tokenize program.lox
loxlang parse program.lox
loxlang evaluate program.lox
```

The same commands can be run as `python -m loxlang.cli <command> <file>`.

- `tokenize` prints one line per token, such as `NUMBER 42 42.0`,
  `STRING "hi" hi` or `IDENTIFIER foo null`, followed by `EOF  null`.
  Lexical errors, `[line 1] Error: Unexpected character: @` or
  `[line 1] Error: Unterminated string.`, are written to standard error in
  their place. If there were any, the command exits with status 65.
- `parse` prints the expression tree, for example `(* (group (+ 1.0 2.0)) 3.0)`
  for `(1 + 2) * 3`. If the source has lexical errors it prints nothing and
  exits with status 65. A syntax error, such as
  `Expected ')' after expression.`, is written to standard error and the
  command exits with status 65. Tokens after the first complete expression
  are ignored.
- `evaluate` prints the value of a literal: a number (`3.0`), a string
  (without quotes), `true`, `false` or `nil`. Any other expression prints
  `Other`. Errors are handled as for `parse`.

An empty or unreadable file prints only `EOF  null` (an unreadable file also
reports `Failed to read file <name>` on standard error). Too few arguments
print a usage line and an unknown command prints `Unknown command: <name>`,
both on standard error.

## Library use

```python
from loxlang.lexer import Lexer, tokenize
from loxlang.parser import Parser

lexer = Lexer()
lexer.scan("-(1 + 2) >= 3")
expression = Parser(lexer.tokens).parse()
print(expression.render())  # (>= (- (group (+ 1.0 2.0))) 3.0)
```

- `loxlang.lexer.tokenize(source)` returns the list of `Token` objects for a
  string. `Lexer.has_errors` reports whether scanning found lexical errors,
  and `Lexer.write_tokens(out, err)` writes the token listing to two text
  streams.
- `loxlang.tokens` holds `Token`, `TokenType`, `TokenKind`, `Keyword` and the
  error types `UnexpectedChar` and `UnterminatedString`.
- `loxlang.expressions` holds the tree nodes `Literal`, `Unary`, `Binary` and
  `Grouping`; each has `render()` and `evaluate()`.
- `Parser.parse()` raises `loxlang.parser.ParseError` for a malformed
  expression; `Parser.print_result(expression, out)` writes the rendered tree.

## What it does not do

Only single expressions are parsed: statements, variables, functions and
classes are tokenized but not parsed or run. Evaluation does not compute
arithmetic, comparisons or logic; it only reports the value of a lone literal.

## Running the tests

```
pip install ".[test]"
pytest
```