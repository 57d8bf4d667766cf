"""A toy interpreter front end: tokens, syntax tree, lexer, let-statement parser and a token-printing prompt."""

__version__ = "0.1.0"
__all__ = ["tokens", "syntax", "lexer", "parser", "repl", "cli"]