"""Read-lex-print loop."""

from __future__ import annotations

from typing import TextIO

from goterp.lexer import Lexer
from goterp.tokens import Token

PROMPT = ">> "


def format_token(tok: Token) -> str:
    """Render a token with its field names."""
    return (
        f"{{Type:{tok.type.value} Literal:{tok.literal} Filename:{tok.filename} "
        f"Line:{tok.line} Column:{tok.column}}}"
    )


def start(in_stream: TextIO, out_stream: TextIO) -> None:
    """Prompt for lines and print the tokens of each until input ends."""
    while True:
        out_stream.write(PROMPT)
        out_stream.flush()
        line = in_stream.readline()
        if not line:
            return
        line = line.removesuffix("\n").removesuffix("\r")
        for tok in Lexer(line):
            out_stream.write(format_token(tok) + "\n")