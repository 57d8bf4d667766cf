"""Turns source text into tokens."""

from __future__ import annotations

from collections.abc import Iterator

from goterp.tokens import Token, TokenType, lookup_ident

_END = "\0"
_WHITESPACE = frozenset(" \t\n\r")

_SINGLE = {
    "=": TokenType.ASSIGN,
    "!": TokenType.NOT,
    ">": TokenType.GREATER_THAN,
    "<": TokenType.LESS_THAN,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
}

_WITH_EQUALS = {
    "=": TokenType.EQUALS,
    "!": TokenType.NOT_EQUALS,
    ">": TokenType.GREATER_THAN_EQUALS,
    "<": TokenType.LESS_THAN_EQUALS,
}


def _is_letter(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z" or ch == "_"


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


class Lexer:
    """Reads tokens one at a time from a string."""

    def __init__(self, source: str) -> None:
        self._input = source
        self._position = 0
        self._read_position = 0
        self._ch = _END
        self.line = 0
        self.column = 0
        self._read_char()

    def _read_char(self) -> None:
        if self._read_position >= len(self._input):
            self._ch = _END
        else:
            self._ch = self._input[self._read_position]
        self._position = self._read_position
        self._read_position += 1

    def _peek_char(self) -> str:
        if self._read_position < len(self._input):
            return self._input[self._read_position]
        return _END

    def _skip_whitespace(self) -> None:
        while self._ch in _WHITESPACE:
            self._read_char()

    def _read_while(self, predicate) -> str:
        start = self._position
        while predicate(self._ch):
            self._read_char()
        return self._input[start:self._position]

    def next_token(self) -> Token:
        """Return the next token; EOF is returned once the input is used up."""
        self._skip_whitespace()
        ch = self._ch

        if ch in _WITH_EQUALS and self._peek_char() == "=":
            tok = Token(_WITH_EQUALS[ch], ch + "=", line=self.line, column=self.column)
            self._read_char()
            self.column += 1
        elif ch in _SINGLE:
            tok = Token(_SINGLE[ch], ch, line=self.line, column=self.column)
        elif ch == _END:
            tok = Token(TokenType.EOF, "", line=-1, column=-1)
        elif _is_letter(ch):
            literal = self._read_while(_is_letter)
            return Token(lookup_ident(literal), literal, line=self.line)
        elif _is_digit(ch):
            literal = self._read_while(_is_digit)
            return Token(TokenType.INT, literal, line=self.line)
        else:
            tok = Token(TokenType.ILLEGAL, ch, line=self.line, column=self.column)

        self._read_char()
        self.column += 1
        return tok

    def __iter__(self) -> Iterator[Token]:
        """Yield the remaining tokens, stopping before EOF."""
        while (tok := self.next_token()).type is not TokenType.EOF:
            yield tok