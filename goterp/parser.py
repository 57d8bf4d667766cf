"""Builds a syntax tree from the lexer's tokens."""

from __future__ import annotations

from goterp.lexer import Lexer
from goterp.syntax import Identifier, LetStatement, Program, Statement
from goterp.tokens import Token, TokenType


class Parser:
    """Parses the tokens of one lexer into a program."""

    def __init__(self, lexer: Lexer) -> None:
        self._lexer = lexer
        self._cur = Token()
        self._peek = Token()
        self._next_token()
        self._next_token()

    def _next_token(self) -> None:
        self._cur = self._peek
        self._peek = self._lexer.next_token()

    def _expect_peek(self, kind: TokenType) -> bool:
        if self._peek.type is kind:
            self._next_token()
            return True
        return False

    def parse_program(self) -> Program:
        """Parse every statement up to the end of the input."""
        program = Program()
        while self._cur.type is not TokenType.EOF:
            stmt = self._parse_statement()
            if stmt is not None:
                program.statements.append(stmt)
            self._next_token()
        return program

    def _parse_statement(self) -> Statement | None:
        if self._cur.type is TokenType.LET:
            return self._parse_let_statement()
        return None

    def _parse_let_statement(self) -> LetStatement | None:
        stmt = LetStatement(self._cur)
        if not self._expect_peek(TokenType.IDENT):
            return None
        stmt.name = Identifier(self._cur, self._cur.literal)
        if not self._expect_peek(TokenType.ASSIGN):
            return None
        # The value expression is skipped up to the closing semicolon.
        while self._cur.type not in (TokenType.SEMICOLON, TokenType.EOF):
            self._next_token()
        return stmt