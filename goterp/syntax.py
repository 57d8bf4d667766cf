"""Syntax tree nodes produced by the parser."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from goterp.tokens import Token


class Node(ABC):
    """Any node of the syntax tree."""

    @abstractmethod
    def token_literal(self) -> str:
        """Return the literal of the token the node is built around."""


class Statement(Node):
    """A node that stands as a statement."""


class Expression(Node):
    """A node that yields a value."""


@dataclass
class Identifier(Expression):
    """A name."""

    token: Token
    value: str

    def token_literal(self) -> str:
        return self.token.literal


@dataclass
class LetStatement(Statement):
    """A ``let <name> = <value>;`` binding."""

    token: Token
    name: Identifier | None = None
    value: Expression | None = None

    def token_literal(self) -> str:
        return self.token.literal


@dataclass
class Program(Node):
    """The root of a parsed program: a list of statements."""

    statements: list[Statement] = field(default_factory=list)

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""