"""Token definitions for the lexer.

This module defines the `TokenType` enum for all token kinds recognized by
the lexer, a small `Token` dataclass that holds a token type and an optional
value, and the read-only `RESERVED_KEYWORDS` table. Tokens are the atomic
units produced by the lexer and consumed by the parser.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional


class TokenType(Enum):
    # Literals
    INTEGER = auto()
    ID = auto()

    # Arithmetic operators
    PLUS = auto()
    MINUS = auto()
    MUL = auto()
    DIV = auto()

    # Parentheses
    LPAREN = auto()
    RPAREN = auto()

    # Punctuation
    ASSIGN = auto()
    SEMI = auto()
    DOT = auto()

    # Keywords
    BEGIN = auto()
    END = auto()

    # Special
    EOF = auto()

    def __str__(self) -> str:
        return self.name


@dataclass
class Token:
    type: TokenType
    value: Optional[str | int] = None
    # Source position of the first character; not part of token identity.
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.value)})"

    @property
    def lexeme(self) -> str:
        if self.value is None:
            return str(self.type)
        return str(self.value)


RESERVED_KEYWORDS: Mapping[str, TokenType] = MappingProxyType(
    {
        "BEGIN": TokenType.BEGIN,
        "END": TokenType.END,
    }
)
