"""Token definitions for the lexer.

This module defines the `TokenType` enum for all token kinds recognized by
the lexer and a small `Token` dataclass that holds a token type, an optional
lexeme and the offset in the source where the token started. Tokens are the
atomic units produced by the lexer and consumed by the parser.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


class TokenType(Enum):
    # Literals
    NUMBER = auto()
    IDENTIFIER = auto()

    # Operators and punctuation
    PLUS = auto()
    ASSIGN = auto()
    SEMICOLON = auto()
    LPAREN = auto()
    RPAREN = auto()

    # Keywords
    VARIABLE = auto()
    PRINT = auto()

    # Special
    EOF = auto()

    def __str__(self) -> str:
        return self.name


@dataclass
class Token:
    type: TokenType
    value: Optional[str] = None
    pos: int = 0

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.value)})"

    @property
    def lexeme(self) -> str:
        if self.value is None:
            return str(self.type)
        return str(self.value)
