"""
Token definitions for the calcparse scanner.

This module defines the token types produced by the scanner:
- Numbers (floating-point literals)
- Single-character operators (+ - * / < >)
- Brackets and commas
- Keywords and identifiers
- Unknown characters, which are passed through instead of rejected
"""

from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Any, Optional


class TokenType(Enum):
    """Enumeration of all token types."""

    NUMBER = auto()                 # 42, 3.14, 1e5
    OPERATOR = auto()               # + - * / < >
    LEFT_BRACKET = auto()           # (
    RIGHT_BRACKET = auto()          # )
    COMMA = auto()                  # ,
    KEYWORD = auto()                # see KEYWORDS note below
    IDENTIFIER = auto()
    UNKNOWN = auto()                # anything else, one character at a time


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the source text.

    Used for error reporting.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character offset from start of input

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token.

    Two tokens are equal when their type and payload are equal; the raw
    lexeme and the source location are carried for diagnostics only.
    """
    type: TokenType
    value: Any                      # float for NUMBER, str otherwise
    lexeme: str = field(default="", compare=False)
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __str__(self) -> str:
        if self.lexeme and self.lexeme != self.value:
            return f"{self.type.name}({self.lexeme!r} -> {self.value!r})"
        return f"{self.type.name}({self.value!r})"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r})"

    @property
    def is_number(self) -> bool:
        return self.type == TokenType.NUMBER

    @property
    def is_operator(self) -> bool:
        return self.type == TokenType.OPERATOR

    @property
    def is_tier1_operator(self) -> bool:
        """Check if this token is a multiplicative operator (* or /)."""
        return self.type == TokenType.OPERATOR and self.value in TIER1_OPERATORS

    @property
    def is_tier2_operator(self) -> bool:
        """Check if this token is an additive or comparison operator."""
        return self.type == TokenType.OPERATOR and self.value in TIER2_OPERATORS


# Lookup tables used by the lexer and parser

# Reserved words. No grammar rule consumes them yet.
KEYWORDS = ("func", "if", "else")

OPERATORS = "+-/*<>"

# Bind tighter than everything else
TIER1_OPERATORS = frozenset("*/")

# Share one precedence level, left-associative
TIER2_OPERATORS = frozenset("+-<>")

PUNCTUATION = {
    "(": TokenType.LEFT_BRACKET,
    ")": TokenType.RIGHT_BRACKET,
    ",": TokenType.COMMA,
}
