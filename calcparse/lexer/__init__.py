"""
calcparse Lexer Package

Scans expression text into a flat list of tokens: numbers, single-character
operators, brackets, commas, keywords and identifiers. Unrecognized
characters come through as UNKNOWN tokens; only numeric literals can fail.
"""

from .tokens import Token, TokenType, SourceLocation, KEYWORDS, OPERATORS
from .lexer import Lexer, tokenize, tokenize_file
from .errors import LexError

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "SourceLocation",
    "KEYWORDS",
    "OPERATORS",
    "tokenize",
    "tokenize_file",
    "LexError",
]
