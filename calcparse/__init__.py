"""
calcparse

Scanner, two-tier precedence parser and evaluator for small arithmetic
expressions over floating-point numbers.

Architecture:
    calcparse/
    ├── lexer/           # Text -> tokens
    ├── parser/          # Tokens -> AST
    └── evaluator/       # AST -> text / number

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .errors import CalcError, Diagnostic
from .lexer import Lexer, Token, TokenType, LexError, tokenize
from .parser import Parser, BinaryOp, BinaryOperator, NumberLiteral, ParseError, parse, parse_string
from .evaluator import Context, EvalError, evaluate, evaluate_string, to_string

__all__ = [
    # Pipeline
    "tokenize",
    "parse",
    "parse_string",
    "evaluate",
    "evaluate_string",
    "to_string",

    # Core classes
    "Lexer",
    "Parser",
    "Token",
    "TokenType",
    "NumberLiteral",
    "BinaryOp",
    "BinaryOperator",
    "Context",

    # Errors
    "CalcError",
    "Diagnostic",
    "LexError",
    "ParseError",
    "EvalError",

    # Version info
    "__version__",
    "__license__",
]
