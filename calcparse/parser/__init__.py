"""
calcparse Parser Package

Two-tier precedence parser for arithmetic expressions. * and / bind tighter
than + - < >, and every operator is left-associative. Produces a tree of
immutable NumberLiteral / BinaryOp nodes.
"""

from .ast_nodes import BinaryOp, BinaryOperator, Node, NumberLiteral, iter_nodes
from .parser import Parser, ParserState, parse, parse_file, parse_string, simple_parse
from .errors import ParseError

__all__ = [
    # Core parser
    "Parser",
    "ParserState",
    "parse",
    "parse_string",
    "parse_file",
    "simple_parse",

    # AST nodes
    "Node",
    "NumberLiteral",
    "BinaryOp",
    "BinaryOperator",
    "iter_nodes",

    # Error handling
    "ParseError",
]
