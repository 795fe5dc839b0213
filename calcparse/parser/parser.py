"""
calcparse two-tier precedence parser

Not recursive descent. Expressions only have two precedence levels, so the
parser is a small state machine over the token list:

    * and /        fold left-to-right into a "term"
    + - < >        fold finished terms left-to-right into the chain

Token lists without any * or / skip the state machine and go through
simple_parse(), the plain left-to-right fold.

    1+2*3-4+5*6

              +
            /   \\
           -     *
          / \\   / \\
         +   4 5   6
        / \\
       1   *
          / \\
         2   3
"""

import logging
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence

from ..lexer.tokens import Token
from .ast_nodes import BinaryOp, BinaryOperator, Node, NumberLiteral
from .errors import (
    create_expected_number_error, create_missing_operand_error,
    create_missing_operator_error, create_unexpected_token_error
)

logger = logging.getLogger(__name__)


class ParserState(Enum):
    """Where the parser is between two tokens."""
    EXPECT_OPERAND = "expect-operand"          # start of input
    HAVE_TIER1_NODE = "have-tier1-node"        # a term is complete; operator or end next
    HAVE_TIER1_PENDING = "have-tier1-pending"  # read * or /; its right operand is next
    HAVE_TIER2_PENDING = "have-tier2-pending"  # read + - < or >; a new term is next


class Parser:
    """
    Two-tier precedence parser.

    Takes the token list from the lexer and produces a single AST root,
    or None for an empty token list.
    """

    def __init__(self, tokens: Sequence[Token]):
        """
        Initialize parser with a list of tokens.

        Args:
            tokens: List of tokens from the lexer
        """
        self.tokens: List[Token] = list(tokens)
        self._transitions: Dict[ParserState, Callable[[Token], None]] = {
            ParserState.EXPECT_OPERAND: self._on_expect_operand,
            ParserState.HAVE_TIER1_NODE: self._on_tier1_node,
            ParserState.HAVE_TIER1_PENDING: self._on_tier1_pending,
            ParserState.HAVE_TIER2_PENDING: self._on_expect_operand,
        }
        self._reset()

    def _reset(self):
        self.state = ParserState.EXPECT_OPERAND
        self.chain: Optional[Node] = None       # folded tier-2 chain so far
        self.pending_op: Optional[Token] = None  # tier-2 operator joining chain and term
        self.term: Optional[Node] = None         # tier-1 term under construction
        self.tier1_op: Optional[Token] = None

    def parse(self) -> Optional[Node]:
        """
        Parse the token list.

        Returns:
            AST root, or None when there are no tokens

        Raises:
            ParseError: On any structural violation
        """
        if not any(token.is_tier1_operator for token in self.tokens):
            logger.debug("no * or / in %d tokens, using plain fold", len(self.tokens))
            return simple_parse(self.tokens)

        self._reset()
        for token in self.tokens:
            previous = self.state
            self._transitions[self.state](token)
            logger.debug("%s --%s--> %s", previous.value, token, self.state.value)

        return self._finish()

    # State handlers

    def _on_expect_operand(self, token: Token):
        if token.is_number:
            self.term = NumberLiteral(token.value)
            self.state = ParserState.HAVE_TIER1_NODE
        elif token.is_operator:
            raise create_missing_operand_error(token, "left")
        else:
            raise create_unexpected_token_error(token)

    def _on_tier1_node(self, token: Token):
        if token.is_tier1_operator:
            self.tier1_op = token
            self.state = ParserState.HAVE_TIER1_PENDING
        elif token.is_operator:
            self._flush_term()
            self.pending_op = token
            self.state = ParserState.HAVE_TIER2_PENDING
        elif token.is_number:
            raise create_missing_operator_error(token)
        else:
            raise create_unexpected_token_error(token)

    def _on_tier1_pending(self, token: Token):
        if not token.is_number:
            raise create_expected_number_error(token, self.tier1_op)

        self.term = BinaryOp(
            _operator_of(self.tier1_op), self.term, NumberLiteral(token.value)
        )
        self.tier1_op = None
        self.state = ParserState.HAVE_TIER1_NODE

    def _flush_term(self):
        """Fold the finished term into the tier-2 chain."""
        if self.chain is None:
            self.chain = self.term
        else:
            self.chain = BinaryOp(_operator_of(self.pending_op), self.chain, self.term)
        self.term = None
        self.pending_op = None

    def _finish(self) -> Optional[Node]:
        if self.state == ParserState.HAVE_TIER1_PENDING:
            raise create_missing_operand_error(self.tier1_op, "right")
        if self.state == ParserState.HAVE_TIER2_PENDING:
            raise create_missing_operand_error(self.pending_op, "right")
        if self.state == ParserState.HAVE_TIER1_NODE:
            self._flush_term()
        return self.chain


def _operator_of(token: Token) -> BinaryOperator:
    return BinaryOperator.from_symbol(token.value, token)


def simple_parse(tokens: Sequence[Token], start: int = 0, end: Optional[int] = None) -> Optional[Node]:
    """
    Plain-fold a span of tokens strictly left to right, no precedence.

    Args:
        tokens: Token list
        start: First index of the span
        end: One past the last index (defaults to the end of the list)

    Returns:
        Left-leaning chain of BinaryOp nodes, or None for an empty span

    Raises:
        ParseError: On an operator without operands, two adjacent numbers,
            or any token that is neither a number nor an operator
    """
    left: Optional[Node] = None
    operator: Optional[Token] = None

    for token in tokens[start:end]:
        if token.is_operator:
            if left is None or operator is not None:
                raise create_missing_operand_error(token, "left")
            operator = token
        elif token.is_number:
            number = NumberLiteral(token.value)
            if operator is None:
                if left is not None:
                    raise create_missing_operator_error(token)
                left = number
            else:
                left = BinaryOp(_operator_of(operator), left, number)
                operator = None
        else:
            raise create_unexpected_token_error(token)

    if operator is not None:
        raise create_missing_operand_error(operator, "right")

    return left


def parse(tokens: Sequence[Token]) -> Optional[Node]:
    """
    Convenience function to parse a token list.

    Raises:
        ParseError: If the tokens do not form a valid expression
    """
    return Parser(tokens).parse()


def parse_string(source: str, filename: str = "<string>") -> Optional[Node]:
    """
    Convenience function to tokenize and parse a source string.

    Raises:
        LexError: If a numeric literal is malformed
        ParseError: If parsing fails
    """
    from ..lexer import tokenize

    return parse(tokenize(source, filename))


def parse_file(filepath: str) -> Optional[Node]:
    """
    Convenience function to parse a file holding one expression.

    Raises:
        LexError: If a numeric literal is malformed
        ParseError: If parsing fails
        IOError: If the file cannot be read
    """
    from ..lexer import tokenize_file

    return parse(tokenize_file(filepath))
