"""
Test suite for the calcparse two-tier precedence parser.

Tests cover:
- Tree shape for mixed-precedence expressions
- Chains of * and /
- The plain-fold path and simple_parse spans
- Every structural error the parser reports
"""

import os
import sys
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from calcparse.lexer import Token, TokenType, tokenize
from calcparse.parser import (
    BinaryOp, BinaryOperator, NumberLiteral, ParseError, Parser, ParserState,
    iter_nodes, parse, parse_string, simple_parse
)

ADD, SUB, MUL, DIV = BinaryOperator.ADD, BinaryOperator.SUB, BinaryOperator.MUL, BinaryOperator.DIV


def n(value):
    return NumberLiteral(float(value))


class TestTreeShape(unittest.TestCase):
    """Parsed trees have the expected structure."""

    def test_empty_tokens(self):
        self.assertIsNone(parse([]))

    def test_single_number(self):
        self.assertEqual(parse_string("5"), n(5))

    def test_two_plus_two(self):
        self.assertEqual(parse_string("2+2"), BinaryOp(ADD, n(2), n(2)))

    def test_additive_chain_is_left_leaning(self):
        self.assertEqual(
            parse_string("2+2-2"),
            BinaryOp(SUB, BinaryOp(ADD, n(2), n(2)), n(2))
        )

    def test_multiplication_binds_tighter(self):
        self.assertEqual(
            parse_string("1+2*3"),
            BinaryOp(ADD, n(1), BinaryOp(MUL, n(2), n(3)))
        )

    def test_tier1_operator_at_front(self):
        self.assertEqual(
            parse_string("2*3+4"),
            BinaryOp(ADD, BinaryOp(MUL, n(2), n(3)), n(4))
        )

    def test_tier1_chain_is_left_leaning(self):
        self.assertEqual(
            parse_string("2*3*4"),
            BinaryOp(MUL, BinaryOp(MUL, n(2), n(3)), n(4))
        )
        self.assertEqual(
            parse_string("8/4/2"),
            BinaryOp(DIV, BinaryOp(DIV, n(8), n(4)), n(2))
        )

    def test_mixed_expression(self):
        """1+2*3-4+5*6 folds to ((1+(2*3))-4)+(5*6)."""
        expected = BinaryOp(
            ADD,
            BinaryOp(SUB, BinaryOp(ADD, n(1), BinaryOp(MUL, n(2), n(3))), n(4)),
            BinaryOp(MUL, n(5), n(6)),
        )
        self.assertEqual(parse_string("1+2*3-4+5*6"), expected)

    def test_adjacent_tier1_runs(self):
        expected = BinaryOp(
            ADD,
            BinaryOp(SUB, n(1), BinaryOp(DIV, BinaryOp(MUL, n(2), n(3)), n(4))),
            n(5),
        )
        self.assertEqual(parse_string("1-2*3/4+5"), expected)

    def test_comparisons_share_additive_level(self):
        self.assertEqual(
            parse_string("1<2+3*4"),
            BinaryOp(ADD, BinaryOp(BinaryOperator.LESS, n(1), n(2)), BinaryOp(MUL, n(3), n(4)))
        )

    def test_leaf_and_internal_counts(self):
        tree = parse_string("1+2*3-4/5>6*7*8")
        nodes = list(iter_nodes(tree))
        leaves = [node for node in nodes if isinstance(node, NumberLiteral)]
        internal = [node for node in nodes if isinstance(node, BinaryOp)]
        self.assertEqual(len(leaves), 8)
        self.assertEqual(len(internal), 7)

    def test_iter_nodes_is_preorder(self):
        tree = parse_string("1+2*3")
        kinds = [type(node).__name__ for node in iter_nodes(tree)]
        self.assertEqual(kinds, ["BinaryOp", "NumberLiteral", "BinaryOp", "NumberLiteral", "NumberLiteral"])

    def test_final_state(self):
        parser = Parser(tokenize("2*3+4"))
        parser.parse()
        self.assertEqual(parser.state, ParserState.HAVE_TIER1_NODE)


class TestSimpleParse(unittest.TestCase):
    """Plain left-to-right folding."""

    def test_no_precedence(self):
        self.assertEqual(
            simple_parse(tokenize("1+2*3")),
            BinaryOp(MUL, BinaryOp(ADD, n(1), n(2)), n(3))
        )

    def test_span(self):
        tokens = tokenize("1+2*3")
        self.assertEqual(simple_parse(tokens, 0, 3), BinaryOp(ADD, n(1), n(2)))
        self.assertEqual(simple_parse(tokens, 4), n(3))

    def test_empty_span(self):
        self.assertIsNone(simple_parse(tokenize("1+2"), 1, 1))

    def test_adjacent_numbers(self):
        with self.assertRaises(ParseError) as ctx:
            simple_parse(tokenize("1 2"))
        self.assertEqual(ctx.exception.code, "P003")


class TestParseErrors(unittest.TestCase):
    """Structural violations raise ParseError."""

    def assertParseError(self, source, code):
        with self.assertRaises(ParseError) as ctx:
            parse_string(source)
        self.assertEqual(ctx.exception.code, code, str(ctx.exception))
        return ctx.exception

    def test_unexpected_number(self):
        """2+2 2 built by hand."""
        tokens = [
            Token(TokenType.NUMBER, 2.0),
            Token(TokenType.OPERATOR, '+'),
            Token(TokenType.NUMBER, 2.0),
            Token(TokenType.NUMBER, 2.0),
        ]
        with self.assertRaises(ParseError) as ctx:
            parse(tokens)
        self.assertEqual(ctx.exception.code, "P003")
        self.assertIs(ctx.exception.token, tokens[3])

    def test_adjacent_numbers_with_tier1(self):
        self.assertParseError("2*3 4", "P003")

    def test_leading_tier1_operator(self):
        error = self.assertParseError("*2", "P002")
        self.assertIn("left", error.reason)

    def test_trailing_tier1_operator(self):
        error = self.assertParseError("2*", "P002")
        self.assertIn("right", error.reason)

    def test_leading_tier2_operator(self):
        self.assertParseError("+2", "P002")

    def test_trailing_tier2_operator(self):
        self.assertParseError("2+", "P002")

    def test_trailing_tier2_after_term(self):
        parser = Parser(tokenize("2*3+"))
        with self.assertRaises(ParseError):
            parser.parse()
        self.assertEqual(parser.state, ParserState.HAVE_TIER2_PENDING)

    def test_doubled_operator(self):
        self.assertParseError("2+*3", "P002")
        self.assertParseError("2++3", "P002")

    def test_non_number_after_tier1(self):
        self.assertParseError("2**3", "P002")
        error = self.assertParseError("2*(3)", "P002")
        self.assertEqual(error.token, Token(TokenType.LEFT_BRACKET, '('))

    def test_non_number_before_tier1(self):
        self.assertParseError("(2)*3", "P001")

    def test_brackets_are_not_supported(self):
        self.assertParseError("2+(3)", "P001")

    def test_words_are_not_supported(self):
        self.assertParseError("1+x", "P001")
        self.assertParseError("x*2", "P001")

    def test_unknown_operator_symbol(self):
        tokens = [
            Token(TokenType.NUMBER, 2.0),
            Token(TokenType.OPERATOR, '*'),
            Token(TokenType.NUMBER, 3.0),
            Token(TokenType.OPERATOR, '%'),
            Token(TokenType.NUMBER, 4.0),
            Token(TokenType.OPERATOR, '+'),
            Token(TokenType.NUMBER, 1.0),
        ]
        with self.assertRaises(ParseError) as ctx:
            parse(tokens)
        self.assertEqual(ctx.exception.code, "P004")

    def test_error_carries_location(self):
        error = self.assertParseError("1+2 3", "P003")
        self.assertEqual(error.location.offset, 4)
        self.assertIn("P003", str(error))


class TestBinaryOperator(unittest.TestCase):

    def test_from_symbol(self):
        self.assertIs(BinaryOperator.from_symbol('>'), BinaryOperator.GREATER)
        self.assertEqual(BinaryOperator.LESS.symbol, '<')

    def test_unknown_symbol(self):
        with self.assertRaises(ParseError):
            BinaryOperator.from_symbol('^')

    def test_tiers(self):
        self.assertTrue(BinaryOperator.MUL.is_tier1)
        self.assertTrue(BinaryOperator.DIV.is_tier1)
        self.assertFalse(BinaryOperator.ADD.is_tier1)
        self.assertFalse(BinaryOperator.GREATER.is_tier1)


if __name__ == '__main__':
    unittest.main()
