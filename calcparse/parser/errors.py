"""
Error handling for the calcparse parser.

Every structural problem in a token sequence is reported as a ParseError
at the first point it is detected. There is no recovery: the caller gets
the error and decides what to do with the expression.
"""

from typing import Optional, List

from ..errors import CalcError
from ..lexer.tokens import Token


class ParseError(CalcError):
    """
    Exception raised when a token sequence is not a valid expression.

    Carries the human-readable reason and the offending token, when
    there is one.
    """

    def __init__(
        self,
        reason: str,
        token: Optional[Token] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        location = token.location if token is not None else None
        super().__init__(reason, location, code=code, help_text=help_text, suggestions=suggestions)
        self.reason = reason
        self.token = token


PARSER_ERROR_CODES = {
    "P001": "Unexpected token",
    "P002": "Missing operand",
    "P003": "Missing operator",
    "P004": "Unknown operator",
}


def _describe(token: Token) -> str:
    return f"{token.type.name} {token.value!r}"


def create_unexpected_token_error(token: Token) -> ParseError:
    """Create an error for a token that cannot appear in an expression."""
    return ParseError(
        reason=f"Unexpected token {_describe(token)}",
        token=token,
        code="P001",
        help_text="Only numbers and the operators + - * / < > are allowed.",
    )


def create_missing_operand_error(operator: Token, position: str) -> ParseError:
    """Create an error for an operator with no operand on one side."""
    return ParseError(
        reason=f"Operator '{operator.value}' has no {position} operand",
        token=operator,
        code="P002",
        suggestions=["Ensure all operators have operands"]
    )


def create_expected_number_error(found: Token, operator: Optional[Token] = None) -> ParseError:
    """Create an error for a non-number where a number is required."""
    after = f" after '{operator.value}'" if operator is not None else ""
    return ParseError(
        reason=f"Expected a number{after}, found {_describe(found)}",
        token=found,
        code="P002",
    )


def create_missing_operator_error(found: Token) -> ParseError:
    """Create an error for two operands with nothing between them."""
    return ParseError(
        reason=f"Expected an operator, found {_describe(found)}",
        token=found,
        code="P003",
        suggestions=["Insert an operator between the two numbers"]
    )


def create_unknown_operator_error(symbol: str, token: Optional[Token] = None) -> ParseError:
    """Create an error for an operator symbol with no binary operation."""
    return ParseError(
        reason=f"Unknown operator '{symbol}'",
        token=token,
        code="P004",
    )
