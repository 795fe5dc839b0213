"""
Error handling for calcparse evaluation.

A tree that came out of the parser always evaluates; these errors cover
hand-built trees and subtrees that produce no value.
"""

from typing import Any

from ..errors import CalcError


class EvalError(CalcError):
    """Exception raised when a tree cannot be evaluated."""
    pass


EVAL_ERROR_CODES = {
    "E001": "Operand produced no value",
    "E002": "Unknown node kind",
}


def create_missing_value_error(node: Any) -> EvalError:
    """Create an error for a binary operation whose operand has no value."""
    return EvalError(
        message=f"Invalid binary operation '{node.operator.symbol}': operand produced no value",
        code="E001",
    )


def create_unknown_node_error(node: Any) -> EvalError:
    """Create an error for an object that is not an AST node."""
    return EvalError(
        message=f"Cannot evaluate {type(node).__name__}",
        code="E002",
        help_text="Only NumberLiteral and BinaryOp nodes can be evaluated.",
    )
