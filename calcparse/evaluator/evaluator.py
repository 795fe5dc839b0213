"""
Rendering and evaluation of calcparse trees.

Both walks dispatch on the two node kinds directly; there is no visitor
hierarchy since the node set is closed.
"""

import logging
import math
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np

from ..parser.ast_nodes import BinaryOp, BinaryOperator, Node, NumberLiteral
from .context import Context
from .errors import create_missing_value_error, create_unknown_node_error

logger = logging.getLogger(__name__)

# A number this close to its truncated integer renders without a fraction
INTEGER_TOLERANCE = 1e-7


def _divide(a: float, b: float) -> float:
    # IEEE-754: x/0 -> +-inf, 0/0 -> nan, no exception
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(a) / np.float64(b))


OPERATIONS: Dict[BinaryOperator, Callable[[float, float], float]] = {
    BinaryOperator.ADD: lambda a, b: a + b,
    BinaryOperator.SUB: lambda a, b: a - b,
    BinaryOperator.MUL: lambda a, b: a * b,
    BinaryOperator.DIV: _divide,
    BinaryOperator.GREATER: lambda a, b: float(a > b),
    BinaryOperator.LESS: lambda a, b: float(a < b),
}


def format_number(value: float) -> str:
    """Shortest decimal form; integral values drop the fraction."""
    if not math.isfinite(value):
        return repr(value)
    if abs(value - int(value)) < INTEGER_TOLERANCE:
        return str(int(value))
    return repr(value)


def to_string(node: Node) -> str:
    """
    Render a tree back to compact expression text.

    No brackets and no spaces, so an unbracketed input renders back to
    itself. Walks an explicit stack, so tree depth is not limited by the
    interpreter's recursion limit.
    """
    parts: List[str] = []
    stack: list = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, BinaryOperator):
            parts.append(current.symbol)
        elif isinstance(current, NumberLiteral):
            parts.append(format_number(current.value))
        elif isinstance(current, BinaryOp):
            stack.extend((current.right, current.operator, current.left))
        else:
            raise create_unknown_node_error(current)
    return "".join(parts)


def _leaf_value(node: NumberLiteral, context: Context) -> Optional[float]:
    return node.value


def evaluate(node: Node, context: Optional[Context] = None) -> Optional[float]:
    """
    Evaluate a tree post-order.

    Comparisons yield 1.0 or 0.0. The context is accepted for variable and
    function lookup but is not consulted yet.

    Raises:
        EvalError: If an operand yields no value or the node is unknown
    """
    if context is None:
        context = Context()

    values: List[Optional[float]] = []
    # (node, children already evaluated)
    stack: List[Tuple[Node, bool]] = [(node, False)]
    while stack:
        current, expanded = stack.pop()
        if isinstance(current, NumberLiteral):
            values.append(_leaf_value(current, context))
        elif isinstance(current, BinaryOp):
            if not expanded:
                stack.append((current, True))
                stack.append((current.right, False))
                stack.append((current.left, False))
                continue
            right = values.pop()
            left = values.pop()
            if left is None or right is None:
                raise create_missing_value_error(current)
            values.append(OPERATIONS[current.operator](left, right))
        else:
            raise create_unknown_node_error(current)

    return values.pop()


def evaluate_string(source: str, context: Optional[Context] = None) -> Optional[float]:
    """
    Tokenize, parse and evaluate an expression.

    Returns None for empty input.
    """
    from ..parser import parse_string

    tree = parse_string(source)
    if tree is None:
        return None

    result = evaluate(tree, context)
    logger.debug("%s = %r", source, result)
    return result
