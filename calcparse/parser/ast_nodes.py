"""
Abstract Syntax Tree node definitions for calcparse.

The node set is closed: a tree is made of NumberLiteral leaves and
BinaryOp internal nodes, nothing else. Nodes are immutable and each one
owns its children outright, so subtrees are never shared.

Rendering and evaluation live in calcparse.evaluator as plain dispatch
functions; the methods here are thin conveniences over them.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Optional, Union, TYPE_CHECKING

from .errors import create_unknown_operator_error

if TYPE_CHECKING:
    from ..evaluator.context import Context


class BinaryOperator(Enum):
    """Binary operators, valued by their source symbol."""

    ADD = "+"
    SUB = "-"
    DIV = "/"
    MUL = "*"
    GREATER = ">"
    LESS = "<"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def is_tier1(self) -> bool:
        """True for the operators that bind tighter (* and /)."""
        return self in (BinaryOperator.MUL, BinaryOperator.DIV)

    @classmethod
    def from_symbol(cls, symbol: str, token=None) -> "BinaryOperator":
        try:
            return cls(symbol)
        except ValueError:
            raise create_unknown_operator_error(symbol, token)


@dataclass(frozen=True)
class NumberLiteral:
    """Numeric leaf."""
    value: float

    def children(self) -> List["Node"]:
        return []

    def to_string(self) -> str:
        from ..evaluator import to_string
        return to_string(self)

    def evaluate(self, context: Optional["Context"] = None) -> Optional[float]:
        from ..evaluator import evaluate
        return evaluate(self, context)

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True)
class BinaryOp:
    """Binary operation; owns both operands."""
    operator: BinaryOperator
    left: "Node"
    right: "Node"

    def children(self) -> List["Node"]:
        return [self.left, self.right]

    def to_string(self) -> str:
        from ..evaluator import to_string
        return to_string(self)

    def evaluate(self, context: Optional["Context"] = None) -> Optional[float]:
        from ..evaluator import evaluate
        return evaluate(self, context)

    def __str__(self) -> str:
        return self.to_string()


Node = Union[NumberLiteral, BinaryOp]


def iter_nodes(node: Node) -> Iterator[Node]:
    """Walk a tree pre-order."""
    stack = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(current.children()))
