"""Named variables and functions visible to evaluation."""

from dataclasses import dataclass, field
from typing import Dict, TYPE_CHECKING

if TYPE_CHECKING:
    from ..parser.ast_nodes import Node


@dataclass
class Context:
    """
    Name -> node bindings for variables and functions.

    Nothing in the parser or evaluator reads these yet; callers may fill
    them in ahead of variable and function support.
    """
    variables: Dict[str, "Node"] = field(default_factory=dict)
    functions: Dict[str, "Node"] = field(default_factory=dict)
