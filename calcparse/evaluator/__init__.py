"""
calcparse Evaluator Package

Turns parsed trees back into text and into numbers.
"""

from .context import Context
from .evaluator import (
    INTEGER_TOLERANCE, OPERATIONS, evaluate, evaluate_string, format_number, to_string
)
from .errors import EvalError

__all__ = [
    "Context",
    "evaluate",
    "evaluate_string",
    "to_string",
    "format_number",
    "INTEGER_TOLERANCE",
    "OPERATIONS",
    "EvalError",
]
