"""
Shared diagnostic model for every calcparse stage.

Each stage raises its own exception type (LexError, ParseError, EvalError),
but they all carry a Diagnostic so callers can report them uniformly.
"""

from typing import Optional, List, TYPE_CHECKING
from dataclasses import dataclass

if TYPE_CHECKING:
    from .lexer.tokens import SourceLocation


@dataclass
class Diagnostic:
    """A single error report with optional location and hints."""
    message: str
    location: Optional["SourceLocation"]
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"
        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class CalcError(Exception):
    """Base class for all calcparse errors."""

    def __init__(
        self,
        message: str,
        location: Optional["SourceLocation"] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def location(self) -> Optional["SourceLocation"]:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)
