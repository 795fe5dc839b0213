"""
Error handling for the calcparse scanner.

The scanner only fails on malformed numeric literals; every other
unrecognized character becomes an UNKNOWN token.
"""

from typing import Optional, List

from ..errors import CalcError
from .tokens import SourceLocation


class LexError(CalcError):
    """
    Exception raised when the scanner cannot read a numeric literal.

    Carries the character offset where the literal starts and the reason
    it was rejected.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        reason: str,
        code: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message, location, code=code, help_text=reason, suggestions=suggestions)
        self.reason = reason

    @property
    def position(self) -> int:
        return self.diagnostic.location.offset


ERROR_CODES = {
    "L001": "Number literal out of range",
}


def create_number_out_of_range_error(lexeme: str, location: SourceLocation, too_large: bool) -> LexError:
    """Create an error for a literal a double cannot represent."""
    if too_large:
        reason = "The value is too large for a double-precision float."
        suggestion = "Use a smaller exponent"
    else:
        reason = "The value is too small for a double-precision float and would round to zero."
        suggestion = "Use a larger exponent, or write 0"
    return LexError(
        message=f"Numeric literal out of range: '{lexeme}'",
        location=location,
        reason=reason,
        code="L001",
        suggestions=[suggestion]
    )
