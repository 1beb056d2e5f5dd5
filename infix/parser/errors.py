"""
Error handling for the infix recognizer.

Rejections are ordinary outcomes, so they are represented as values
(RecognitionError) returned up the rule chain rather than raised.
RecognitionFailed is the exception form, for callers that want one at
their own boundary.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..lexer.tokens import TokenStream


class ErrorKind(Enum):
    """Reasons a recognition can fail, valued by their reason text."""
    END_OF_INPUT = "End of input reached"
    MISSING_CLOSE_PAREN = "Missing close )"
    MISSING_OPERAND = "Missing number operand"
    MISSING_OPERATOR = "Missing operator"
    TRAILING_INPUT = "Additional input found."
    NESTING_TOO_DEEP = "Maximum nesting depth exceeded"


# Stable codes for categorization
ERROR_CODES = {
    ErrorKind.END_OF_INPUT: "R001",
    ErrorKind.MISSING_CLOSE_PAREN: "R002",
    ErrorKind.MISSING_OPERAND: "R003",
    ErrorKind.MISSING_OPERATOR: "R004",
    ErrorKind.TRAILING_INPUT: "R005",
    ErrorKind.NESTING_TOO_DEEP: "R006",
}

HELP_TEXT = {
    ErrorKind.END_OF_INPUT: "The input ended while more tokens were expected.",
    ErrorKind.MISSING_CLOSE_PAREN: "Every '(' must be closed by a matching ')'.",
    ErrorKind.MISSING_OPERAND: "An operand is an integer or a parenthesized expression.",
    ErrorKind.MISSING_OPERATOR: "Operands must be joined by '+'.",
    ErrorKind.TRAILING_INPUT: "A complete expression was followed by extra tokens.",
    ErrorKind.NESTING_TOO_DEEP: "Reduce the number of nested parentheses.",
}


@dataclass(frozen=True)
class RecognitionError:
    """
    Why and where a recognition failed.

    index is the cursor position at the failure; token is the text found
    there, or None when the cursor had run past the last token.
    """
    kind: ErrorKind
    index: int
    token: Optional[str] = None

    @property
    def reason(self) -> str:
        return self.kind.value

    @property
    def code(self) -> str:
        return ERROR_CODES[self.kind]

    @property
    def help_text(self) -> str:
        return HELP_TEXT[self.kind]

    @property
    def message(self) -> str:
        if self.token is not None:
            return f"Error '{self.reason}' at token #{self.index}, '{self.token}'"
        return f"Error '{self.reason}' at token index #{self.index}"

    def __str__(self) -> str:
        return self.message


class RecognitionFailed(Exception):
    """
    Exception raised by ensure_valid when an input is rejected.

    Carries the underlying RecognitionError and the rejected source.
    """

    def __init__(self, source: str, error: RecognitionError):
        super().__init__(error.message)
        self.source = source
        self.error = error

    def __str__(self) -> str:
        return format_failure(self.source, self.error)


def create_error(kind: ErrorKind, tokens: TokenStream, index: int) -> RecognitionError:
    """Create an error at index, capturing the offending token if in range."""
    return RecognitionError(kind=kind, index=index, token=tokens.describe(index))


def format_failure(source: str, error: RecognitionError) -> str:
    """Render a rejection the way a console driver reports it."""
    return f"Error parsing expression '{source}': '{error.message}'"
