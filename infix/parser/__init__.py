"""
Infix Parser Package

Recursive-descent recognizer for the infix addition grammar. Accepts or
rejects input and explains rejections; it does not build a tree or evaluate.
"""

from .cursor import Cursor, is_number
from .errors import (
    ErrorKind, RecognitionError, RecognitionFailed, ERROR_CODES, format_failure
)
from .recognizer import Recognizer, RecognitionResult, validate, ensure_valid

__all__ = [
    # Core recognizer
    "Recognizer",
    "RecognitionResult",
    "validate",
    "ensure_valid",
    "Cursor",
    "is_number",

    # Error handling
    "ErrorKind",
    "RecognitionError",
    "RecognitionFailed",
    "ERROR_CODES",
    "format_failure",
]
