"""
Infix Recognizer Package

A recursive-descent recognizer for a small infix grammar: integer operands,
a single '+' operator and parenthesized sub-expressions. Reports whether a
string conforms and, if not, why and where it stopped.

Architecture:
    infix/
    ├── lexer/           # Delimiter splitting into a token stream
    ├── parser/          # Cursor, grammar rules and error taxonomy
    ├── config/          # Environment settings and logging setup
    └── cli.py           # Command-line driver

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, TokenStream, tokenize_string
from .parser import (
    Recognizer, RecognitionResult, RecognitionError, RecognitionFailed,
    ErrorKind, validate, ensure_valid, format_failure
)

__all__ = [
    # Core classes
    "Lexer",
    "TokenStream",
    "Recognizer",
    "RecognitionResult",

    # Entry points
    "tokenize_string",
    "validate",
    "ensure_valid",

    # Errors
    "ErrorKind",
    "RecognitionError",
    "RecognitionFailed",
    "format_failure",

    # Version info
    "__version__",
    "__license__",
]
