"""
Infix Lexer Package

Splits expression text into a token stream on a fixed delimiter. No
normalization is applied: consecutive delimiters yield empty tokens.
"""

from .tokens import TokenStream, OPEN_PAREN, CLOSE_PAREN, PLUS, DEFAULT_DELIMITER
from .lexer import Lexer, tokenize_string

__all__ = [
    "Lexer",
    "TokenStream",
    "tokenize_string",
    "OPEN_PAREN",
    "CLOSE_PAREN",
    "PLUS",
    "DEFAULT_DELIMITER",
]
