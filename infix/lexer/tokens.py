"""
Token definitions for the infix recognizer.

Tokens are plain strings: the grammar only has three literal tokens
(parentheses and the addition operator) plus integer literals, so there is
no token-type enumeration. The stream wraps the split input and keeps it
immutable for the lifetime of a recognition call.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple


# Literal tokens of the grammar
OPEN_PAREN = "("
CLOSE_PAREN = ")"
PLUS = "+"
DEFAULT_DELIMITER = " "


@dataclass(frozen=True)
class TokenStream:
    """
    Ordered, immutable sequence of tokens produced by the lexer.

    Keeps the source text around for error reporting.
    """
    tokens: Tuple[str, ...]
    source: str = ""

    def __len__(self) -> int:
        return len(self.tokens)

    def __getitem__(self, index: int) -> str:
        return self.tokens[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.tokens)

    def __str__(self) -> str:
        return " | ".join(repr(token) for token in self.tokens)

    def in_range(self, index: int) -> bool:
        """Check if index names an existing token."""
        return 0 <= index < len(self.tokens)

    def describe(self, index: int) -> Optional[str]:
        """Return the token text at index, or None when out of range."""
        if self.in_range(index):
            return self.tokens[index]
        return None

    def only_residue_from(self, index: int) -> bool:
        """
        Check if everything from index onwards is delimiter residue.

        A trailing delimiter leaves empty tokens behind; they carry no input.
        """
        remaining = self.tokens[index:]
        return bool(remaining) and all(token == "" for token in remaining)
