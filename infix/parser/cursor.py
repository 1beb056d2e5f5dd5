"""
Cursor over a token stream, with the token-matching primitives the grammar
rules are built from.

Every primitive checks bounds before looking at a token and reports running
off the end as an END_OF_INPUT error value.
"""

from typing import Optional, Tuple

from ..lexer.tokens import TokenStream
from .errors import ErrorKind, RecognitionError, create_error


Match = Tuple[bool, Optional[RecognitionError]]


def is_number(token: str) -> bool:
    """Check if token parses as a base-10, optionally signed integer."""
    try:
        int(token, 10)
    except ValueError:
        return False
    return True


class Cursor:
    """
    Position of the next unconsumed token.

    Owned by a single recognition call. position stays within
    0..len(tokens); position == len(tokens) means the input is exhausted.
    """

    def __init__(self, tokens: TokenStream):
        self.tokens = tokens
        self.position = 0

    def at_end(self) -> bool:
        return self.position >= len(self.tokens)

    def current(self) -> Optional[str]:
        return self.tokens.describe(self.position)

    def error(self, kind: ErrorKind) -> RecognitionError:
        """Create an error of the given kind at the current position."""
        return create_error(kind, self.tokens, self.position)

    def prime(self) -> Optional[RecognitionError]:
        """Place the cursor on the first token; an empty stream has none."""
        self.position = 0
        if self.at_end():
            return self.error(ErrorKind.END_OF_INPUT)
        return None

    def advance(self) -> Optional[RecognitionError]:
        """Step to the next token. Stepping from the end is an error, not a no-op."""
        if self.at_end():
            return self.error(ErrorKind.END_OF_INPUT)
        self.position += 1
        return None

    def try_consume(self, expected: str) -> Match:
        """Consume the current token if it equals expected."""
        if self.at_end():
            return False, self.error(ErrorKind.END_OF_INPUT)
        if self.tokens[self.position] == expected:
            return True, self.advance()
        return False, None

    def try_consume_number(self) -> Match:
        """Consume the current token if it is an integer literal."""
        if self.at_end():
            return False, self.error(ErrorKind.END_OF_INPUT)
        if is_number(self.tokens[self.position]):
            return True, self.advance()
        return False, None
