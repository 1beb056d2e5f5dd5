"""
Recursive-descent recognizer for infix addition expressions.

Grammar:

    expression := operand operator operand
    operand    := "(" expression ")" | number
    operator   := "+"

With chain_operators enabled the expression rule becomes

    expression := operand operator operand (operator operand)*

Each rule is one method; the Python call stack tracks the nesting of the
grammar. Rules return None on success or the first RecognitionError met,
which is passed up unchanged. There is no backtracking: once a branch has
consumed a token the rule is committed to it.
"""

import logging
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from ..lexer.lexer import Lexer
from ..lexer.tokens import TokenStream, OPEN_PAREN, CLOSE_PAREN, PLUS, DEFAULT_DELIMITER
from .cursor import Cursor
from .errors import ErrorKind, RecognitionError, RecognitionFailed

if TYPE_CHECKING:
    from ..config.settings import Settings


logger = logging.getLogger(__name__)

DEFAULT_MAX_NESTING_DEPTH = 256
# Each nesting level costs two Python frames (operand -> expression)
MAX_NESTING_DEPTH_LIMIT = 300


@dataclass(frozen=True)
class RecognitionResult:
    """Outcome of validating one input string."""
    source: str
    tokens: TokenStream
    error: Optional[RecognitionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> Optional[str]:
        return self.error.message if self.error is not None else None

    def has_errors(self) -> bool:
        """Check if the input was rejected."""
        return self.error is not None


class _Recognition:
    """State of a single validate() call: the cursor and nesting depth."""

    def __init__(self, tokens: TokenStream, max_nesting_depth: int, chain_operators: bool):
        self.cursor = Cursor(tokens)
        self.max_nesting_depth = max_nesting_depth
        self.chain_operators = chain_operators
        self.depth = 0

    def run(self) -> Optional[RecognitionError]:
        error = self.cursor.prime()
        if error:
            return error

        error = self.expression()
        if error:
            return error

        # Anything the rules left unexamined means the grammar stopped early
        if not self.cursor.at_end():
            return self.cursor.error(ErrorKind.TRAILING_INPUT)
        return None

    def expression(self) -> Optional[RecognitionError]:
        error = self.operand() or self.operator() or self.operand()
        if error or not self.chain_operators:
            return error

        while not self.cursor.at_end():
            matched, error = self.cursor.try_consume(PLUS)
            if error:
                return error
            if not matched:
                break
            error = self.operand()
            if error:
                return error
        return None

    def operand(self) -> Optional[RecognitionError]:
        matched, error = self.cursor.try_consume(OPEN_PAREN)
        if error:
            return error

        if matched:
            if self.depth >= self.max_nesting_depth:
                return self.cursor.error(ErrorKind.NESTING_TOO_DEEP)
            self.depth += 1
            error = self.expression()
            self.depth -= 1
            if error:
                return error

            matched, error = self.cursor.try_consume(CLOSE_PAREN)
            if error:
                return error
            if not matched:
                return self.cursor.error(ErrorKind.MISSING_CLOSE_PAREN)
            return None

        matched, error = self.cursor.try_consume_number()
        if error:
            return error
        if not matched:
            # Trailing delimiters leave only empty tokens: the input has run out
            if self.cursor.tokens.only_residue_from(self.cursor.position):
                return self.cursor.error(ErrorKind.END_OF_INPUT)
            return self.cursor.error(ErrorKind.MISSING_OPERAND)
        return None

    def operator(self) -> Optional[RecognitionError]:
        matched, error = self.cursor.try_consume(PLUS)
        if error:
            return error
        if not matched:
            return self.cursor.error(ErrorKind.MISSING_OPERATOR)
        return None


class Recognizer:
    """
    Validates strings against the infix grammar.

    Holds only configuration, so one instance can serve concurrent callers;
    every call builds its own token stream and cursor.
    """

    def __init__(
        self,
        delimiter: str = DEFAULT_DELIMITER,
        max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH,
        chain_operators: bool = False,
    ):
        """
        Args:
            delimiter: Token separator used by the lexer
            max_nesting_depth: Deepest parenthesis nesting accepted
            chain_operators: Accept operand (+ operand)+ chains
        """
        if not delimiter:
            raise ValueError("delimiter must be a non-empty string")
        if not 1 <= max_nesting_depth <= MAX_NESTING_DEPTH_LIMIT:
            raise ValueError(
                f"max_nesting_depth must be between 1 and {MAX_NESTING_DEPTH_LIMIT}"
            )
        self.delimiter = delimiter
        self.max_nesting_depth = max_nesting_depth
        self.chain_operators = chain_operators

    @classmethod
    def from_settings(cls, settings: "Settings") -> "Recognizer":
        return cls(
            delimiter=settings.delimiter,
            max_nesting_depth=settings.max_nesting_depth,
            chain_operators=settings.chain_operators,
        )

    def validate(self, source: str) -> RecognitionResult:
        """
        Check source against the grammar.

        Returns:
            RecognitionResult; rejected input is reported through its error,
            never raised
        """
        tokens = Lexer(source, self.delimiter).tokenize()
        error = _Recognition(tokens, self.max_nesting_depth, self.chain_operators).run()

        if error:
            logger.debug("Rejected %r: %s", source, error.message)
        else:
            logger.debug("Accepted %r", source)
        return RecognitionResult(source, tokens, error)

    def ensure_valid(self, source: str) -> RecognitionResult:
        """
        Validate source, raising on rejection.

        Raises:
            RecognitionFailed: If source does not match the grammar
        """
        result = self.validate(source)
        if result.error is not None:
            raise RecognitionFailed(source, result.error)
        return result


_default_recognizer = Recognizer()


def validate(source: str) -> RecognitionResult:
    """Validate source with the default recognizer."""
    return _default_recognizer.validate(source)


def ensure_valid(source: str) -> RecognitionResult:
    """Validate source with the default recognizer, raising on rejection."""
    return _default_recognizer.ensure_valid(source)
