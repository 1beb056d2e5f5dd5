"""
Infix lexer - splits expression text into tokens.

The split is deliberately trivial: every occurrence of the delimiter is a
boundary, so runs of delimiters produce empty tokens and nothing is trimmed.
"""

import logging

from .tokens import TokenStream, DEFAULT_DELIMITER


logger = logging.getLogger(__name__)


class Lexer:
    """
    Delimiter-splitting lexical analyzer.

    Never fails on input: the worst case is a single token holding the
    whole source string.
    """

    def __init__(self, source: str, delimiter: str = DEFAULT_DELIMITER):
        """
        Initialize the lexer with source text.

        Args:
            source: Expression text
            delimiter: Token separator, must be non-empty
        """
        if not isinstance(source, str):
            raise TypeError(f"source must be str, not {type(source).__name__}")
        if not delimiter:
            raise ValueError("delimiter must be a non-empty string")
        self.source = source
        self.delimiter = delimiter

    def tokenize(self) -> TokenStream:
        """
        Tokenize the source text.

        Returns:
            TokenStream over the split source
        """
        stream = TokenStream(tuple(self.source.split(self.delimiter)), self.source)
        logger.debug("Tokenized %r into %d tokens", self.source, len(stream))
        return stream


def tokenize_string(source: str, delimiter: str = DEFAULT_DELIMITER) -> TokenStream:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Expression text
        delimiter: Token separator

    Returns:
        TokenStream
    """
    return Lexer(source, delimiter).tokenize()
