"""
Tests for the cursor and its token-matching primitives.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from infix.lexer.tokens import TokenStream
from infix.parser.cursor import Cursor, is_number
from infix.parser.errors import ErrorKind


def make_cursor(*tokens):
    return Cursor(TokenStream(tuple(tokens)))


class TestIsNumber(unittest.TestCase):

    def test_integers(self):
        for token in ("0", "12", "-7", "+7", "007", "1_000"):
            self.assertTrue(is_number(token), token)

    def test_non_integers(self):
        for token in ("", "+", "(", "1.5", "0x10", "one", "1e3"):
            self.assertFalse(is_number(token), token)


class TestCursor(unittest.TestCase):
    """Test cases for cursor movement and matching."""

    def test_prime_on_empty_stream(self):
        error = make_cursor().prime()
        self.assertEqual(error.kind, ErrorKind.END_OF_INPUT)
        self.assertEqual(error.index, 0)
        self.assertIsNone(error.token)

    def test_prime(self):
        cursor = make_cursor("1")
        self.assertIsNone(cursor.prime())
        self.assertEqual(cursor.current(), "1")

    def test_advance_past_end_is_an_error(self):
        cursor = make_cursor("1")
        self.assertIsNone(cursor.advance())
        self.assertTrue(cursor.at_end())

        error = cursor.advance()
        self.assertEqual(error.kind, ErrorKind.END_OF_INPUT)
        # The position never leaves 0..len
        self.assertEqual(cursor.position, 1)

    def test_try_consume_match(self):
        cursor = make_cursor("(", "1")
        matched, error = cursor.try_consume("(")
        self.assertTrue(matched)
        self.assertIsNone(error)
        self.assertEqual(cursor.position, 1)

    def test_try_consume_mismatch_does_not_move(self):
        cursor = make_cursor("1")
        matched, error = cursor.try_consume("(")
        self.assertFalse(matched)
        self.assertIsNone(error)
        self.assertEqual(cursor.position, 0)

    def test_try_consume_at_end(self):
        cursor = make_cursor()
        matched, error = cursor.try_consume("+")
        self.assertFalse(matched)
        self.assertEqual(error.kind, ErrorKind.END_OF_INPUT)

    def test_try_consume_number(self):
        cursor = make_cursor("-3", "+")
        matched, error = cursor.try_consume_number()
        self.assertTrue(matched)
        self.assertIsNone(error)

        matched, error = cursor.try_consume_number()
        self.assertFalse(matched)
        self.assertIsNone(error)
        self.assertEqual(cursor.position, 1)

    def test_try_consume_number_is_bounds_checked(self):
        """
        Reading a number past the end reports END_OF_INPUT like the other
        primitives instead of surfacing an IndexError.
        """
        cursor = make_cursor("1")
        cursor.advance()
        matched, error = cursor.try_consume_number()
        self.assertFalse(matched)
        self.assertEqual(error.kind, ErrorKind.END_OF_INPUT)
        self.assertEqual(error.index, 1)


if __name__ == '__main__':
    unittest.main()
