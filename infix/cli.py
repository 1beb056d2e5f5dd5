#!/usr/bin/env python3
"""
Command-line driver for the infix recognizer.

Validates each expression given on the command line (or the demo set, or
one expression per stdin line) and reports the outcome per input.
"""

import argparse
import logging
import sys
from typing import Iterable, List, Optional, TextIO

from .config.logging import configure_logging
from .config.settings import load_settings, settings_summary
from .parser.errors import format_failure
from .parser.recognizer import Recognizer


logger = logging.getLogger(__name__)

DEMO_EXPRESSIONS = [
    # well-formed
    "1 + 12",
    "1 + ( 2 + 3 )",
    "( 2 + 3 ) + 4",

    # malformed
    "+",
    "1 + ",
    "( 1 )",
    "( 1 + )",
    "( ( 1 + 1 )",
    "1 + 1 )",
    "( 43 + )",
]


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="infix-check",
        description="Check expressions against the infix addition grammar",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    infix-check "1 + ( 2 + 3 )"          # Check one expression
    infix-check --demo                    # Check the built-in samples
    echo "1 + 2 + 3" | infix-check --chain
        """
    )
    parser.add_argument('expressions', nargs='*', metavar='EXPR',
                        help='Expressions to check (tokens separated by single spaces)')
    parser.add_argument('--demo', action='store_true',
                        help='Check the built-in sample expressions')
    parser.add_argument('--chain', action='store_true',
                        help='Accept chains like "1 + 2 + 3"')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Show error codes and help text')
    parser.add_argument('--log-level', default=None,
                        help='Logging level (default: INFIX_LOG_LEVEL or WARNING)')
    return parser


def check_expressions(recognizer: Recognizer, expressions: Iterable[str],
                      out: TextIO, verbose: bool = False) -> bool:
    """Validate each expression, writing one report per input. True if all passed."""
    all_ok = True
    for expression in expressions:
        result = recognizer.validate(expression)
        if result.ok:
            print(f"Parsed expression '{expression}'", file=out)
            continue

        all_ok = False
        print(format_failure(expression, result.error), file=out)
        if verbose:
            print(f"  [{result.error.code}] {result.error.help_text}", file=out)
    return all_ok


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point; returns the process exit status."""
    args = build_arg_parser().parse_args(argv)

    overrides = {}
    if args.chain:
        overrides['chain_operators'] = True
    if args.log_level:
        overrides['log_level'] = args.log_level

    try:
        settings = load_settings(**overrides)
    except RuntimeError as e:
        print(f"infix-check: {e}", file=sys.stderr)
        return 2

    configure_logging(settings.log_level)
    logger.debug("Effective settings: %s", settings_summary(settings))

    recognizer = Recognizer.from_settings(settings)

    if args.demo:
        expressions = DEMO_EXPRESSIONS + args.expressions
    elif args.expressions:
        expressions = args.expressions
    else:
        expressions = (line.rstrip("\r\n") for line in sys.stdin)

    ok = check_expressions(recognizer, expressions, sys.stdout, verbose=args.verbose)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
