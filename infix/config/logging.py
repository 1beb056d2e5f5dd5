"""Logging configuration for the command-line driver."""

import logging
import os
from typing import Optional


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure Python logging for the process.

    The level comes from the argument, else INFIX_LOG_LEVEL, else WARNING.
    """
    log_level = (level or os.getenv("INFIX_LOG_LEVEL") or "WARNING").upper()
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
