"""Logging setup for hostosctl."""

import logging
import sys


LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: str = "WARNING"):
    """Send log records to stderr at the given level.

    Unknown level names fall back to WARNING. Calling it again replaces the
    previous handlers.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    # stdout carries the result table
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )

    logging.getLogger("ruamel").setLevel(logging.WARNING)
