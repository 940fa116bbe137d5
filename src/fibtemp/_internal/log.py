"""Logging setup for the command line."""

from __future__ import annotations

import logging
import sys

_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool) -> None:
    """Send fibtemp log records to stderr, at DEBUG when *verbose*."""
    logging.basicConfig(stream=sys.stderr, format=_FORMAT, level=logging.WARNING)
    logging.getLogger("fibtemp").setLevel(logging.DEBUG if verbose else logging.WARNING)
