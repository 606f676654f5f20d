"""Logging setup for the command-line tool."""

from __future__ import annotations

import logging
import sys


def setup_logging(level: str = "warning") -> None:
    """Configure root logging on stderr at *level* (debug | info | warning | error)."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
        force=True,
    )
