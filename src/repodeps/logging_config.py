"""Logging configuration for the ``repodeps`` command-line tool.

Called once at startup by the CLI group. Every module that does
``logger = logging.getLogger(__name__)`` inherits this config; library
users configure logging themselves.

Levels are resolved in precedence order:
    CLI flag  >  REPODEPS_LOG_LEVEL env var  >  WARNING (default)
"""

from __future__ import annotations

import logging
import os
import sys

ENV_LOG_LEVEL = "REPODEPS_LOG_LEVEL"

_FMT_MINIMAL = "%(levelname)s: %(message)s"
_FMT_DEBUG = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d %(message)s"
_DATEFMT = "%H:%M:%S"


def resolve_level(flag_level: str | None = None) -> int:
    """Pick the effective level from the CLI flag, the environment, or the default."""
    name = flag_level or os.environ.get(ENV_LOG_LEVEL) or "WARNING"
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        # Unknown names map to "Level X" strings; fall back rather than crash.
        return logging.WARNING
    return level


def setup_logging(flag_level: str | None = None) -> int:
    """Configure the ``repodeps`` logger hierarchy to write to stderr.

    Returns:
        The numeric level that was applied.
    """
    level = resolve_level(flag_level)
    fmt = _FMT_DEBUG if level <= logging.DEBUG else _FMT_MINIMAL

    root = logging.getLogger("repodeps")
    for handler in list(root.handlers):
        root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt, datefmt=_DATEFMT))
    root.addHandler(handler)
    root.setLevel(level)
    return level
