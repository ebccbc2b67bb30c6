"""Logging setup shared by the Porondam command line entry points."""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

__all__ = ["configure_logging", "resolve_level"]

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def resolve_level(value: str | int | None) -> int:
    """Translate a level name or number into a :mod:`logging` level.

    Names are case insensitive and numeric strings are accepted. Anything
    unrecognised resolves to ``INFO``.
    """

    if isinstance(value, int):
        return value
    text = (value or "").strip()
    if text.isdigit():
        return int(text)
    named = logging.getLevelName(text.upper()) if text else None
    return named if isinstance(named, int) else logging.INFO


def configure_logging(*, level: str | int | None = None, **kwargs: Any) -> int:
    """Configure the root logger and return the effective level.

    ``level`` overrides the ``LOG_LEVEL`` environment variable. Remaining
    keyword arguments are passed to :func:`logging.basicConfig`; output goes
    to stderr unless a ``stream`` or ``handlers`` is given.
    """

    effective = resolve_level(os.environ.get("LOG_LEVEL") if level is None else level)
    if "handlers" not in kwargs:
        kwargs.setdefault("stream", sys.stderr)
    kwargs.setdefault("format", LOG_FORMAT)
    kwargs.setdefault("datefmt", LOG_DATEFMT)
    kwargs.setdefault("force", True)
    logging.basicConfig(level=effective, **kwargs)
    return effective
