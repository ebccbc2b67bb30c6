"""Porondam command line interface package."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from ..boot.logging import configure_logging
from ..errors import PorondamError
from . import catalog, config, convert, guide, match
from ._common import settings_for

__all__ = ["build_parser", "main"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="porondam", description="Porondam compatibility CLI")
    sub = parser.add_subparsers(dest="command", required=True)

    match.add_subparser(sub)
    catalog.add_subparser(sub)
    convert.add_subparser(sub)
    guide.add_subparser(sub)
    config.add_subparser(sub)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse ``argv``, load settings, configure logging and run a sub-command.

    Engine and input validation errors are printed to stderr and yield exit
    status 2.
    """

    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    try:
        settings = settings_for(args)
        configure_logging(level=settings.cli.log_level)
        return args.func(args)
    except (PorondamError, ValidationError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
