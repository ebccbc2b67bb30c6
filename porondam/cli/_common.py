"""Helpers shared by the Porondam sub-commands."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any

from ..config import Settings, load_settings

SubParsers = argparse._SubParsersAction  # argparse exposes no public alias


def add_common_arguments(parser: argparse.ArgumentParser, *, json_flag: bool = True) -> None:
    parser.add_argument(
        "--config",
        metavar="PATH",
        type=Path,
        help="Settings file to use instead of the one under PORONDAM_HOME",
    )
    if json_flag:
        parser.add_argument("--json", action="store_true", help="Emit JSON output")


def settings_for(args: argparse.Namespace) -> Settings:
    """Return settings attached by the entry point, loading them if absent."""

    settings = getattr(args, "settings", None)
    if settings is None:
        settings = load_settings(getattr(args, "config", None))
        args.settings = settings
    return settings


def dump_json(payload: Any, settings: Settings) -> str:
    indent = settings.cli.json_indent or None
    return json.dumps(payload, indent=indent, ensure_ascii=False)


def pick_text(english: str, local: str, language: str) -> str:
    """Select ``english``, ``local`` or both according to ``language``."""

    if language == "si":
        return local
    if language == "both":
        return f"{english} / {local}"
    return english
