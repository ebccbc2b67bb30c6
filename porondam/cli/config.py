"""``config`` sub-command: create and inspect the settings file."""

from __future__ import annotations

import argparse
from pathlib import Path

import yaml

from ..config import config_path, ensure_default_config
from ._common import SubParsers, add_common_arguments, dump_json, settings_for


def add_subparser(sub: SubParsers) -> None:
    """Register ``config init``, ``config show`` and ``config path``."""

    parser = sub.add_parser("config", help="Manage the Porondam settings file")
    actions = parser.add_subparsers(dest="config_command", required=True)

    init = actions.add_parser("init", help="Write a default settings file")
    add_common_arguments(init, json_flag=False)
    init.add_argument(
        "--force",
        action="store_true",
        help="Replace an existing file with the defaults",
    )
    init.set_defaults(func=run_init)

    show = actions.add_parser("show", help="Print the effective settings")
    add_common_arguments(show)
    show.set_defaults(func=run_show)

    where = actions.add_parser("path", help="Print the settings file location")
    add_common_arguments(where, json_flag=False)
    where.set_defaults(func=run_path)


def _target(args: argparse.Namespace) -> Path:
    return args.config if args.config is not None else config_path()


def run_init(args: argparse.Namespace) -> int:
    target = _target(args)
    existed = target.exists()
    ensure_default_config(target, overwrite=args.force)
    if existed and not args.force:
        print(f"{target} already exists; use --force to replace it")
    else:
        print(f"wrote {target}")
    return 0


def run_show(args: argparse.Namespace) -> int:
    settings = settings_for(args)
    if args.json:
        print(dump_json(settings.model_dump(), settings))
    else:
        print(yaml.safe_dump(settings.model_dump(), sort_keys=False, allow_unicode=True), end="")
    return 0


def run_path(args: argparse.Namespace) -> int:
    print(_target(args))
    return 0
