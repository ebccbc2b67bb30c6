"""``catalog`` sub-command: list the reference mansions or signs."""

from __future__ import annotations

import argparse

from ..catalog import MANSIONS, SIGNS
from ._common import SubParsers, add_common_arguments, dump_json, settings_for


def add_subparser(sub: SubParsers) -> None:
    """Register the ``catalog`` subcommand."""

    parser = sub.add_parser(
        "catalog",
        help="List the lunar mansion or zodiac sign catalog",
    )
    parser.add_argument("table", choices=("mansions", "signs"))
    add_common_arguments(parser)
    parser.set_defaults(func=run)


def run(args: argparse.Namespace) -> int:
    settings = settings_for(args)
    records = MANSIONS if args.table == "mansions" else SIGNS
    if args.json:
        print(dump_json([record.to_dict() for record in records], settings))
        return 0
    for record in records:
        if args.table == "mansions":
            print(
                f"{record.id:>2}  {record.name:<18} {record.name_local:<12} "
                f"{record.lord:<8} {record.gana:<9} {record.yoni:<9} {record.nadi}"
            )
        else:
            print(
                f"{record.id:>2}  {record.name:<12} {record.sanskrit:<11} "
                f"{record.name_local:<8} {record.lord}"
            )
    return 0
