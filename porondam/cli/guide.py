"""``guide`` sub-command: print the aspect guide and rating bands."""

from __future__ import annotations

import argparse

from ..aggregate import RATING_BANDS
from ..guide import ASPECT_GUIDE, GUIDE_INTRO, GUIDE_TITLE, guide_dict
from ._common import SubParsers, add_common_arguments, dump_json, pick_text, settings_for


def add_subparser(sub: SubParsers) -> None:
    """Register the ``guide`` subcommand."""

    parser = sub.add_parser("guide", help="Describe the principal Porondam aspects")
    add_common_arguments(parser)
    parser.set_defaults(func=run)


def run(args: argparse.Namespace) -> int:
    settings = settings_for(args)
    if args.json:
        print(dump_json(guide_dict(), settings))
        return 0
    language = settings.report.language
    print(pick_text(*GUIDE_TITLE, language))
    print(pick_text(*GUIDE_INTRO, language))
    print()
    for entry in ASPECT_GUIDE:
        print(f"{pick_text(entry.name, entry.name_local, language)} ({entry.max_points})")
        print(f"  {pick_text(entry.description, entry.description_local, language)}")
    print()
    for band in RATING_BANDS:
        print(f"{band.minimum:>3}+  {pick_text(band.label, band.label_local, language)}")
    return 0
