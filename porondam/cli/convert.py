"""``convert`` sub-command: longitude to mansion, pada and sign."""

from __future__ import annotations

import argparse
import sys

from ..catalog import mansion, sign
from ..longitude import mansion_from_longitude, sign_from_longitude
from ._common import SubParsers, add_common_arguments, dump_json, settings_for


def add_subparser(sub: SubParsers) -> None:
    """Register the ``convert`` subcommand."""

    parser = sub.add_parser(
        "convert",
        help="Convert a sidereal Moon longitude into mansion, pada and sign",
    )
    parser.add_argument("longitude", type=float, help="Longitude in degrees")
    add_common_arguments(parser)
    parser.set_defaults(func=run)


def run(args: argparse.Namespace) -> int:
    settings = settings_for(args)
    try:
        position = mansion_from_longitude(args.longitude)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    star = mansion(position.mansion_id)
    rashi = sign(sign_from_longitude(args.longitude))
    payload = {
        "longitude": position.longitude,
        "mansion": star.to_dict(),
        "pada": position.pada,
        "degree_in_pada": round(position.degree_in_pada, 6),
        "sign": rashi.to_dict(),
    }
    if args.json:
        print(dump_json(payload, settings))
    else:
        print(f"Longitude: {position.longitude:.4f}")
        print(f"Mansion:   {star.id} {star.name} ({star.name_local}), pada {position.pada}")
        print(f"Sign:      {rashi.id} {rashi.name} / {rashi.sanskrit} ({rashi.name_local})")
    return 0
