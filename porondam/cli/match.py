"""``match`` sub-command: score two charts."""

from __future__ import annotations

import argparse
import json
import sys
from datetime import date
from pathlib import Path

from ..catalog import mansion_by_name, sign_by_name
from ..chart import ChartAttributes, missing_fields
from ..match import compute_match
from ..results import MatchReport
from ..schemas import MatchRequest
from ._common import SubParsers, add_common_arguments, dump_json, pick_text, settings_for


def _mansion_arg(value: str) -> int:
    text = value.strip()
    if text.lstrip("-").isdigit():
        return int(text)
    return mansion_by_name(text).id


def _sign_arg(value: str) -> int:
    text = value.strip()
    if text.lstrip("-").isdigit():
        return int(text)
    return sign_by_name(text).id


def _add_chart_arguments(parser: argparse.ArgumentParser, prefix: str, label: str) -> None:
    group = parser.add_argument_group(f"chart {prefix.upper()} ({label})")
    group.add_argument(
        f"--{prefix}-mansion",
        metavar="ID|NAME",
        help="Birth star as 1-27 or a mansion name such as 'Rohini'",
    )
    group.add_argument(
        f"--{prefix}-sign",
        metavar="ID|NAME",
        help="Moon sign as 1-12 or a sign name such as 'Aries' or 'Mesha'",
    )
    group.add_argument(
        f"--{prefix}-longitude",
        type=float,
        metavar="DEGREES",
        help="Sidereal Moon longitude used when ids are omitted",
    )
    group.add_argument(f"--{prefix}-pada", type=int, metavar="1-4", help="Quarter of the birth star")
    group.add_argument(f"--{prefix}-gender", choices=("male", "female"))


def add_subparser(sub: SubParsers) -> None:
    """Register the ``match`` subcommand."""

    parser = sub.add_parser(
        "match",
        help="Score the twenty Porondam aspects for two charts",
        description=(
            "Score two birth charts given on the command line (--a-*/--b-*) or in a "
            "JSON document (--input, '-' for stdin)."
        ),
    )
    _add_chart_arguments(parser, "a", "first chart")
    _add_chart_arguments(parser, "b", "second chart")
    parser.add_argument("--input", metavar="PATH", help="JSON request with chart1/chart2")
    parser.add_argument(
        "--date",
        type=date.fromisoformat,
        metavar="YYYY-MM-DD",
        help="Date used to label the report",
    )
    add_common_arguments(parser)
    parser.set_defaults(func=run)


def _chart_from_flags(args: argparse.Namespace, prefix: str) -> ChartAttributes:
    mansion_raw = getattr(args, f"{prefix}_mansion")
    sign_raw = getattr(args, f"{prefix}_sign")
    return ChartAttributes(
        gender=getattr(args, f"{prefix}_gender"),
        mansion_id=_mansion_arg(mansion_raw) if mansion_raw is not None else None,
        sign_id=_sign_arg(sign_raw) if sign_raw is not None else None,
        longitude=getattr(args, f"{prefix}_longitude"),
        pada=getattr(args, f"{prefix}_pada"),
    )


def _read_request(path: str) -> MatchRequest:
    if path == "-":
        text = sys.stdin.read()
    else:
        text = Path(path).read_text(encoding="utf-8")
    return MatchRequest.model_validate(json.loads(text))


def format_report(report: MatchReport, *, language: str, include_aspects: bool) -> str:
    lines = [
        f"Overall score: {report.overall_score}% "
        f"({pick_text(report.rating.label, report.rating.label_local, language)})",
        f"Matched aspects: {report.matched_count}/{report.aspect_count} "
        f"(points {report.total_points}/{report.max_points})",
    ]
    if report.scored_on is not None:
        lines.append(f"Date: {report.scored_on.isoformat()}")
    if include_aspects:
        lines.append("")
        for entry in report.aspects:
            mark = "+" if entry.favorable else "-"
            name = pick_text(entry.name, entry.name_local, language)
            text = pick_text(entry.description, entry.description_local, language)
            lines.append(f"  [{mark}] {name}: {entry.score}/{entry.max_points}  {text}")
    lines.append("")
    lines.append("Recommendation:")
    if language in ("en", "both"):
        lines.append(f"  {report.recommendation}")
    if language in ("si", "both"):
        lines.append(f"  {report.recommendation_local}")
    return "\n".join(lines)


def run(args: argparse.Namespace) -> int:
    """Execute the match subcommand."""

    settings = settings_for(args)
    scored_on = args.date
    if args.input:
        try:
            request = _read_request(args.input)
        except json.JSONDecodeError as exc:
            print(f"error: {args.input} is not valid JSON: {exc}", file=sys.stderr)
            return 2
        chart_a, chart_b = request.to_attributes()
        if scored_on is None:
            scored_on = request.scored_on
    else:
        chart_a = _chart_from_flags(args, "a")
        chart_b = _chart_from_flags(args, "b")

    incomplete = [
        f"{label} is missing " + ", ".join(fields)
        for label, fields in (("chart_a", missing_fields(chart_a)), ("chart_b", missing_fields(chart_b)))
        if fields
    ]
    if incomplete:
        for line in incomplete:
            print(f"error: {line}", file=sys.stderr)
        return 2

    report = compute_match(chart_a, chart_b, scored_on=scored_on)
    if args.json:
        print(dump_json(report.to_dict(), settings))
    else:
        print(
            format_report(
                report,
                language=settings.report.language,
                include_aspects=settings.report.include_aspects,
            )
        )
    return 0
