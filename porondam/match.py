"""Top-level entry point that scores a pair of charts."""

from __future__ import annotations

import logging
from datetime import date

from .aggregate import build_report
from .aspects import score_aspects
from .chart import ChartAttributes, assign_roles, build_context
from .results import MatchReport

__all__ = ["compute_match"]

LOG = logging.getLogger(__name__)


def compute_match(
    chart_a: ChartAttributes,
    chart_b: ChartAttributes,
    *,
    scored_on: date | None = None,
) -> MatchReport:
    """Score the twenty Porondam aspects for ``chart_a`` and ``chart_b``.

    The female chart takes the bride role in the directional aspects
    regardless of argument order. ``scored_on`` only labels the report; the
    result is otherwise a pure function of the two charts.

    Raises :class:`~porondam.errors.ChartValidationError` (labelled
    ``chart_a`` or ``chart_b``) when either chart cannot be resolved.
    """

    context_a = build_context(chart_a, label="chart_a")
    context_b = build_context(chart_b, label="chart_b")
    first, second = assign_roles(context_a, context_b)
    report = build_report(score_aspects(first, second), scored_on=scored_on)
    LOG.debug(
        "porondam match mansions=%d/%d signs=%d/%d score=%d matched=%d",
        first.mansion_id,
        second.mansion_id,
        first.sign_id,
        second.sign_id,
        report.overall_score,
        report.matched_count,
    )
    return report
