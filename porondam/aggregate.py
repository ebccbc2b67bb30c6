"""Combine aspect scores into an overall percentage, rating and advice."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from .aspects import TOTAL_MAX_POINTS
from .results import AspectScore, MatchReport, RatingBand

__all__ = [
    "RATING_BANDS",
    "WARNING_CLAUSES",
    "overall_score",
    "matched_count",
    "rating_for",
    "recommendation",
    "build_report",
]

RATING_BANDS: tuple[RatingBand, ...] = (
    RatingBand("excellent", 70, "Excellent Match", "විශිෂ්ට ගැලපීම"),
    RatingBand("good", 50, "Good Match", "හොඳ ගැලපීම"),
    RatingBand("moderate", 30, "Moderate Match", "මධ්‍යස්ථ ගැලපීම"),
    RatingBand("challenging", 0, "Challenging Match", "අභියෝගාත්මක ගැලපීම"),
)

_TIER_MESSAGES: tuple[tuple[int, str, str], ...] = (
    (
        70,
        "This is an excellent match with strong compatibility across most aspects.",
        "මෙය බොහෝ අංශවල ශක්තිමත් ගැලපීමක් සහිත විශිෂ්ට ගැලපීමකි.",
    ),
    (
        50,
        "This is a good match with moderate compatibility. Some areas may need attention.",
        "මෙය මධ්‍යස්ථ ගැලපීමක් සහිත හොඳ ගැලපීමකි. සමහර ක්ෂේත්‍රවලට අවධානය අවශ්‍ය විය හැක.",
    ),
    (
        0,
        "This match shows some challenges. Consider consulting an astrologer for remedies.",
        "මෙම ගැලපීම සමහර අභියෝග පෙන්නුම් කරයි. පිළියම් සඳහා ජ්‍යෝතිෂ්‍යවේදියෙකුගෙන් උපදෙස් ලබා ගැනීම සලකා බලන්න.",
    ),
)

# appended in this order whenever the named aspect is unfavorable
WARNING_CLAUSES: tuple[tuple[str, str, str], ...] = (
    (
        "nadi",
        "Nadi Dosha present - consider performing Nadi Dosha Nivarana puja.",
        "නාඩි දෝෂය පවතී - නාඩි දෝෂ නිවාරණ පූජාව සිදු කිරීම සලකා බලන්න.",
    ),
    (
        "gana",
        "Different temperaments - practice patience and understanding in daily life.",
        "විවිධ ස්වභාවයන් - දෛනික ජීවිතයේ ඉවසීම හා අවබෝධය පුහුණු කරන්න.",
    ),
    (
        "yoni",
        "Physical compatibility needs attention - open communication is key.",
        "ශාරීරික ගැලපීමට අවධානය අවශ්‍ය - විවෘත සන්නිවේදනය ප්‍රධාන වේ.",
    ),
    (
        "rajju",
        "Same Rajju - traditional remedies may be considered.",
        "එකම රජ්ජු - සාම්ප්‍රදායික පිළියම් සලකා බැලිය හැක.",
    ),
)


def overall_score(aspects: Sequence[AspectScore], max_points: int = TOTAL_MAX_POINTS) -> int:
    """Return ``100 * awarded / max_points`` rounded half up to an integer."""

    if max_points <= 0:
        raise ValueError("max_points must be positive")
    awarded = sum(entry.score for entry in aspects)
    return (200 * awarded + max_points) // (2 * max_points)


def matched_count(aspects: Sequence[AspectScore]) -> int:
    return sum(1 for entry in aspects if entry.favorable)


def rating_for(score: int) -> RatingBand:
    """Return the highest rating band whose minimum ``score`` reaches."""

    for band in RATING_BANDS:
        if score >= band.minimum:
            return band
    return RATING_BANDS[-1]


def recommendation(aspects: Sequence[AspectScore], score: int) -> tuple[str, str]:
    """Compose the English and Sinhala advice for an overall ``score``."""

    english: list[str] = []
    sinhala: list[str] = []
    for minimum, text, text_local in _TIER_MESSAGES:
        if score >= minimum:
            english.append(text)
            sinhala.append(text_local)
            break

    unfavorable = {entry.key for entry in aspects if not entry.favorable}
    for key, text, text_local in WARNING_CLAUSES:
        if key in unfavorable:
            english.append(text)
            sinhala.append(text_local)
    return " ".join(english), " ".join(sinhala)


def build_report(
    aspects: Sequence[AspectScore],
    *,
    scored_on: date | None = None,
) -> MatchReport:
    """Aggregate ``aspects`` into a :class:`MatchReport`."""

    entries = tuple(aspects)
    score = overall_score(entries)
    advice, advice_local = recommendation(entries, score)
    return MatchReport(
        aspects=entries,
        overall_score=score,
        matched_count=matched_count(entries),
        total_points=sum(entry.score for entry in entries),
        max_points=TOTAL_MAX_POINTS,
        rating=rating_for(score),
        recommendation=advice,
        recommendation_local=advice_local,
        scored_on=scored_on,
    )
