"""Result records produced by the aspect scorer and the aggregator."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date
from typing import Any

__all__ = ["AspectScore", "RatingBand", "MatchReport"]


@dataclass(frozen=True)
class AspectScore:
    """Outcome of a single Porondam aspect."""

    key: str
    name: str
    name_local: str
    max_points: int
    score: int
    favorable: bool
    description: str
    description_local: str

    def __post_init__(self) -> None:
        if not 0 <= self.score <= self.max_points:
            raise ValueError(
                f"{self.key}: score {self.score} outside 0..{self.max_points}"
            )

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "name": self.name,
            "name_local": self.name_local,
            "max_points": self.max_points,
            "score": self.score,
            "favorable": self.favorable,
            "description": self.description,
            "description_local": self.description_local,
        }


@dataclass(frozen=True)
class RatingBand:
    """Named band of overall scores (excellent, good, ...)."""

    key: str
    minimum: int
    label: str
    label_local: str


@dataclass(frozen=True)
class MatchReport:
    """Full compatibility report for one pair of charts."""

    aspects: Sequence[AspectScore]
    overall_score: int
    matched_count: int
    total_points: int
    max_points: int
    rating: RatingBand
    recommendation: str
    recommendation_local: str
    scored_on: date | None = None

    def aspect(self, key: str) -> AspectScore:
        """Return the aspect identified by ``key``."""

        for entry in self.aspects:
            if entry.key == key:
                return entry
        raise KeyError(key)

    @property
    def aspect_count(self) -> int:
        return len(self.aspects)

    def to_dict(self) -> dict[str, Any]:
        return {
            "overall_score": self.overall_score,
            "matched_count": self.matched_count,
            "aspect_count": self.aspect_count,
            "total_points": self.total_points,
            "max_points": self.max_points,
            "rating": {
                "key": self.rating.key,
                "label": self.rating.label,
                "label_local": self.rating.label_local,
            },
            "recommendation": self.recommendation,
            "recommendation_local": self.recommendation_local,
            "scored_on": self.scored_on.isoformat() if self.scored_on else None,
            "aspects": [entry.to_dict() for entry in self.aspects],
        }
