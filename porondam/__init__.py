"""Traditional twenty-factor Porondam compatibility scoring."""

from __future__ import annotations

from .aggregate import RATING_BANDS, rating_for
from .aspects import ASPECT_KEYS, ASPECTS, TOTAL_MAX_POINTS, cyclic_count
from .catalog import MANSIONS, SIGNS, mansion, mansion_by_name, sign, sign_by_name
from .chart import ChartAttributes, Gender, missing_fields
from .errors import (
    ChartValidationError,
    IncompleteMatrixError,
    MissingAttributeError,
    OutOfRangeError,
    PorondamError,
    UnknownNameError,
)
from .longitude import (
    approximate_mansion_for_sign,
    approximate_sign_for_mansion,
    mansion_from_longitude,
    sign_from_longitude,
)
from .match import compute_match
from .results import AspectScore, MatchReport, RatingBand

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "compute_match",
    "ChartAttributes",
    "Gender",
    "missing_fields",
    "AspectScore",
    "MatchReport",
    "RatingBand",
    "RATING_BANDS",
    "rating_for",
    "ASPECTS",
    "ASPECT_KEYS",
    "TOTAL_MAX_POINTS",
    "cyclic_count",
    "MANSIONS",
    "SIGNS",
    "mansion",
    "mansion_by_name",
    "sign",
    "sign_by_name",
    "mansion_from_longitude",
    "sign_from_longitude",
    "approximate_sign_for_mansion",
    "approximate_mansion_for_sign",
    "PorondamError",
    "ChartValidationError",
    "OutOfRangeError",
    "MissingAttributeError",
    "UnknownNameError",
    "IncompleteMatrixError",
]
