"""Convert lunar longitudes into discrete mansion, pada and sign indices."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Literal

from .catalog import MANSION_COUNT, SIGN_COUNT
from .catalog._ids import require_index

__all__ = [
    "MANSION_ARC_DEGREES",
    "PADA_ARC_DEGREES",
    "SIGN_ARC_DEGREES",
    "MansionPosition",
    "normalize_longitude",
    "mansion_from_longitude",
    "sign_from_longitude",
    "approximate_sign_for_mansion",
    "approximate_mansion_for_sign",
]

PADAS_PER_MANSION = 4
MANSION_ARC_DEGREES = 360.0 / MANSION_COUNT
PADA_ARC_DEGREES = MANSION_ARC_DEGREES / PADAS_PER_MANSION
SIGN_ARC_DEGREES = 360.0 / SIGN_COUNT

MansionSlot = Literal["start", "middle", "end"]


@dataclass(frozen=True)
class MansionPosition:
    """Placement of a longitude within a mansion and pada."""

    mansion_id: int
    pada: int
    degree_in_pada: float
    longitude: float


def normalize_longitude(degrees: float) -> float:
    """Return ``degrees`` wrapped to the ``[0, 360)`` interval."""

    value = float(degrees)
    if not math.isfinite(value):
        raise ValueError(f"longitude must be finite, got {degrees!r}")
    lon = value % 360.0
    # tiny negative inputs round up to exactly 360.0
    return 0.0 if lon >= 360.0 else lon


def _span_index(lon: float, divisions: int) -> int:
    # multiply before dividing so boundaries such as 40.0 land on their own span
    index = int((lon * divisions) // 360.0)
    return min(max(index, 0), divisions - 1)


def mansion_from_longitude(degrees: float) -> MansionPosition:
    """Return the mansion (1-27) and pada (1-4) containing ``degrees``.

    A longitude lying exactly on a boundary belongs to the mansion or pada
    that starts there.
    """

    lon = normalize_longitude(degrees)
    mansion_idx = _span_index(lon, MANSION_COUNT)
    quarter = _span_index(lon, MANSION_COUNT * PADAS_PER_MANSION)
    pada_idx = min(max(quarter - mansion_idx * PADAS_PER_MANSION, 0), PADAS_PER_MANSION - 1)
    start = (mansion_idx * PADAS_PER_MANSION + pada_idx) * PADA_ARC_DEGREES
    return MansionPosition(
        mansion_id=mansion_idx + 1,
        pada=pada_idx + 1,
        degree_in_pada=max(0.0, lon - start),
        longitude=lon,
    )


def sign_from_longitude(degrees: float) -> int:
    """Return the sign (1-12) containing ``degrees``."""

    return _span_index(normalize_longitude(degrees), SIGN_COUNT) + 1


def approximate_sign_for_mansion(mansion_id: int) -> int:
    """Return the sign that holds most of ``mansion_id`` when only the star is known."""

    index = require_index("mansion_id", mansion_id, 1, MANSION_COUNT)
    return math.ceil(index * SIGN_COUNT / MANSION_COUNT)


def approximate_mansion_for_sign(sign_id: int, position: MansionSlot = "middle") -> int:
    """Return a representative mansion for ``sign_id`` when only the sign is known.

    Each sign spans two and a quarter mansions; ``position`` selects the
    first, second or last of them.
    """

    index = require_index("sign_id", sign_id, 1, SIGN_COUNT)
    start = math.floor((index - 1) * 2.25) + 1
    if position == "start":
        return start
    if position == "end":
        return min(start + 2, MANSION_COUNT)
    if position == "middle":
        return start + 1
    raise ValueError(f"position must be 'start', 'middle' or 'end', got {position!r}")
