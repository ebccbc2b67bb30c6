"""Static reference catalog of lunar mansions and zodiac signs."""

from __future__ import annotations

from .nakshatra import (
    GANAS,
    MANSION_COUNT,
    MANSIONS,
    NADIS,
    PLANETS,
    YONIS,
    LunarMansion,
    mansion,
    mansion_by_name,
)
from .rashi import SIGN_COUNT, SIGNS, ZodiacSign, sign, sign_by_name

__all__ = [
    "GANAS",
    "MANSION_COUNT",
    "MANSIONS",
    "NADIS",
    "PLANETS",
    "YONIS",
    "LunarMansion",
    "mansion",
    "mansion_by_name",
    "SIGN_COUNT",
    "SIGNS",
    "ZodiacSign",
    "sign",
    "sign_by_name",
]
