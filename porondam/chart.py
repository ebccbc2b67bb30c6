"""Caller-facing chart attributes and their resolved scoring context."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .catalog import LunarMansion, ZodiacSign, mansion, sign
from .catalog._ids import require_index
from .errors import ChartValidationError, MissingAttributeError
from .longitude import mansion_from_longitude, normalize_longitude, sign_from_longitude

__all__ = [
    "Gender",
    "ChartAttributes",
    "ChartContext",
    "build_context",
    "assign_roles",
    "missing_fields",
]


class Gender(str, Enum):
    """Binary gender used for role assignment and the gender-pairing aspect."""

    MALE = "male"
    FEMALE = "female"


@dataclass(frozen=True)
class ChartAttributes:
    """Attributes of one birth chart as supplied by the caller.

    Either ``mansion_id``/``sign_id`` or ``longitude`` (the Moon's sidereal
    longitude in degrees) must be present. Explicit identifiers win over
    values derived from the longitude.
    """

    gender: Gender | str
    mansion_id: int | None = None
    sign_id: int | None = None
    longitude: float | None = None
    pada: int | None = None


@dataclass(frozen=True)
class ChartContext:
    """Chart attributes resolved against the reference catalog."""

    attributes: ChartAttributes
    gender: Gender
    mansion: LunarMansion
    sign: ZodiacSign
    pada: int | None = None

    @property
    def mansion_id(self) -> int:
        return self.mansion.id

    @property
    def sign_id(self) -> int:
        return self.sign.id


def _coerce_gender(value: Any) -> Gender:
    if isinstance(value, Gender):
        return value
    try:
        return Gender(str(value).strip().lower())
    except ValueError:
        raise ChartValidationError("gender", f"expected 'male' or 'female', got {value!r}") from None


def _resolve(chart: ChartAttributes) -> ChartContext:
    gender = _coerce_gender(chart.gender)
    position = None
    if chart.longitude is not None:
        try:
            normalize_longitude(chart.longitude)
        except (TypeError, ValueError):
            raise ChartValidationError(
                "longitude", f"expected a finite number of degrees, got {chart.longitude!r}"
            ) from None
        position = mansion_from_longitude(chart.longitude)

    if chart.mansion_id is not None:
        mansion_record = mansion(chart.mansion_id)
    elif position is not None:
        mansion_record = mansion(position.mansion_id)
    else:
        raise MissingAttributeError("mansion_id", "no mansion id or longitude supplied")

    if chart.sign_id is not None:
        sign_record = sign(chart.sign_id)
    elif chart.longitude is not None:
        sign_record = sign(sign_from_longitude(chart.longitude))
    else:
        raise MissingAttributeError("sign_id", "no sign id or longitude supplied")

    if chart.pada is not None:
        pada = require_index("pada", chart.pada, 1, 4)
    elif position is not None and position.mansion_id == mansion_record.id:
        pada = position.pada
    else:
        pada = None

    return ChartContext(
        attributes=chart,
        gender=gender,
        mansion=mansion_record,
        sign=sign_record,
        pada=pada,
    )


def build_context(chart: ChartAttributes, *, label: str | None = None) -> ChartContext:
    """Validate ``chart`` and resolve its catalog records.

    Validation failures are re-raised labelled with ``label`` so callers can
    tell which chart and which field was rejected.
    """

    try:
        return _resolve(chart)
    except ChartValidationError as exc:
        if label is None:
            raise
        raise exc.for_chart(label) from None


def assign_roles(chart_a: ChartContext, chart_b: ChartContext) -> tuple[ChartContext, ChartContext]:
    """Return ``(first, second)`` for the directional aspects.

    The female chart plays the first (bride) role and the male chart the
    second (groom) role. Two female charts keep argument order; two male
    charts are swapped.
    """

    first = chart_a if chart_a.gender is Gender.FEMALE else chart_b
    second = chart_a if chart_a.gender is Gender.MALE else chart_b
    return first, second


def missing_fields(chart: ChartAttributes) -> list[str]:
    """Return human readable names of the attributes ``chart`` still lacks."""

    missing: list[str] = []
    if chart.mansion_id is None and chart.longitude is None:
        missing.append("Nakshatra (birth star)")
    if chart.sign_id is None and chart.longitude is None:
        missing.append("Rashi (moon sign)")
    if chart.gender is None or str(chart.gender).strip() == "":
        missing.append("Gender")
    return missing
