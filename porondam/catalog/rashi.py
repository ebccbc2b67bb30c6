"""Reference records for the twelve zodiac signs (rashis)."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from ..errors import UnknownNameError
from ._ids import name_key, require_index

__all__ = ["SIGN_COUNT", "ZodiacSign", "SIGNS", "sign", "sign_by_name"]

SIGN_COUNT = 12

# (sanskrit, sinhala, english, lord)
SIGN_DATA: Sequence[tuple[str, str, str, str]] = (
    ("Mesha", "මේෂ", "Aries", "Mars"),
    ("Vrishabha", "වෘෂභ", "Taurus", "Venus"),
    ("Mithuna", "මිථුන", "Gemini", "Mercury"),
    ("Karka", "කටක", "Cancer", "Moon"),
    ("Simha", "සිංහ", "Leo", "Sun"),
    ("Kanya", "කන්‍යා", "Virgo", "Mercury"),
    ("Tula", "තුලා", "Libra", "Venus"),
    ("Vrishchika", "වෘශ්චික", "Scorpio", "Mars"),
    ("Dhanus", "ධනු", "Sagittarius", "Jupiter"),
    ("Makara", "මකර", "Capricorn", "Saturn"),
    ("Kumbha", "කුම්භ", "Aquarius", "Saturn"),
    ("Meena", "මීන", "Pisces", "Jupiter"),
)


@dataclass(frozen=True)
class ZodiacSign:
    """Metadata describing a zodiac sign."""

    id: int
    name: str
    sanskrit: str
    name_local: str
    lord: str

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "sanskrit": self.sanskrit,
            "name_local": self.name_local,
            "lord": self.lord,
        }


SIGNS: Sequence[ZodiacSign] = tuple(
    ZodiacSign(id=idx + 1, name=english, sanskrit=sanskrit, name_local=local, lord=lord)
    for idx, (sanskrit, local, english, lord) in enumerate(SIGN_DATA)
)

_BY_NAME: Mapping[str, ZodiacSign] = MappingProxyType(
    {
        **{name_key(record.sanskrit): record for record in SIGNS},
        **{name_key(record.name): record for record in SIGNS},
    }
)


def sign(sign_id: int) -> ZodiacSign:
    """Return the :class:`ZodiacSign` for ``sign_id`` (1-12)."""

    index = require_index("sign_id", sign_id, 1, SIGN_COUNT)
    return SIGNS[index - 1]


def sign_by_name(name: str) -> ZodiacSign:
    """Return the sign matching an English or Sanskrit ``name``."""

    try:
        return _BY_NAME[name_key(name)]
    except KeyError:
        raise UnknownNameError(f"Unknown sign name {name!r}") from None
