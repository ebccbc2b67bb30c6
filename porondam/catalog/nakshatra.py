"""Reference records for the 27 lunar mansions (nakshatras).

Each mansion carries the attributes the Porondam aspects consult: the ruling
planet, the gana (temperament), the yoni (animal nature and its polarity) and
the nadi (constitutional humor). Sinhala names follow the spelling used on
traditional Sri Lankan horoscope charts.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from ..errors import UnknownNameError
from ._ids import require_index, name_key

__all__ = [
    "MANSION_COUNT",
    "PLANETS",
    "GANAS",
    "NADIS",
    "YONIS",
    "LunarMansion",
    "MANSIONS",
    "mansion",
    "mansion_by_name",
]

MANSION_COUNT = 27

PLANETS: Sequence[str] = (
    "Sun",
    "Moon",
    "Mars",
    "Mercury",
    "Jupiter",
    "Venus",
    "Saturn",
    "Rahu",
    "Ketu",
)

GANAS: Sequence[str] = ("Deva", "Manushya", "Rakshasa")

NADIS: Sequence[str] = ("Vata", "Pitta", "Kapha")

YONIS: Sequence[str] = (
    "Horse",
    "Elephant",
    "Sheep",
    "Serpent",
    "Dog",
    "Cat",
    "Rat",
    "Cow",
    "Buffalo",
    "Tiger",
    "Deer",
    "Monkey",
    "Mongoose",
    "Lion",
    "Goat",
)

# (name, sinhala, lord, gana, yoni, yoni polarity, nadi)
MANSION_DATA: Sequence[tuple[str, str, str, str, str, str, str]] = (
    ("Ashwini", "අස්විද", "Ketu", "Deva", "Horse", "Male", "Vata"),
    ("Bharani", "බෙරණ", "Venus", "Manushya", "Elephant", "Female", "Pitta"),
    ("Krittika", "කැති", "Sun", "Rakshasa", "Sheep", "Female", "Kapha"),
    ("Rohini", "රෙහෙණ", "Moon", "Manushya", "Serpent", "Male", "Kapha"),
    ("Mrigashira", "මුවසිරස", "Mars", "Deva", "Serpent", "Female", "Kapha"),
    ("Ardra", "අද", "Rahu", "Manushya", "Dog", "Female", "Vata"),
    ("Punarvasu", "පුනාවස", "Jupiter", "Deva", "Cat", "Male", "Vata"),
    ("Pushya", "පුස", "Saturn", "Deva", "Goat", "Male", "Pitta"),
    ("Ashlesha", "අස්ලිස", "Mercury", "Rakshasa", "Cat", "Female", "Kapha"),
    ("Magha", "මා", "Ketu", "Rakshasa", "Rat", "Male", "Kapha"),
    ("Purva Phalguni", "පුවපල්", "Venus", "Manushya", "Rat", "Female", "Pitta"),
    ("Uttara Phalguni", "උත්‍රපල්", "Sun", "Manushya", "Cow", "Male", "Vata"),
    ("Hasta", "හත", "Moon", "Deva", "Buffalo", "Female", "Vata"),
    ("Chitra", "සිත", "Mars", "Rakshasa", "Tiger", "Female", "Pitta"),
    ("Swati", "සා", "Rahu", "Deva", "Buffalo", "Male", "Kapha"),
    ("Vishakha", "විසා", "Jupiter", "Rakshasa", "Tiger", "Male", "Kapha"),
    ("Anuradha", "අනුර", "Saturn", "Deva", "Deer", "Female", "Pitta"),
    ("Jyeshtha", "දෙට", "Mercury", "Rakshasa", "Deer", "Male", "Vata"),
    ("Mula", "මුල", "Ketu", "Rakshasa", "Dog", "Male", "Vata"),
    ("Purva Ashadha", "පුවසල", "Venus", "Manushya", "Monkey", "Male", "Pitta"),
    ("Uttara Ashadha", "උත්‍රසල", "Sun", "Manushya", "Mongoose", "Male", "Kapha"),
    ("Shravana", "සවන", "Moon", "Deva", "Monkey", "Female", "Kapha"),
    ("Dhanishta", "දනිට", "Mars", "Rakshasa", "Lion", "Female", "Pitta"),
    ("Shatabhisha", "සියාවස", "Rahu", "Rakshasa", "Horse", "Female", "Vata"),
    ("Purva Bhadrapada", "පුවපුටුප", "Jupiter", "Manushya", "Lion", "Male", "Vata"),
    ("Uttara Bhadrapada", "උත්‍රපුටුප", "Saturn", "Manushya", "Cow", "Female", "Pitta"),
    ("Revati", "රේවති", "Mercury", "Deva", "Elephant", "Male", "Kapha"),
)


@dataclass(frozen=True)
class LunarMansion:
    """Metadata describing a lunar mansion."""

    id: int
    name: str
    name_local: str
    lord: str
    gana: str
    yoni: str
    yoni_gender: str
    nadi: str

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "name_local": self.name_local,
            "lord": self.lord,
            "gana": self.gana,
            "yoni": self.yoni,
            "yoni_gender": self.yoni_gender,
            "nadi": self.nadi,
        }


MANSIONS: Sequence[LunarMansion] = tuple(
    LunarMansion(
        id=idx + 1,
        name=name,
        name_local=local,
        lord=lord,
        gana=gana,
        yoni=yoni,
        yoni_gender=polarity,
        nadi=nadi,
    )
    for idx, (name, local, lord, gana, yoni, polarity, nadi) in enumerate(MANSION_DATA)
)

_ALIASES: Mapping[str, str] = {
    "aswini": "ashwini",
    "ashvini": "ashwini",
    "kritika": "krittika",
    "mrigasira": "mrigashira",
    "arudra": "ardra",
    "pushyami": "pushya",
    "aslesha": "ashlesha",
    "chithra": "chitra",
    "swathi": "swati",
    "visakha": "vishakha",
    "jyeshta": "jyeshtha",
    "moola": "mula",
    "purvashadha": "purvaashadha",
    "uttarashadha": "uttaraashadha",
    "sravana": "shravana",
    "dhanishtha": "dhanishta",
    "satabhisha": "shatabhisha",
    "purvabhadra": "purvabhadrapada",
    "uttarabhadra": "uttarabhadrapada",
    "revathi": "revati",
}

_BY_NAME: Mapping[str, LunarMansion] = MappingProxyType(
    {name_key(record.name): record for record in MANSIONS}
)


def mansion(mansion_id: int) -> LunarMansion:
    """Return the :class:`LunarMansion` for ``mansion_id`` (1-27)."""

    index = require_index("mansion_id", mansion_id, 1, MANSION_COUNT)
    return MANSIONS[index - 1]


def mansion_by_name(name: str) -> LunarMansion:
    """Return the mansion whose English name matches ``name``.

    Matching ignores case, spaces and punctuation, and accepts the common
    alternative transliterations found on printed charts.
    """

    key = name_key(name)
    key = _ALIASES.get(key, key)
    try:
        return _BY_NAME[key]
    except KeyError:
        raise UnknownNameError(f"Unknown mansion name {name!r}") from None
