"""Bilingual reference text describing the principal Porondam aspects."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from .aggregate import RATING_BANDS
from .aspects import ASPECTS

__all__ = ["GuideEntry", "GUIDE_TITLE", "GUIDE_INTRO", "ASPECT_GUIDE", "guide_dict"]

GUIDE_TITLE = ("The 20 Porondam System", "විසි පොරොන්දම් ක්‍රමය")

GUIDE_INTRO = (
    "Porondam is the traditional Sri Lankan/South Indian system of horoscope "
    "matching for marriage compatibility. It examines 20 different aspects of "
    "compatibility between two individuals based on their birth charts.",
    "පොරොන්දම යනු විවාහ ගැලපීම සඳහා උපන් කේන්දර පදනම් කරගත් සාම්ප්‍රදායික "
    "ශ්‍රී ලාංකික/දකුණු ඉන්දියානු ක්‍රමයයි. එය දෙදෙනෙකුගේ උපන් කේන්දර මත "
    "පදනම්ව ගැලපීමේ විවිධ අංශ 20ක් පරීක්ෂා කරයි.",
)


@dataclass(frozen=True)
class GuideEntry:
    key: str
    name: str
    name_local: str
    description: str
    description_local: str
    max_points: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "name": self.name,
            "name_local": self.name_local,
            "description": self.description,
            "description_local": self.description_local,
            "max_points": self.max_points,
        }


_DESCRIPTIONS: dict[str, tuple[str, str]] = {
    "nakath": (
        "Checks compatibility of birth stars (Nakshatra). This is the most important "
        "aspect as it determines mental harmony and understanding between partners.",
        "උපන් නැකත් (නක්ෂත්‍ර) ගැලපීම පරීක්ෂා කරයි. මෙය වඩාත්ම වැදගත් අංශය වන "
        "අතර එය හවුල්කරුවන් අතර මානසික සමගිය හා අවබෝධය තීරණය කරයි.",
    ),
    "gana": (
        "Examines temperament compatibility. People are classified as Deva (divine), "
        "Manushya (human), or Rakshasa (demonic) based on their birth star.",
        "ස්වභාව ගැලපීම පරීක්ෂා කරයි. උපන් නැකත මත පදනම්ව මිනිසුන් දේව, මනුෂ්‍ය "
        "හෝ රාක්ෂස ලෙස වර්ගීකරණය කරයි.",
    ),
    "yoni": (
        "Assesses physical and intimate compatibility. Each nakshatra is associated "
        "with an animal, and compatibility is determined by the relationship between "
        "these animals.",
        "ශාරීරික හා සමීප ගැලපීම තක්සේරු කරයි. සෑම නැකතක්ම සතෙකු සමඟ සම්බන්ධ වන "
        "අතර, මෙම සතුන් අතර සම්බන්ධතාවය මගින් ගැලපීම තීරණය වේ.",
    ),
    "nadi": (
        "Evaluates health and genetic compatibility. Same Nadi (Vata, Pitta, or Kapha) "
        "is considered unfavorable as it may affect progeny.",
        "සෞඛ්‍ය හා ජාන ගැලපීම ඇගයීමට ලක් කරයි. එකම නාඩි (වාත, පිත්ත හෝ කඵ) "
        "අහිතකර ලෙස සැලකේ.",
    ),
    "rashi": (
        "Checks moon sign compatibility for emotional harmony and mutual understanding.",
        "චිත්තවේගීය සමගිය හා අන්‍යෝන්‍ය අවබෝධය සඳහා චන්ද්‍ර රාශි ගැලපීම පරීක්ෂා කරයි.",
    ),
    "rajju": (
        "Examines the physical bond through body parts classification. Same Rajju is "
        "considered inauspicious.",
        "ශරීර කොටස් වර්ගීකරණය හරහා ශාරීරික බැඳීම පරීක්ෂා කරයි. එකම රජ්ජු අශුභ "
        "ලෙස සැලකේ.",
    ),
    "vedha": (
        "Checks for obstructions between certain nakshatra pairs that are considered "
        "incompatible.",
        "නොගැලපෙන ලෙස සැලකෙන ඇතැම් නැකත් යුගල අතර බාධා පරීක්ෂා කරයි.",
    ),
    "mahendra": (
        "Indicates the welfare and health of children from the marriage.",
        "විවාහයෙන් ලැබෙන දරුවන්ගේ සුභසාධනය හා සෞඛ්‍යය පෙන්නුම් කරයි.",
    ),
}


def _build_guide() -> tuple[GuideEntry, ...]:
    by_key = {definition.key: definition for definition in ASPECTS}
    entries = []
    for key, (text, text_local) in _DESCRIPTIONS.items():
        definition = by_key[key]
        entries.append(
            GuideEntry(
                key=key,
                name=definition.name,
                name_local=definition.name_local,
                description=text,
                description_local=text_local,
                max_points=definition.max_points,
            )
        )
    return tuple(entries)


ASPECT_GUIDE: Sequence[GuideEntry] = _build_guide()


def guide_dict() -> dict[str, Any]:
    """Return the guide, including rating bands, as plain data."""

    return {
        "title": GUIDE_TITLE[0],
        "title_local": GUIDE_TITLE[1],
        "description": GUIDE_INTRO[0],
        "description_local": GUIDE_INTRO[1],
        "aspects": [entry.to_dict() for entry in ASPECT_GUIDE],
        "rating_bands": [
            {
                "key": band.key,
                "minimum": band.minimum,
                "label": band.label,
                "label_local": band.label_local,
            }
            for band in RATING_BANDS
        ],
    }
