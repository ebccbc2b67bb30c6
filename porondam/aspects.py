"""The twenty Porondam aspects.

Every aspect is a pure function of two resolved charts, ``first`` (the bride)
and ``second`` (the groom), returning an :class:`~porondam.results.AspectScore`.
Binary aspects award either their full points or nothing; the matrix aspects
(gana, yoni, rashi adhipathi and graha) award graded points and select their
rationale by score tier.

Several rules (lineage, vitality, lifespan balance, totem bird, caste class,
body region) follow the simplified forms used by the Sinhala Porondam
tradition this engine reproduces; they are kept exactly as defined.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from .catalog import MANSION_COUNT
from .chart import ChartContext
from .matrices import (
    FRIENDSHIP_MATRIX,
    GANA_MATRIX,
    MANSION_RAJJU,
    SIGN_VARNA,
    SIGN_VASHYA,
    YONI_MATRIX,
    Relation,
    bird_for_mansion,
    is_vedha,
)
from .results import AspectScore

__all__ = [
    "AspectDefinition",
    "ASPECTS",
    "ASPECT_KEYS",
    "TOTAL_MAX_POINTS",
    "cyclic_count",
    "score_aspects",
]

Text = tuple[str, str]
AspectFn = Callable[[ChartContext, ChartContext], AspectScore]

NAKATH_COUNTS = frozenset({1, 3, 5, 7, 10, 12, 14, 16, 19, 21, 23, 25})
MAHENDRA_COUNTS = frozenset({4, 7, 10, 13, 16, 19, 22, 25})
STREE_DEERGA_MIN_COUNT = 13
RASHI_DISTANCES = frozenset({0, 1, 2, 3, 4, 5, 7, 9, 11})
VRUKSHA_MIN_GAP = 3
DINA_UNFAVORABLE_REMAINDERS = frozenset({2, 4, 6, 8})

ADHIPATHI_POINTS: Mapping[Relation, int] = MappingProxyType(
    {Relation.FRIEND: 5, Relation.NEUTRAL: 3, Relation.ENEMY: 0}
)
GRAHA_POINTS: Mapping[Relation, int] = MappingProxyType(
    {Relation.FRIEND: 5, Relation.NEUTRAL: 3, Relation.ENEMY: 1}
)


@dataclass(frozen=True)
class AspectDefinition:
    """Registry entry describing one aspect."""

    key: str
    name: str
    name_local: str
    max_points: int
    evaluate: AspectFn


_REGISTRY: list[AspectDefinition] = []


def cyclic_count(start: int, end: int, size: int = MANSION_COUNT) -> int:
    """Count forward from ``start`` to ``end`` on a cycle of ``size`` (1..size).

    Counting is inclusive, so a position counted to itself yields 1.
    """

    return ((end - start + size) % size) + 1


def _register(key: str, name: str, name_local: str, max_points: int, func: AspectFn) -> None:
    _REGISTRY.append(AspectDefinition(key, name, name_local, max_points, func))


def binary_aspect(
    key: str,
    name: str,
    name_local: str,
    max_points: int,
    *,
    favorable: Text,
    unfavorable: Text,
) -> Callable[[Callable[[ChartContext, ChartContext], bool]], AspectFn]:
    """Register a pass/fail aspect; the wrapped rule returns ``True`` when favorable."""

    def decorator(rule: Callable[[ChartContext, ChartContext], bool]) -> AspectFn:
        @functools.wraps(rule)
        def evaluate(first: ChartContext, second: ChartContext) -> AspectScore:
            matched = bool(rule(first, second))
            text, text_local = favorable if matched else unfavorable
            return AspectScore(
                key=key,
                name=name,
                name_local=name_local,
                max_points=max_points,
                score=max_points if matched else 0,
                favorable=matched,
                description=text,
                description_local=text_local,
            )

        _register(key, name, name_local, max_points, evaluate)
        return evaluate

    return decorator


def tiered_aspect(
    key: str,
    name: str,
    name_local: str,
    max_points: int,
    *,
    threshold: int,
    tiers: Mapping[int, Text],
) -> Callable[[Callable[[ChartContext, ChartContext], int]], AspectFn]:
    """Register a graded aspect; the wrapped rule returns the awarded points."""

    def decorator(rule: Callable[[ChartContext, ChartContext], int]) -> AspectFn:
        @functools.wraps(rule)
        def evaluate(first: ChartContext, second: ChartContext) -> AspectScore:
            points = int(rule(first, second))
            text, text_local = tiers[points]
            return AspectScore(
                key=key,
                name=name,
                name_local=name_local,
                max_points=max_points,
                score=points,
                favorable=points >= threshold,
                description=text,
                description_local=text_local,
            )

        _register(key, name, name_local, max_points, evaluate)
        return evaluate

    return decorator


@binary_aspect(
    "nakath",
    "Nakath Porondam",
    "නැකත් පොරොන්දම",
    3,
    favorable=(
        "Birth stars are compatible - indicates mental harmony and understanding",
        "උපන් නැකත් ගැලපේ - මානසික සමගිය හා අවබෝධය පෙන්නුම් කරයි",
    ),
    unfavorable=(
        "Birth stars show some tension - may require effort for understanding",
        "උපන් නැකත් යම් ආතතියක් පෙන්නුම් කරයි - අවබෝධය සඳහා උත්සාහය අවශ්‍ය විය හැක",
    ),
)
def nakath(first: ChartContext, second: ChartContext) -> bool:
    return cyclic_count(first.mansion_id, second.mansion_id) in NAKATH_COUNTS


@tiered_aspect(
    "gana",
    "Gana Porondam",
    "ගණ පොරොන්දම",
    6,
    threshold=5,
    tiers={
        6: (
            "Temperaments are in full accord - indicates harmony in daily life",
            "ස්වභාවයන් පූර්ණ ලෙස ගැලපේ - දෛනික ජීවිතයේ සමගිය පෙන්නුම් කරයි",
        ),
        5: (
            "Temperaments are well matched - indicates harmony in daily life",
            "ස්වභාවයන් හොඳින් ගැලපේ - දෛනික ජීවිතයේ සමගිය පෙන්නුම් කරයි",
        ),
        1: (
            "Different temperaments - may need adjustment in expectations",
            "විවිධ ස්වභාවයන් - අපේක්ෂාවන්හි සැකසුම් අවශ්‍ය විය හැක",
        ),
        0: (
            "Opposed temperaments - considerable adjustment in expectations is needed",
            "ප්‍රතිවිරුද්ධ ස්වභාවයන් - අපේක්ෂාවන්හි සැලකිය යුතු සැකසුම් අවශ්‍ය වේ",
        ),
    },
)
def gana(first: ChartContext, second: ChartContext) -> int:
    return GANA_MATRIX.lookup(first.mansion.gana, second.mansion.gana)


@binary_aspect(
    "mahendra",
    "Mahendra Porondam",
    "මහේන්ද්‍ර පොරොන්දම",
    1,
    favorable=(
        "Favorable for progeny - indicates healthy and intelligent children",
        "දරු සම්පත සඳහා හිතකර - නිරෝගී හා බුද්ධිමත් දරුවන් පෙන්නුම් කරයි",
    ),
    unfavorable=(
        "Neutral for progeny - children's welfare not specifically indicated",
        "දරු සම්පත සඳහා මධ්‍යස්ථ - දරුවන්ගේ සුභසාධනය විශේෂයෙන් පෙන්නුම් නොකරයි",
    ),
)
def mahendra(first: ChartContext, second: ChartContext) -> bool:
    return cyclic_count(first.mansion_id, second.mansion_id) in MAHENDRA_COUNTS


@binary_aspect(
    "stree_deerga",
    "Stree Deerga Porondam",
    "ස්ත්‍රී දීර්ඝ පොරොන්දම",
    1,
    favorable=(
        "Indicates long and prosperous married life for the wife",
        "භාර්යාවට දීර්ඝ හා සාර්ථක විවාහ ජීවිතයක් පෙන්නුම් කරයි",
    ),
    unfavorable=(
        "Wife's longevity aspect is neutral",
        "භාර්යාවගේ ආයු අංශය මධ්‍යස්ථ වේ",
    ),
)
def stree_deerga(first: ChartContext, second: ChartContext) -> bool:
    return cyclic_count(first.mansion_id, second.mansion_id) >= STREE_DEERGA_MIN_COUNT


@tiered_aspect(
    "yoni",
    "Yoni Porondam",
    "යෝනි පොරොන්දම",
    4,
    threshold=3,
    tiers={
        4: (
            "Same animal nature - physical and intimate compatibility is excellent",
            "එකම යෝනිය - ශාරීරික හා සමීප ගැලපීම විශිෂ්ට වේ",
        ),
        3: (
            "Physical and intimate compatibility is favorable",
            "ශාරීරික හා සමීප ගැලපීම හිතකර වේ",
        ),
        2: (
            "Physical compatibility needs attention and understanding",
            "ශාරීරික ගැලපීම සඳහා අවධානය හා අවබෝධය අවශ්‍ය වේ",
        ),
        1: (
            "Animal natures are unfriendly - physical compatibility needs patience and understanding",
            "යෝනි මිත්‍ර නොවේ - ශාරීරික ගැලපීම සඳහා ඉවසීම හා අවබෝධය අවශ්‍ය වේ",
        ),
        0: (
            "Animal natures are sworn enemies - physical compatibility is strained",
            "යෝනි දැඩි සතුරු වේ - ශාරීරික ගැලපීම දුර්වල වේ",
        ),
    },
)
def yoni(first: ChartContext, second: ChartContext) -> int:
    return YONI_MATRIX.lookup(first.mansion.yoni, second.mansion.yoni)


@binary_aspect(
    "rashi",
    "Rashi Porondam",
    "රාශි පොරොන්දම",
    7,
    favorable=(
        "Moon signs are compatible - indicates emotional harmony",
        "චන්ද්‍ර රාශි ගැලපේ - චිත්තවේගීය සමගිය පෙන්නුම් කරයි",
    ),
    unfavorable=(
        "Moon signs need balancing - emotional adjustment may be needed",
        "චන්ද්‍ර රාශි සමතුලිත කිරීම අවශ්‍ය - චිත්තවේගීය සැකසුම් අවශ්‍ය විය හැක",
    ),
)
def rashi(first: ChartContext, second: ChartContext) -> bool:
    return abs(first.sign_id - second.sign_id) in RASHI_DISTANCES


@tiered_aspect(
    "rashi_adhipathi",
    "Rashi Adhipathi Porondam",
    "රාශි අධිපති පොරොන්දම",
    5,
    threshold=3,
    tiers={
        5: (
            "Ruling planets are friendly - supports mutual understanding",
            "පාලක ග්‍රහයන් මිත්‍ර වේ - අන්‍යෝන්‍ය අවබෝධයට සහාය වේ",
        ),
        3: (
            "Ruling planets are neutral - mutual understanding grows with effort",
            "පාලක ග්‍රහයන් මධ්‍යස්ථ වේ - උත්සාහයෙන් අන්‍යෝන්‍ය අවබෝධය වර්ධනය වේ",
        ),
        0: (
            "Ruling planets have tension - may affect thought harmony",
            "පාලක ග්‍රහයන්ට ආතතියක් ඇත - සිතුවිලි සමගියට බලපෑ හැක",
        ),
    },
)
def rashi_adhipathi(first: ChartContext, second: ChartContext) -> int:
    return ADHIPATHI_POINTS[FRIENDSHIP_MATRIX.lookup(first.sign.lord, second.sign.lord)]


@binary_aspect(
    "vashya",
    "Vashya Porondam",
    "වශ්‍ය පොරොන්දම",
    2,
    favorable=(
        "Mutual attraction and influence is positive",
        "අන්‍යෝන්‍ය ආකර්ෂණය හා බලපෑම ධනාත්මක වේ",
    ),
    unfavorable=(
        "Attraction aspect is neutral",
        "ආකර්ෂණ අංශය මධ්‍යස්ථ වේ",
    ),
)
def vashya(first: ChartContext, second: ChartContext) -> bool:
    groups = {SIGN_VASHYA[first.sign_id], SIGN_VASHYA[second.sign_id]}
    return len(groups) == 1 or groups == {"Manava", "Chatushpada"}


@binary_aspect(
    "rajju",
    "Rajju Porondam",
    "රජ්ජු පොරොන්දම",
    1,
    favorable=(
        "Physical bond is favorable - indicates lasting relationship",
        "ශාරීරික බැඳීම හිතකර වේ - කල්පවත්නා සම්බන්ධතාවයක් පෙන්නුම් කරයි",
    ),
    unfavorable=(
        "Same Rajju - traditional caution advised for this aspect",
        "එකම රජ්ජු - මෙම අංශය සඳහා සාම්ප්‍රදායික අවධානය අවශ්‍ය වේ",
    ),
)
def rajju(first: ChartContext, second: ChartContext) -> bool:
    return MANSION_RAJJU[first.mansion_id] != MANSION_RAJJU[second.mansion_id]


@binary_aspect(
    "vedha",
    "Vedha Porondam",
    "වේධ පොරොන්දම",
    1,
    favorable=(
        "No obstruction between stars - relationship flows smoothly",
        "තාරකා අතර බාධාවක් නැත - සම්බන්ධතාවය සුමටව ගලා යයි",
    ),
    unfavorable=(
        "Vedha dosha present - may face obstacles in relationship",
        "වේධ දෝෂය පවතී - සම්බන්ධතාවයේ බාධා ඇති විය හැක",
    ),
)
def vedha(first: ChartContext, second: ChartContext) -> bool:
    return not is_vedha(first.mansion_id, second.mansion_id)


@binary_aspect(
    "linga",
    "Linga Porondam",
    "ලිංග පොරොන්දම",
    1,
    favorable=(
        "Gender compatibility is natural",
        "ස්ත්‍රී පුරුෂ ගැලපීම ස්වාභාවික වේ",
    ),
    unfavorable=(
        "Same gender - traditional matching not applicable",
        "එකම ස්ත්‍රී පුරුෂ භාවය - සාම්ප්‍රදායික ගැලපීම අදාළ නොවේ",
    ),
)
def linga(first: ChartContext, second: ChartContext) -> bool:
    return first.gender is not second.gender


@binary_aspect(
    "gotra",
    "Gotra Porondam",
    "ගෝත්‍ර පොරොන්දම",
    1,
    favorable=(
        "Different lineages - genetic compatibility favorable",
        "විවිධ පරම්පරා - ජාන ගැලපීම හිතකර වේ",
    ),
    unfavorable=(
        "Same nakshatra - verify family lineage separately",
        "එකම නැකත - පවුල් පරම්පරාව වෙන වෙනම සත්‍යාපනය කරන්න",
    ),
)
def gotra(first: ChartContext, second: ChartContext) -> bool:
    return first.mansion_id != second.mansion_id


@binary_aspect(
    "varna",
    "Varna Porondam",
    "වර්ණ පොරොන්දම",
    1,
    favorable=(
        "Social and spiritual compatibility is favorable",
        "සමාජීය හා ආධ්‍යාත්මික ගැලපීම හිතකර වේ",
    ),
    unfavorable=(
        "Different spiritual inclinations - mutual respect important",
        "විවිධ ආධ්‍යාත්මික නැඹුරුතා - අන්‍යෝන්‍ය ගෞරවය වැදගත් වේ",
    ),
)
def varna(first: ChartContext, second: ChartContext) -> bool:
    return abs(SIGN_VARNA[first.sign_id] - SIGN_VARNA[second.sign_id]) <= 1


@binary_aspect(
    "vruksha",
    "Vruksha Porondam",
    "වෘක්ෂ පොරොන්දම",
    1,
    favorable=(
        "Physical strength compatibility is good for progeny",
        "ශාරීරික ශක්ති ගැලපීම දරු සම්පත සඳහා හොඳයි",
    ),
    unfavorable=(
        "Physical vitality aspect is neutral",
        "ශාරීරික ශක්ති අංශය මධ්‍යස්ථ වේ",
    ),
)
def vruksha(first: ChartContext, second: ChartContext) -> bool:
    return abs(first.mansion_id - second.mansion_id) > VRUKSHA_MIN_GAP


@binary_aspect(
    "ayusha",
    "Ayusha Porondam",
    "ආයුෂ පොරොන්දම",
    1,
    favorable=(
        "Life expectancy compatibility is favorable",
        "ආයු ගැලපීම හිතකර වේ",
    ),
    unfavorable=(
        "Longevity aspect needs attention",
        "දීර්ඝායු අංශයට අවධානය අවශ්‍ය වේ",
    ),
)
def ayusha(first: ChartContext, second: ChartContext) -> bool:
    return second.mansion_id >= first.mansion_id


@binary_aspect(
    "pakshi",
    "Pakshi Porondam",
    "පක්ෂි පොරොන්දම",
    1,
    favorable=(
        "Lucky bird signs are compatible",
        "වාසනාවන්ත පක්ෂි ලකුණු ගැලපේ",
    ),
    unfavorable=(
        "Bird signs are different - minor aspect",
        "පක්ෂි ලකුණු වෙනස් - සුළු අංශයකි",
    ),
)
def pakshi(first: ChartContext, second: ChartContext) -> bool:
    if bird_for_mansion(first.mansion_id) == bird_for_mansion(second.mansion_id):
        return True
    return abs(first.mansion_id % 5 - second.mansion_id % 5) <= 1


@binary_aspect(
    "pancha_maha_bhutha",
    "Pancha Maha Bhutha Porondam",
    "පංච මහා භූත පොරොන්දම",
    1,
    favorable=(
        "Five elements are balanced between partners",
        "පංච මහා භූත දෙපාර්ශ්වය අතර සමතුලිත වේ",
    ),
    unfavorable=(
        "Same elemental constitution - health awareness advised",
        "එකම මූලද්‍රව්‍ය ස්වභාවය - සෞඛ්‍ය දැනුවත්භාවය අවශ්‍ය වේ",
    ),
)
def pancha_maha_bhutha(first: ChartContext, second: ChartContext) -> bool:
    return first.mansion.nadi != second.mansion.nadi


@binary_aspect(
    "dina",
    "Dina Porondam",
    "දින පොරොන්දම",
    3,
    favorable=(
        "Daily life compatibility is favorable",
        "දෛනික ජීවිත ගැලපීම හිතකර වේ",
    ),
    unfavorable=(
        "Some daily friction possible - patience helps",
        "යම් දෛනික ගැටුම් ඇති විය හැක - ඉවසීම උපකාරී වේ",
    ),
)
def dina(first: ChartContext, second: ChartContext) -> bool:
    remainder = cyclic_count(first.mansion_id, second.mansion_id) % 9
    return remainder not in DINA_UNFAVORABLE_REMAINDERS


@binary_aspect(
    "nadi",
    "Nadi Porondam",
    "නාඩි පොරොන්දම",
    8,
    favorable=(
        "Health and genetic compatibility is excellent",
        "සෞඛ්‍ය හා ජාන ගැලපීම විශිෂ්ට වේ",
    ),
    unfavorable=(
        "Same Nadi (Nadi Dosha) - health precautions advised",
        "එකම නාඩි (නාඩි දෝෂය) - සෞඛ්‍ය පූර්වාරක්ෂාව අවශ්‍ය වේ",
    ),
)
def nadi(first: ChartContext, second: ChartContext) -> bool:
    return first.mansion.nadi != second.mansion.nadi


@tiered_aspect(
    "graha",
    "Graha Porondam",
    "ග්‍රහ පොරොන්දම",
    5,
    threshold=3,
    tiers={
        5: (
            "Planetary influences are harmonious",
            "ග්‍රහ බලපෑම් සුසංයෝගී වේ",
        ),
        3: (
            "Planetary influences are neutral - harmony comes with understanding",
            "ග්‍රහ බලපෑම් මධ්‍යස්ථ වේ - අවබෝධයෙන් සමගිය ඇති වේ",
        ),
        1: (
            "Planetary influences need balancing",
            "ග්‍රහ බලපෑම් සමතුලිත කිරීම අවශ්‍ය වේ",
        ),
    },
)
def graha(first: ChartContext, second: ChartContext) -> int:
    return GRAHA_POINTS[FRIENDSHIP_MATRIX.lookup(first.sign.lord, second.sign.lord)]


ASPECTS: Sequence[AspectDefinition] = tuple(_REGISTRY)
ASPECT_KEYS: Sequence[str] = tuple(definition.key for definition in ASPECTS)
TOTAL_MAX_POINTS: int = sum(definition.max_points for definition in ASPECTS)


def score_aspects(first: ChartContext, second: ChartContext) -> tuple[AspectScore, ...]:
    """Evaluate all twenty aspects in their fixed order."""

    return tuple(definition.evaluate(first, second) for definition in ASPECTS)
