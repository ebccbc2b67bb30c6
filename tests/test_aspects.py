from __future__ import annotations

import pytest

from porondam import aspects
from porondam.aspects import ASPECT_KEYS, ASPECTS, TOTAL_MAX_POINTS, cyclic_count, score_aspects
from porondam.chart import ChartAttributes, ChartContext, build_context


def _context(mansion_id: int, sign_id: int = 1, gender: str = "female") -> ChartContext:
    return build_context(ChartAttributes(gender=gender, mansion_id=mansion_id, sign_id=sign_id))


def _pair(m1: int, m2: int, s1: int = 1, s2: int = 1, g1: str = "female", g2: str = "male"):
    return _context(m1, s1, g1), _context(m2, s2, g2)


def test_registry_order_and_points():
    assert ASPECT_KEYS == (
        "nakath",
        "gana",
        "mahendra",
        "stree_deerga",
        "yoni",
        "rashi",
        "rashi_adhipathi",
        "vashya",
        "rajju",
        "vedha",
        "linga",
        "gotra",
        "varna",
        "vruksha",
        "ayusha",
        "pakshi",
        "pancha_maha_bhutha",
        "dina",
        "nadi",
        "graha",
    )
    points = {definition.key: definition.max_points for definition in ASPECTS}
    assert points["nadi"] == 8
    assert points["rashi"] == 7
    assert points["gana"] == 6
    assert points["graha"] == 5
    assert TOTAL_MAX_POINTS == 54


@pytest.mark.parametrize(
    "start, end, expected",
    [(1, 1, 1), (1, 2, 2), (2, 1, 27), (27, 1, 2), (1, 27, 27), (24, 1, 5)],
)
def test_cyclic_count(start, end, expected):
    assert cyclic_count(start, end) == expected


def test_cyclic_count_other_sizes():
    assert cyclic_count(12, 1, size=12) == 2


def test_score_aspects_returns_twenty_in_order():
    first, second = _pair(2, 1)
    scores = score_aspects(first, second)
    assert tuple(entry.key for entry in scores) == ASPECT_KEYS
    assert all(entry.name.endswith("Porondam") for entry in scores)


@pytest.mark.parametrize("second_id, favorable", [(3, True), (2, False), (10, True), (27, False)])
def test_nakath(second_id, favorable):
    result = aspects.nakath(*_pair(1, second_id))
    assert result.favorable is favorable
    assert result.score == (3 if favorable else 0)


@pytest.mark.parametrize("second_id, favorable", [(4, True), (7, True), (25, True), (5, False), (1, False)])
def test_mahendra(second_id, favorable):
    assert aspects.mahendra(*_pair(1, second_id)).favorable is favorable


def test_stree_deerga_threshold():
    assert aspects.stree_deerga(*_pair(1, 13)).score == 1
    assert aspects.stree_deerga(*_pair(1, 12)).score == 0


@pytest.mark.parametrize(
    "m1, m2, score, favorable, prefix",
    [
        (1, 5, 6, True, "Temperaments are in full accord"),
        (1, 2, 5, True, "Temperaments are well matched"),
        (1, 3, 1, False, "Different temperaments"),
        (3, 1, 0, False, "Opposed temperaments"),
    ],
)
def test_gana_tiers(m1, m2, score, favorable, prefix):
    result = aspects.gana(*_pair(m1, m2))
    assert result.score == score
    assert result.favorable is favorable
    assert result.description.startswith(prefix)
    assert result.description_local


@pytest.mark.parametrize(
    "m1, m2, score, favorable",
    [
        (1, 24, 4, True),
        (1, 17, 3, True),
        (1, 2, 2, False),
        (1, 12, 1, False),
        (1, 13, 0, False),
        (8, 8, 4, True),
        (1, 8, 2, False),
    ],
)
def test_yoni_scores(m1, m2, score, favorable):
    result = aspects.yoni(*_pair(m1, m2))
    assert result.score == score
    assert result.favorable is favorable


def test_yoni_texts_follow_score():
    assert aspects.yoni(*_pair(1, 24)).description.startswith("Same animal nature")
    assert aspects.yoni(*_pair(1, 17)).description == "Physical and intimate compatibility is favorable"
    assert aspects.yoni(*_pair(1, 13)).description.startswith("Animal natures are sworn enemies")


@pytest.mark.parametrize(
    "s1, s2, favorable",
    [(1, 1, True), (1, 6, True), (1, 7, False), (1, 11, False), (12, 1, True), (3, 12, True)],
)
def test_rashi(s1, s2, favorable):
    result = aspects.rashi(*_pair(1, 2, s1, s2))
    assert result.favorable is favorable
    assert result.score == (7 if favorable else 0)


@pytest.mark.parametrize(
    "s1, s2, adhipathi, graha",
    [(5, 1, 5, 5), (1, 1, 3, 3), (1, 8, 3, 3), (10, 5, 0, 1), (3, 4, 0, 1)],
)
def test_ruling_planet_aspects(s1, s2, adhipathi, graha):
    first, second = _pair(1, 2, s1, s2)
    lords = aspects.rashi_adhipathi(first, second)
    planets = aspects.graha(first, second)
    assert lords.score == adhipathi
    assert planets.score == graha
    assert lords.favorable is (adhipathi >= 3)
    assert planets.favorable is (graha >= 3)


def test_neutral_lords_have_their_own_text():
    first, second = _pair(1, 2, 1, 1)
    assert aspects.rashi_adhipathi(first, second).description.startswith("Ruling planets are neutral")
    assert aspects.graha(first, second).description.startswith("Planetary influences are neutral")


@pytest.mark.parametrize(
    "s1, s2, favorable",
    [(1, 2, True), (1, 3, True), (3, 1, True), (4, 12, True), (4, 8, False), (5, 1, False)],
)
def test_vashya(s1, s2, favorable):
    assert aspects.vashya(*_pair(1, 2, s1, s2)).favorable is favorable


def test_rajju_same_body_region():
    assert aspects.rajju(*_pair(1, 6)).favorable is False
    assert aspects.rajju(*_pair(1, 2)).favorable is True


def test_vedha_pairs():
    assert aspects.vedha(*_pair(1, 18)).score == 0
    assert aspects.vedha(*_pair(18, 1)).score == 0
    assert aspects.vedha(*_pair(1, 2)).score == 1


def test_linga_compares_genders():
    assert aspects.linga(*_pair(1, 2)).favorable is True
    assert aspects.linga(*_pair(1, 2, g2="female")).favorable is False


def test_gotra_and_vruksha_for_identical_mansions():
    first, second = _pair(9, 9)
    assert aspects.gotra(first, second).score == 0
    assert aspects.vruksha(first, second).score == 0


@pytest.mark.parametrize("s1, s2, favorable", [(4, 1, True), (1, 4, True), (4, 2, False), (2, 4, False), (3, 3, True)])
def test_varna(s1, s2, favorable):
    assert aspects.varna(*_pair(1, 2, s1, s2)).favorable is favorable


@pytest.mark.parametrize("m1, m2, favorable", [(1, 5, True), (5, 1, True), (1, 4, False), (10, 7, False)])
def test_vruksha(m1, m2, favorable):
    assert aspects.vruksha(*_pair(m1, m2)).favorable is favorable


@pytest.mark.parametrize("m1, m2, favorable", [(3, 5, True), (5, 5, True), (5, 3, False)])
def test_ayusha(m1, m2, favorable):
    assert aspects.ayusha(*_pair(m1, m2)).favorable is favorable


@pytest.mark.parametrize(
    "m1, m2, favorable",
    [(1, 6, True), (5, 10, True), (1, 2, True), (1, 3, False), (4, 5, False)],
)
def test_pakshi(m1, m2, favorable):
    assert aspects.pakshi(*_pair(m1, m2)).favorable is favorable


@pytest.mark.parametrize("second_id, favorable", [(2, False), (3, True), (9, True), (10, True), (11, False)])
def test_dina(second_id, favorable):
    result = aspects.dina(*_pair(1, second_id))
    assert result.favorable is favorable
    assert result.score == (3 if favorable else 0)


def test_nadi_and_five_elements_share_humor_rule():
    same = _pair(1, 24)
    different = _pair(1, 2)
    assert aspects.nadi(*same).score == 0
    assert aspects.nadi(*same).description.startswith("Same Nadi")
    assert aspects.pancha_maha_bhutha(*same).favorable is False
    assert aspects.nadi(*different).score == 8
    assert aspects.pancha_maha_bhutha(*different).favorable is True
