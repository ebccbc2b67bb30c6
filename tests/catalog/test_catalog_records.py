from __future__ import annotations

import pytest

from porondam.catalog import (
    GANAS,
    MANSION_COUNT,
    MANSIONS,
    NADIS,
    PLANETS,
    SIGN_COUNT,
    SIGNS,
    YONIS,
    mansion,
    mansion_by_name,
    sign,
    sign_by_name,
)
from porondam.errors import ChartValidationError, OutOfRangeError, UnknownNameError


def test_catalog_sizes_and_ids_are_contiguous():
    assert len(MANSIONS) == MANSION_COUNT == 27
    assert len(SIGNS) == SIGN_COUNT == 12
    assert [record.id for record in MANSIONS] == list(range(1, 28))
    assert [record.id for record in SIGNS] == list(range(1, 13))


def test_mansion_attributes_use_known_classes():
    for record in MANSIONS:
        assert record.lord in PLANETS
        assert record.gana in GANAS
        assert record.nadi in NADIS
        assert record.yoni in YONIS
        assert record.yoni_gender in {"Male", "Female"}
        assert record.name_local


def test_reference_mansions():
    shatabhisha = mansion(24)
    assert shatabhisha.name == "Shatabhisha"
    assert shatabhisha.name_local == "සියාවස"
    assert (shatabhisha.lord, shatabhisha.gana, shatabhisha.yoni, shatabhisha.nadi) == (
        "Rahu",
        "Rakshasa",
        "Horse",
        "Vata",
    )
    assert mansion(8).yoni == "Goat"
    assert mansion(27).name == "Revati"


def test_reference_signs():
    assert sign(1).name == "Aries"
    assert sign(1).sanskrit == "Mesha"
    assert sign(1).lord == "Mars"
    assert sign(11).lord == "Saturn"
    assert sign(12).name_local == "මීන"


@pytest.mark.parametrize("value", [0, 28, -1])
def test_mansion_out_of_range(value):
    with pytest.raises(OutOfRangeError) as excinfo:
        mansion(value)
    assert excinfo.value.field == "mansion_id"
    assert excinfo.value.lower == 1
    assert excinfo.value.upper == 27


@pytest.mark.parametrize("value", [0, 13])
def test_sign_out_of_range(value):
    with pytest.raises(OutOfRangeError):
        sign(value)


@pytest.mark.parametrize("value", [True, 2.0, "3", None])
def test_non_integer_ids_rejected(value):
    with pytest.raises(ChartValidationError):
        mansion(value)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("Rohini", 4),
        ("rohini", 4),
        ("Purva Phalguni", 11),
        ("purva-phalguni", 11),
        ("Aswini", 1),
        ("Moola", 19),
        ("Satabhisha", 24),
    ],
)
def test_mansion_by_name(name, expected):
    assert mansion_by_name(name).id == expected


@pytest.mark.parametrize("name, expected", [("Aries", 1), ("mesha", 1), ("Kumbha", 11), ("PISCES", 12)])
def test_sign_by_name(name, expected):
    assert sign_by_name(name).id == expected


def test_unknown_names_raise_key_error():
    with pytest.raises(UnknownNameError) as excinfo:
        mansion_by_name("Polaris")
    assert isinstance(excinfo.value, KeyError)
    assert "Polaris" in str(excinfo.value)
    with pytest.raises(UnknownNameError):
        sign_by_name("Ophiuchus")


def test_records_serialize():
    payload = mansion(1).to_dict()
    assert payload["name"] == "Ashwini"
    assert payload["nadi"] == "Vata"
    assert sign(5).to_dict() == {
        "id": 5,
        "name": "Leo",
        "sanskrit": "Simha",
        "name_local": "සිංහ",
        "lord": "Sun",
    }
