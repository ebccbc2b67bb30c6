from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml

from porondam.cli import build_parser, main

MATCH_FLAGS = [
    "match",
    "--a-mansion",
    "1",
    "--a-sign",
    "1",
    "--a-gender",
    "male",
    "--b-mansion",
    "2",
    "--b-sign",
    "1",
    "--b-gender",
    "female",
]


def _write_config(path: Path, **sections) -> Path:
    payload = {"schema_version": 2, **sections}
    path.write_text(yaml.safe_dump(payload), encoding="utf-8")
    return path


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_match_text_output(capsys):
    assert main(MATCH_FLAGS) == 0
    out = capsys.readouterr().out
    assert "Overall score: 78% (Excellent Match)" in out
    assert "Matched aspects: 15/20 (points 42/54)" in out
    assert "[+] Nadi Porondam: 8/8" in out
    assert "[-] Yoni Porondam: 2/4" in out
    assert "open communication is key" in out


def test_match_json_output(capsys):
    assert main([*MATCH_FLAGS, "--json", "--date", "2024-05-01"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["overall_score"] == 78
    assert payload["scored_on"] == "2024-05-01"
    assert len(payload["aspects"]) == 20


def test_match_accepts_catalog_names(capsys):
    argv = [
        "match",
        "--a-mansion",
        "Ashwini",
        "--a-sign",
        "Aries",
        "--a-gender",
        "male",
        "--b-mansion",
        "Bharani",
        "--b-sign",
        "mesha",
        "--b-gender",
        "female",
        "--json",
    ]
    assert main(argv) == 0
    assert json.loads(capsys.readouterr().out)["overall_score"] == 78


def test_match_from_longitudes(capsys):
    argv = [
        "match",
        "--a-longitude",
        "40",
        "--a-gender",
        "female",
        "--b-longitude",
        "200",
        "--b-gender",
        "male",
        "--json",
    ]
    assert main(argv) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["aspect_count"] == 20


def test_match_from_input_file(tmp_path: Path, capsys):
    request = tmp_path / "request.json"
    request.write_text(
        json.dumps(
            {
                "chart1": {"gender": "male", "nakshatra": 1, "rashi": 1},
                "chart2": {"gender": "female", "nakshatraName": "Shatabhisha", "rashi": 11},
                "date": "2023-12-31",
            }
        ),
        encoding="utf-8",
    )
    assert main(["match", "--input", str(request), "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["overall_score"] == 35
    assert payload["scored_on"] == "2023-12-31"
    assert payload["recommendation"].startswith("This match shows some challenges.")

    assert main(["match", "--input", str(request), "--json", "--date", "2024-01-02"]) == 0
    assert json.loads(capsys.readouterr().out)["scored_on"] == "2024-01-02"


def test_out_of_range_exit_status(capsys):
    argv = list(MATCH_FLAGS)
    argv[2] = "30"
    assert main(argv) == 2
    err = capsys.readouterr().err
    assert "chart_a.mansion_id" in err


def test_unknown_name_exit_status(capsys):
    argv = list(MATCH_FLAGS)
    argv[2] = "Sirius"
    assert main(argv) == 2
    assert "Unknown mansion name" in capsys.readouterr().err


def test_missing_gender_exit_status(capsys):
    argv = ["match", "--a-mansion", "1", "--a-sign", "1", "--b-mansion", "2", "--b-sign", "1", "--b-gender", "male"]
    assert main(argv) == 2
    assert capsys.readouterr().err.strip() == "error: chart_a is missing Gender"


def test_match_without_charts_lists_missing_fields(capsys):
    assert main(["match"]) == 2
    assert capsys.readouterr().err.splitlines() == [
        "error: chart_a is missing Nakshatra (birth star), Rashi (moon sign), Gender",
        "error: chart_b is missing Nakshatra (birth star), Rashi (moon sign), Gender",
    ]


def test_invalid_request_document(tmp_path: Path, capsys):
    request = tmp_path / "request.json"
    request.write_text(json.dumps({"chart1": {"gender": "male"}}), encoding="utf-8")
    assert main(["match", "--input", str(request)]) == 2
    assert "chart2" in capsys.readouterr().err

    request.write_text("{not json", encoding="utf-8")
    assert main(["match", "--input", str(request)]) == 2
    assert "not valid JSON" in capsys.readouterr().err


def test_configured_language_and_aspect_listing(tmp_path: Path, capsys):
    config = _write_config(
        tmp_path / "si.yaml", report={"language": "si", "include_aspects": False}
    )
    assert main([*MATCH_FLAGS, "--config", str(config)]) == 0
    out = capsys.readouterr().out
    assert "විශිෂ්ට ගැලපීම" in out
    assert "මෙය බොහෝ අංශවල ශක්තිමත් ගැලපීමක්" in out
    assert "This is an excellent match" not in out
    assert "[+]" not in out


def test_both_languages(tmp_path: Path, capsys):
    config = _write_config(tmp_path / "both.yaml", report={"language": "both"})
    assert main([*MATCH_FLAGS, "--config", str(config)]) == 0
    out = capsys.readouterr().out
    assert "Excellent Match / විශිෂ්ට ගැලපීම" in out
    assert "This is an excellent match" in out


def test_json_indent_setting(tmp_path: Path, capsys):
    config = _write_config(tmp_path / "compact.yaml", cli={"json_indent": 0})
    assert main(["catalog", "signs", "--json", "--config", str(config)]) == 0
    out = capsys.readouterr().out.strip()
    assert "\n" not in out
    assert json.loads(out)[0]["name"] == "Aries"


def test_catalog_text(capsys):
    assert main(["catalog", "mansions"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 27
    assert "Ashwini" in lines[0]
    assert main(["catalog", "signs"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 12
    assert "Mesha" in lines[0]


def test_catalog_json(capsys):
    assert main(["catalog", "mansions", "--json"]) == 0
    records = json.loads(capsys.readouterr().out)
    assert len(records) == 27
    assert records[23]["name"] == "Shatabhisha"
    assert records[23]["name_local"] == "සියාවස"


def test_convert(capsys):
    assert main(["convert", "45"]) == 0
    out = capsys.readouterr().out
    assert "4 Rohini" in out
    assert "pada 2" in out
    assert "2 Taurus / Vrishabha" in out

    assert main(["convert", "45", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["mansion"]["id"] == 4
    assert payload["pada"] == 2
    assert payload["sign"]["id"] == 2


def test_convert_rejects_non_finite(capsys):
    assert main(["convert", "nan"]) == 2
    assert "finite" in capsys.readouterr().err


def test_guide(capsys):
    assert main(["guide"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("The 20 Porondam System")
    assert "Nadi Porondam (8)" in out
    assert " 70+  Excellent Match" in out

    assert main(["guide", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert len(payload["aspects"]) == 8
    assert [band["key"] for band in payload["rating_bands"]] == [
        "excellent",
        "good",
        "moderate",
        "challenging",
    ]


def test_read_only_commands_leave_home_untouched(porondam_home: Path, capsys):
    assert main(["catalog", "signs"]) == 0
    capsys.readouterr()
    assert not (porondam_home / "config.yaml").exists()


def test_config_init_show_and_path(porondam_home: Path, capsys):
    target = porondam_home / "config.yaml"
    assert main(["config", "path"]) == 0
    assert capsys.readouterr().out.strip() == str(target)

    assert main(["config", "init"]) == 0
    assert capsys.readouterr().out.strip() == f"wrote {target}"
    assert yaml.safe_load(target.read_text(encoding="utf-8"))["report"]["language"] == "en"

    _write_config(target, report={"language": "si"})
    assert main(["config", "init"]) == 0
    assert "already exists" in capsys.readouterr().out
    assert main(["config", "show", "--json"]) == 0
    assert json.loads(capsys.readouterr().out)["report"]["language"] == "si"

    assert main(["config", "init", "--force"]) == 0
    capsys.readouterr()
    assert main(["config", "show"]) == 0
    assert yaml.safe_load(capsys.readouterr().out)["report"]["language"] == "en"


def test_config_init_custom_path(tmp_path: Path, capsys):
    target = tmp_path / "elsewhere" / "settings.yaml"
    assert main(["config", "init", "--config", str(target)]) == 0
    assert target.exists()
    capsys.readouterr()
