"""Pytest configuration for Porondam."""

from __future__ import annotations

from pathlib import Path

import pytest

from porondam.chart import ChartAttributes


@pytest.fixture(autouse=True)
def porondam_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep settings files out of the real home directory."""

    home = tmp_path / "porondam-home"
    monkeypatch.setenv("PORONDAM_HOME", str(home))
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    return home


@pytest.fixture()
def groom() -> ChartAttributes:
    """Ashwini in Aries."""

    return ChartAttributes(gender="male", mansion_id=1, sign_id=1)


@pytest.fixture()
def bride() -> ChartAttributes:
    """Bharani in Aries."""

    return ChartAttributes(gender="female", mansion_id=2, sign_id=1)
