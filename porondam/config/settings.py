"""Configuration models and helpers for Porondam settings."""

from __future__ import annotations

import logging
import os
from copy import deepcopy
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

LOG = logging.getLogger(__name__)

CURRENT_SETTINGS_SCHEMA_VERSION = 2
CONFIG_FILENAME = "config.yaml"

# -------------------- Settings Schema --------------------


class ReportCfg(BaseModel):
    """How match reports are rendered by the command line."""

    language: Literal["en", "si", "both"] = "en"
    include_aspects: bool = True


class CliCfg(BaseModel):
    """Command line output preferences."""

    json_indent: int = 2
    log_level: Optional[str] = None

    @field_validator("json_indent", mode="before")
    @classmethod
    def _cap_json_indent(cls, value: object) -> int:
        return max(0, min(8, int(value)))  # type: ignore[arg-type]


class Settings(BaseModel):
    """Top-level settings model persisted on disk."""

    schema_version: int = Field(
        default=CURRENT_SETTINGS_SCHEMA_VERSION,
        ge=1,
        description="Version marker for persisted configuration payloads.",
    )
    report: ReportCfg = Field(default_factory=ReportCfg)
    cli: CliCfg = Field(default_factory=CliCfg)


# -------------------- Settings File --------------------


def get_config_home() -> Path:
    """Return the directory holding ``config.yaml`` (``PORONDAM_HOME`` or ``~/.porondam``)."""

    return Path(os.environ.get("PORONDAM_HOME", str(Path.home() / ".porondam")))


def config_path() -> Path:
    """Return the settings file path. Nothing is created on disk."""

    return get_config_home() / CONFIG_FILENAME


def default_settings() -> Settings:
    return Settings()


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    """Write ``settings`` as YAML, keeping Sinhala text unescaped."""

    target = Path(path) if path else config_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(settings.model_dump(), handle, sort_keys=False, allow_unicode=True)
    return target


def _payload_version(payload: dict[str, object]) -> int:
    """Version stamped on a stored payload; unversioned files are v1."""

    raw = payload.get("schema_version")
    if isinstance(raw, bool) or not isinstance(raw, (int, str)):
        return 1
    try:
        return max(1, int(raw))
    except ValueError:
        return 1


def _upgrade_settings_payload(
    data: dict[str, object], *, schema_version: int
) -> tuple[dict[str, object], bool]:
    """Apply upgrades required for older settings payloads."""

    upgraded = deepcopy(data)
    version = max(1, schema_version)
    changed = False

    if version < 2:
        # v1 kept the report language at the top level
        language = upgraded.pop("language", None)
        if language is not None:
            report = upgraded.get("report")
            if not isinstance(report, dict):
                report = {}
            report.setdefault("language", language)
            upgraded["report"] = report
        version = 2
        changed = True

    if upgraded.get("schema_version") != version:
        upgraded["schema_version"] = version
        changed = True

    return upgraded, changed


def _read_payload(path: Path) -> dict[str, object]:
    with path.open("r", encoding="utf-8") as handle:
        raw = yaml.safe_load(handle)
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        LOG.warning("ignoring malformed settings file %s", path)
        return {}
    return raw


def load_settings(path: Optional[Path] = None) -> Settings:
    """Return the settings stored at ``path`` (default :func:`config_path`).

    A missing file yields defaults without touching the disk; use
    :func:`ensure_default_config` to create one. Files written by an older
    schema are upgraded and written back.
    """

    source = Path(path) if path else config_path()
    if not source.exists():
        LOG.debug("no settings file at %s; using defaults", source)
        return default_settings()
    payload = _read_payload(source)
    data, upgraded = _upgrade_settings_payload(payload, schema_version=_payload_version(payload))
    settings = Settings.model_validate(data)
    if upgraded and payload:
        LOG.info("upgraded settings %s to schema v%d", source, settings.schema_version)
        save_settings(settings, source)
    return settings


def ensure_default_config(path: Optional[Path] = None, *, overwrite: bool = False) -> Path:
    """Write a default settings file unless one exists (or ``overwrite`` is set)."""

    target = Path(path) if path else config_path()
    if overwrite or not target.exists():
        save_settings(default_settings(), target)
        LOG.info("wrote default settings to %s", target)
    return target
