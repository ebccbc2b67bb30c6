"""Configuration helpers exposed at :mod:`porondam.config`."""

from __future__ import annotations

from .settings import (
    CURRENT_SETTINGS_SCHEMA_VERSION,
    CliCfg,
    ReportCfg,
    Settings,
    config_path,
    default_settings,
    ensure_default_config,
    get_config_home,
    load_settings,
    save_settings,
)

__all__ = [
    "CURRENT_SETTINGS_SCHEMA_VERSION",
    "Settings",
    "ReportCfg",
    "CliCfg",
    "config_path",
    "get_config_home",
    "default_settings",
    "load_settings",
    "save_settings",
    "ensure_default_config",
]
