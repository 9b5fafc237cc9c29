# -*- coding: utf-8 -*-
"""Configuration: resolved build config + project settings."""

from shuttle.config.build_config import (
    MISSING,
    TRACKED_CONFIG_ACCESSORS,
    BuildConfig,
    ConfigError,
    ExperimentalConfig,
    load_build_config,
    resolve_tracked,
)
from shuttle.config.loader import ShuttleSettings, load_settings

__all__ = [
    "MISSING",
    "TRACKED_CONFIG_ACCESSORS",
    "BuildConfig",
    "ConfigError",
    "ExperimentalConfig",
    "ShuttleSettings",
    "load_build_config",
    "load_settings",
    "resolve_tracked",
]
