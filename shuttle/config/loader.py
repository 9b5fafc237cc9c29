# -*- coding: utf-8 -*-
"""Project settings from conf/settings.ini."""

from __future__ import annotations

import configparser
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from shuttle.constants import DEFAULT_PUBLIC_ENV_PREFIX

PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_SETTINGS_PATH = PROJECT_ROOT / "conf" / "settings.ini"


@dataclass(frozen=True)
class ShuttleSettings:
    dist_dir: Path = Path(".next")
    shuttle_dir: Path = Path(".next") / "cache" / "shuttle"
    build_config: Optional[Path] = None
    public_env_prefix: str = DEFAULT_PUBLIC_ENV_PREFIX
    source: Optional[Path] = None


class ConfigLoader:
    def __init__(self, path: Optional[Path] = None):
        self.config_path = Path(path) if path else DEFAULT_SETTINGS_PATH
        self.config = configparser.ConfigParser()
        if self.config_path.exists():
            self.config.read(self.config_path, encoding="utf-8")

    @property
    def found(self) -> bool:
        return self.config_path.exists()

    def get(self, section: str, key: str) -> Optional[str]:
        """Read a value and expand the user path (~)."""
        val = self.config.get(section, key, fallback=None)
        if val is None:
            return None
        val = val.strip()
        if not val:
            return None
        if "~" in val:
            return os.path.expanduser(val)
        return val

    def settings(self) -> ShuttleSettings:
        base = ShuttleSettings()
        dist_dir = self.get("PATHS", "DIST_DIR")
        shuttle_dir = self.get("PATHS", "SHUTTLE_DIR")
        build_config = self.get("PATHS", "BUILD_CONFIG")
        prefix = self.get("ENV", "PUBLIC_PREFIX")
        return ShuttleSettings(
            dist_dir=Path(dist_dir) if dist_dir else base.dist_dir,
            shuttle_dir=Path(shuttle_dir) if shuttle_dir else base.shuttle_dir,
            build_config=Path(build_config) if build_config else None,
            public_env_prefix=prefix or base.public_env_prefix,
            source=self.config_path if self.found else None,
        )


def load_settings(path: Optional[Path] = None) -> ShuttleSettings:
    """Load settings; an absent file (default path only) gives the defaults.

    An explicitly passed path must exist.
    """
    if path is not None and not Path(path).exists():
        raise FileNotFoundError(f"settings file not found: {path}")
    return ConfigLoader(path).settings()
