# -*- coding: utf-8 -*-
"""Build-tool version helpers."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Dict


def _project_root() -> Path:
    return Path(__file__).resolve().parents[1]


@lru_cache(maxsize=1)
def _load_version_file() -> Dict[str, str]:
    path = _project_root() / "conf" / "version.json"
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    if not isinstance(data, dict):
        return {}
    val = data.get("tool_version")
    if isinstance(val, str) and val.strip():
        return {"tool_version": val.strip()}
    return {}


def tool_version() -> str:
    return _load_version_file().get("tool_version", "unknown")
