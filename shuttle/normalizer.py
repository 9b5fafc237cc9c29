# -*- coding: utf-8 -*-
"""Route manifest normalization.

The shuttle is taken before static generation, so a route recorded as
rendered HTML must point back at its executable module.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping


class ManifestParseError(ValueError):
    pass


def normalize_route_manifest(manifest: Mapping[str, str]) -> Dict[str, str]:
    out: Dict[str, str] = {}
    for route, output in manifest.items():
        out[route] = output[: -len(".html")] + ".js" if output.endswith(".html") else output
    return out


def load_route_manifest(path: Path) -> Dict[str, str]:
    p = Path(path)
    text = p.read_text(encoding="utf-8")
    try:
        doc: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestParseError(f"invalid route manifest {p}: {exc}") from exc
    if not isinstance(doc, dict):
        raise ManifestParseError(f"route manifest {p} is not an object")
    for route, output in doc.items():
        if not isinstance(output, str):
            raise ManifestParseError(f"route manifest {p}: {route!r} maps to {type(output).__name__}")
    return doc


def write_route_manifest(path: Path, manifest: Mapping[str, str]) -> None:
    Path(path).write_text(json.dumps(manifest, separators=(",", ":"), ensure_ascii=False), encoding="utf-8")
