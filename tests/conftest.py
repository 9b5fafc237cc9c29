# -*- coding: utf-8 -*-
from __future__ import annotations

import json
from pathlib import Path

import pytest

from shuttle.config import BuildConfig
from shuttle.constants import ROUTE_MANIFEST, TOP_LEVEL_MANIFESTS


def _write(path: Path, content) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def dist_dir(tmp_path: Path) -> Path:
    """A finished build output with the layout the shuttle expects."""
    dist = tmp_path / "dist"
    server = dist / "server"
    _write(server / ROUTE_MANIFEST, json.dumps({"/x": "pages/x.html"}))
    _write(server / "foo.meta", '{"status":200}')
    _write(server / "foo.js", "module.exports = 1;\n")
    _write(server / "pages" / "x.js", "export default function X() {}\n")
    _write(server / "pages" / "x.html", "<html></html>")
    _write(server / "app" / "page.rsc", "0:[]")
    _write(dist / "static" / "bar.png", b"\x89PNG\r\n\x1a\n\x00\x01")
    _write(dist / "static" / "chunks" / "main.js", "console.log(1)")
    for i, name in enumerate(TOP_LEVEL_MANIFESTS):
        _write(dist / name, json.dumps({"name": name, "n": i}))
    return dist


@pytest.fixture
def base_config() -> BuildConfig:
    return BuildConfig.from_dict(
        {
            "basePath": "",
            "env": {},
            "i18n": None,
            "images": {"domains": [], "unoptimized": False},
            "productionBrowserSourceMaps": False,
            "webpack": None,
            "sassOptions": {},
            "trailingSlash": False,
            "experimental": {"flyingShuttle": True, "ppr": False, "reactCompiler": False},
            "distDir": ".next",
            "poweredByHeader": True,
        }
    )
