# -*- coding: utf-8 -*-
"""Snapshot writer: turns a finished build output into a shuttle.

Layout written under `shuttle_dir`::

    shuttle-manifest.json   {"toolVersion": ..., "globalHash": ...}
    server/                 filtered copy of {dist}/server, route manifest
                            pointing at .js instead of .html
    static/                 verbatim copy of {dist}/static
    manifests/              top-level manifests of {dist}

The shuttle is taken before env values are inlined and before static
generation. Any failure leaves `shuttle_dir` in an unspecified state; callers
should discard it and fall back to a full build. Two builds must never target
the same `shuttle_dir` at once.
"""

from __future__ import annotations

import json
import logging
import shutil
from pathlib import Path
from typing import Mapping, Optional

from shuttle.config.build_config import BuildConfig
from shuttle.constants import (
    MANIFESTS_DIR,
    ROUTE_MANIFEST,
    SERVER_DIR,
    SHUTTLE_MANIFEST,
    STATIC_DIR,
    TOP_LEVEL_MANIFESTS,
)
from shuttle.env import public_env_vars
from shuttle.fingerprint import ShuttleManifest, compute_fingerprint
from shuttle.normalizer import load_route_manifest, normalize_route_manifest, write_route_manifest
from shuttle.selector import keep_server_artifact
from shuttle.tree_copy import recursive_copy
from shuttle.version import tool_version as default_tool_version

logger = logging.getLogger(__name__)


def _reset_dir(path: Path) -> None:
    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        pass
    path.mkdir(parents=True)


def write_shuttle_manifest(shuttle_dir: Path, manifest: ShuttleManifest) -> Path:
    out = Path(shuttle_dir) / SHUTTLE_MANIFEST
    out.write_text(json.dumps(manifest, separators=(",", ":")), encoding="utf-8")
    return out


def normalize_route_manifest_file(path: Path) -> None:
    manifest = load_route_manifest(path)
    write_route_manifest(path, normalize_route_manifest(manifest))


def copy_top_level_manifests(dist_dir: Path, out_dir: Path) -> None:
    out_dir.mkdir(parents=True, exist_ok=True)
    for item in TOP_LEVEL_MANIFESTS:
        target = out_dir / item
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(dist_dir / item, target)


def store_shuttle(
    dist_dir: Path,
    shuttle_dir: Path,
    config: BuildConfig,
    *,
    public_env: Optional[Mapping[str, str]] = None,
    tool_version: Optional[str] = None,
) -> ShuttleManifest:
    dist_dir = Path(dist_dir)
    shuttle_dir = Path(shuttle_dir)

    _reset_dir(shuttle_dir)

    env = public_env_vars() if public_env is None else public_env
    if tool_version is None:
        tool_version = default_tool_version()
    manifest = compute_fingerprint(config, env, tool_version=tool_version)
    write_shuttle_manifest(shuttle_dir, manifest)
    logger.info("Shuttle fingerprint %s (tool %s)", manifest["globalHash"], manifest["toolVersion"])

    server_files = recursive_copy(
        dist_dir / SERVER_DIR,
        shuttle_dir / SERVER_DIR,
        keep=keep_server_artifact,
    )
    logger.info("Copied %d server files", server_files)

    # ensure manifest isn't pointing at .html as it's before static gen
    normalize_route_manifest_file(shuttle_dir / SERVER_DIR / ROUTE_MANIFEST)

    static_files = recursive_copy(dist_dir / STATIC_DIR, shuttle_dir / STATIC_DIR)
    logger.info("Copied %d static files", static_files)

    copy_top_level_manifests(dist_dir, shuttle_dir / MANIFESTS_DIR)
    logger.info("Shuttle stored at %s", shuttle_dir)
    return manifest
