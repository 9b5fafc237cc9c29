#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Store a shuttle (fingerprint + trimmed build output) after a full build."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from rich.console import Console
from rich.table import Table

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from apps.cli.cli_common import (  # noqa: E402
    human_size,
    resolve_build_config,
    resolve_settings,
    setup_logging,
)
from shuttle.config import ConfigError  # noqa: E402
from shuttle.constants import MANIFESTS_DIR, SERVER_DIR, SHUTTLE_MANIFEST, STATIC_DIR  # noqa: E402
from shuttle.env import public_env_vars  # noqa: E402
from shuttle.fingerprint import FingerprintError  # noqa: E402
from shuttle.normalizer import ManifestParseError  # noqa: E402
from shuttle.writer import store_shuttle  # noqa: E402

console = Console()


def _tree_totals(path: Path) -> Tuple[int, int]:
    """(file count, total bytes) below `path`; zeros when it is missing."""
    if path.is_file():
        return 1, path.stat().st_size
    if not path.is_dir():
        return 0, 0
    count = 0
    total = 0
    for fp in path.rglob("*"):
        if fp.is_file():
            count += 1
            total += fp.stat().st_size
    return count, total


def _summary(shuttle_dir: Path, manifest: dict) -> Table:
    table = Table(title="Shuttle", box=None, show_header=True, header_style="bold cyan")
    table.add_column("Part", style="bold")
    table.add_column("Files", justify="right")
    table.add_column("Size", justify="right")

    for part, label in (
        (SHUTTLE_MANIFEST, SHUTTLE_MANIFEST),
        (SERVER_DIR, f"{SERVER_DIR}/"),
        (STATIC_DIR, f"{STATIC_DIR}/"),
        (MANIFESTS_DIR, f"{MANIFESTS_DIR}/"),
    ):
        count, size = _tree_totals(shuttle_dir / part)
        table.add_row(label, str(count), human_size(size))
    table.caption = f"toolVersion={manifest['toolVersion']} globalHash={manifest['globalHash']}"
    return table


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Store a shuttle from a finished build output")
    p.add_argument("--dist-dir", default=None, help="Build output root (default: settings.ini DIST_DIR)")
    p.add_argument("--shuttle-dir", default=None, help="Shuttle destination (default: settings.ini SHUTTLE_DIR)")
    p.add_argument("--config", default=None, help="Resolved build config JSON")
    p.add_argument("--settings", default=None, help="Alternate settings.ini")
    p.add_argument("--tool-version", default=None, help="Override the build-tool version")
    p.add_argument("--verbose", action="store_true", help="Debug logging (per-file)")
    args = p.parse_args(argv)

    setup_logging(args.verbose, console=console)

    try:
        settings = resolve_settings(args.settings)
        config = resolve_build_config(args.config, settings)
        dist_dir = Path(args.dist_dir) if args.dist_dir else settings.dist_dir
        shuttle_dir = Path(args.shuttle_dir) if args.shuttle_dir else settings.shuttle_dir
        manifest = store_shuttle(
            dist_dir,
            shuttle_dir,
            config,
            public_env=public_env_vars(prefix=settings.public_env_prefix),
            tool_version=args.tool_version,
        )
    except (OSError, ConfigError, FingerprintError, ManifestParseError) as e:
        console.print(f"[red]Shuttle build failed: {e}[/red]")
        console.print("[dim]Discard the shuttle directory and run a full build.[/dim]")
        return 1

    console.print(_summary(shuttle_dir, manifest))
    console.print(f"✅ Shuttle written: {shuttle_dir}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
