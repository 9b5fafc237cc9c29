#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

PROJECT_ROOT = Path(__file__).resolve().parents[3]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from apps.cli.cli_common import (  # noqa: E402
    env_hint,
    file_info,
    human_mtime,
    human_size,
    read_json,
    resolve_settings,
)
from shuttle.constants import (  # noqa: E402
    MANIFESTS_DIR,
    ROUTE_MANIFEST,
    SERVER_DIR,
    SHUTTLE_MANIFEST,
    STATIC_DIR,
    TOP_LEVEL_MANIFESTS,
)
from shuttle.selector import keep_server_artifact  # noqa: E402
from shuttle.version import tool_version  # noqa: E402

console = Console()


def _status(level: str) -> str:
    if level == "PASS":
        return "[green]PASS[/green]"
    if level == "WARN":
        return "[yellow]WARN[/yellow]"
    return "[red]FAIL[/red]"


def _check_path_exists(path: Path, kind: str, fix: str = ""):
    if kind == "file":
        ok = path.is_file()
    elif kind == "dir":
        ok = path.is_dir()
    else:
        ok = path.exists()
    level = "PASS" if ok else "WARN"
    return ok, level, str(path), fix


def _check_shuttle(shuttle_dir: Path, table: Table) -> tuple:
    """Layout checks on a stored shuttle. Returns (fail, warn)."""
    fail = 0
    warn = 0

    manifest = read_json(shuttle_dir / SHUTTLE_MANIFEST)
    ok = isinstance(manifest, dict) and bool(manifest.get("globalHash")) and bool(manifest.get("toolVersion"))
    details = f"{manifest.get('toolVersion')} / {str(manifest.get('globalHash'))[:16]}" if ok else "missing or invalid"
    table.add_row(SHUTTLE_MANIFEST, _status("PASS" if ok else "FAIL"), details, "" if ok else "Rebuild the shuttle")
    if not ok:
        fail += 1

    for part in (SERVER_DIR, STATIC_DIR, MANIFESTS_DIR):
        ok, level, details, fix = _check_path_exists(shuttle_dir / part, "dir", "Rebuild the shuttle")
        level = "PASS" if ok else "FAIL"
        table.add_row(f"shuttle {part}/", _status(level), details, fix if not ok else "")
        if not ok:
            fail += 1

    server = shuttle_dir / SERVER_DIR
    if server.is_dir():
        leaked = [p for p in server.rglob("*") if p.is_file() and not keep_server_artifact(p.relative_to(server).as_posix())]
        level = "PASS" if not leaked else "FAIL"
        table.add_row("render-time outputs", _status(level), f"{len(leaked)} found", "Rebuild the shuttle" if leaked else "")
        if leaked:
            fail += 1

        routes = read_json(server / ROUTE_MANIFEST)
        if not isinstance(routes, dict):
            table.add_row(ROUTE_MANIFEST, _status("FAIL"), "missing or invalid", "Rebuild the shuttle")
            fail += 1
        else:
            html = [k for k, v in routes.items() if isinstance(v, str) and v.endswith(".html")]
            level = "PASS" if not html else "FAIL"
            table.add_row(ROUTE_MANIFEST, _status(level), f"{len(routes)} routes, {len(html)} .html", "Rebuild the shuttle" if html else "")
            if html:
                fail += 1

    for name in TOP_LEVEL_MANIFESTS:
        info = file_info(shuttle_dir / MANIFESTS_DIR / name)
        level = "PASS" if info["exists"] else "WARN"
        table.add_row(f"manifests/{name}", _status(level), human_size(info["size"]) if info["exists"] else "missing", "")
        if not info["exists"]:
            warn += 1
    return fail, warn


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Shuttle Doctor (settings + build output + shuttle layout)")
    p.add_argument("--settings", default=None, help="Alternate settings.ini")
    p.add_argument("--dist-dir", default=None, help="Build output root")
    p.add_argument("--shuttle-dir", default=None, help="Stored shuttle root")
    p.add_argument("--enforce", action="store_true", help="exit non-zero on failures (CI)")
    p.add_argument("--strict", action="store_true", help="treat WARN as FAIL (only when --enforce)")
    args = p.parse_args(argv)

    try:
        settings = resolve_settings(args.settings)
    except FileNotFoundError as e:
        console.print(f"[red]{e}[/red]")
        return 2
    dist_dir = Path(args.dist_dir) if args.dist_dir else settings.dist_dir
    shuttle_dir = Path(args.shuttle_dir) if args.shuttle_dir else settings.shuttle_dir

    env_name, env_kind = env_hint()
    console.print(
        Panel(
            f"[bold cyan]Shuttle Doctor[/bold cyan]\nEnv: {env_name} ({env_kind})\n"
            f"Tool: {tool_version()}",
            border_style="cyan",
        )
    )

    table = Table(title="Health Checks", box=None, show_header=True, header_style="bold cyan")
    table.add_column("Check", style="bold")
    table.add_column("Status", justify="center")
    table.add_column("Details", style="dim")
    table.add_column("Fix Hint", style="green")

    fail = 0
    warn = 0

    # 1) settings file (optional)
    source = settings.source
    table.add_row(
        "settings.ini",
        _status("PASS" if source else "WARN"),
        str(source) if source else "(defaults)",
        "" if source else "Optional: configure conf/settings.ini",
    )
    if not source:
        warn += 1

    # 2) build config (optional)
    if settings.build_config is not None:
        info = file_info(settings.build_config)
        level = "PASS" if info["exists"] else "WARN"
        details = f"{human_mtime(info['mtime'])} | {human_size(info['size'])}" if info["exists"] else f"{settings.build_config} missing"
        table.add_row("build config", _status(level), details, "" if info["exists"] else "Run a full build first")
        if not info["exists"]:
            warn += 1

    # 3) build output
    ok, level, details, fix = _check_path_exists(dist_dir, "dir", "Run a full build first")
    table.add_row("dist dir", _status(level), details, fix if not ok else "")
    if not ok:
        warn += 1
    else:
        for part in (SERVER_DIR, STATIC_DIR):
            ok, level, details, fix = _check_path_exists(dist_dir / part, "dir", "Build output is incomplete")
            table.add_row(f"dist {part}/", _status(level), details, fix if not ok else "")
            if not ok:
                warn += 1

    # 4) stored shuttle
    if shuttle_dir.is_dir():
        f, w = _check_shuttle(shuttle_dir, table)
        fail += f
        warn += w
    else:
        table.add_row("shuttle dir", _status("WARN"), f"{shuttle_dir} (none yet)", "shuttle build")
        warn += 1

    console.print(table)
    console.print(f"[dim]Summary: FAIL={fail}, WARN={warn}[/dim]")

    if not args.enforce:
        return 0
    if fail:
        return 2
    if args.strict and warn:
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
