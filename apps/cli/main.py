#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""Unified CLI dispatcher for the shuttle tools."""

from __future__ import annotations

import runpy
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from apps.cli.registry import get_tools  # noqa: E402

console = Console()


def _tool_path(tool: dict) -> Path:
    folder = tool.get("folder") or "apps/cli/commands"
    return PROJECT_ROOT / folder / str(tool.get("file"))


def _resolve_tool(alias: Optional[str]) -> Optional[Path]:
    key = str(alias or "").strip()
    if not key:
        return None
    for tool in get_tools():
        if tool.get("alias") == key or tool.get("file") == key:
            return _tool_path(tool)
    return None


def _print_tools(unknown: Optional[str] = None) -> None:
    if unknown:
        console.print(f"[yellow]Unknown tool: {unknown}[/yellow]")
    table = Table(title="Shuttle tools", box=None, header_style="bold cyan")
    table.add_column("Alias", style="cyan")
    table.add_column("Type", style="dim")
    table.add_column("Description")
    table.add_column("Usage", style="green")
    for tool in get_tools():
        table.add_row(tool["alias"], tool["type"], tool["desc"], tool["usage"])
    console.print(table)


def main(argv: Optional[List[str]] = None) -> int:
    argv = list(argv) if argv is not None else list(sys.argv[1:])
    alias = argv[0] if argv else None
    path = _resolve_tool(alias)
    if path is None:
        _print_tools(alias)
        return 0 if not alias else 2

    saved_argv = sys.argv
    sys.argv = [str(path)] + argv[1:]
    try:
        runpy.run_path(str(path), run_name="__main__")
    except SystemExit as e:
        code = e.code
        if code is None:
            return 0
        return code if isinstance(code, int) else 1
    finally:
        sys.argv = saved_argv
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
