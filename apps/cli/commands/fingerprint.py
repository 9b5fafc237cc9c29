#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

PROJECT_ROOT = Path(__file__).resolve().parents[3]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from apps.cli.cli_common import resolve_build_config, resolve_settings  # noqa: E402
from shuttle.config import ConfigError  # noqa: E402
from shuttle.env import public_env_vars  # noqa: E402
from shuttle.fingerprint import FingerprintError, compute_fingerprint, iter_hash_inputs  # noqa: E402
from shuttle.version import tool_version  # noqa: E402

console = Console()


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Shuttle fingerprint for the current config + public env")
    p.add_argument("--config", default=None, help="Resolved build config JSON")
    p.add_argument("--settings", default=None, help="Alternate settings.ini")
    p.add_argument("--tool-version", default=None, help="Override the build-tool version")
    p.add_argument("--json", action="store_true", help="Print the shuttle manifest as JSON")
    p.add_argument("--inputs", action="store_true", help="Also list the hashed key=value lines")
    args = p.parse_args(argv)

    try:
        settings = resolve_settings(args.settings)
        config = resolve_build_config(args.config, settings)
        env = public_env_vars(prefix=settings.public_env_prefix)
        manifest = compute_fingerprint(config, env, tool_version=args.tool_version or tool_version())
        lines = list(iter_hash_inputs(config, env)) if args.inputs else []
    except (OSError, ConfigError, FingerprintError) as e:
        console.print(f"[red]Fingerprint failed: {e}[/red]")
        return 1

    if args.json:
        print(json.dumps(manifest, indent=2))
    else:
        console.print(
            Panel(
                f"toolVersion: [bold]{manifest['toolVersion']}[/bold]\n"
                f"globalHash:  [bold cyan]{manifest['globalHash']}[/bold cyan]\n"
                f"public env:  {len(env)} var(s) with prefix {settings.public_env_prefix}",
                title="Shuttle fingerprint",
                border_style="cyan",
            )
        )

    if lines:
        table = Table(title="Hash inputs (in order)", box=None, header_style="bold cyan")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Input", overflow="fold")
        for i, line in enumerate(lines, 1):
            table.add_row(str(i), line)
        console.print(table)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
