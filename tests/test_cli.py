# -*- coding: utf-8 -*-
from __future__ import annotations

import json
import sys

from apps.cli import main as dispatcher
from apps.cli.commands import doctor, fingerprint
from devtools import build_shuttle
from shuttle.constants import SHUTTLE_MANIFEST


def _settings(tmp_path, dist_dir, shuttle_dir):
    ini = tmp_path / "settings.ini"
    ini.write_text(
        f"[PATHS]\nDIST_DIR = {dist_dir}\nSHUTTLE_DIR = {shuttle_dir}\n\n[ENV]\nPUBLIC_PREFIX = NEXT_PUBLIC_\n",
        encoding="utf-8",
    )
    return ini


def _config(tmp_path):
    path = tmp_path / "build-config.json"
    path.write_text(json.dumps({"basePath": "", "env": {}}), encoding="utf-8")
    return path


def test_build_shuttle_cli(dist_dir, tmp_path):
    shuttle_dir = tmp_path / "shuttle"
    ini = _settings(tmp_path, dist_dir, shuttle_dir)
    code = build_shuttle.main(["--settings", str(ini), "--config", str(_config(tmp_path)), "--tool-version", "9.9.9"])
    assert code == 0
    stored = json.loads((shuttle_dir / SHUTTLE_MANIFEST).read_text(encoding="utf-8"))
    assert stored["toolVersion"] == "9.9.9"


def test_build_shuttle_cli_reports_failure(tmp_path):
    ini = _settings(tmp_path, tmp_path / "no-dist", tmp_path / "shuttle")
    assert build_shuttle.main(["--settings", str(ini)]) == 1


def test_fingerprint_cli_matches_build(dist_dir, tmp_path, capsys):
    shuttle_dir = tmp_path / "shuttle"
    ini = _settings(tmp_path, dist_dir, shuttle_dir)
    config = _config(tmp_path)
    assert build_shuttle.main(["--settings", str(ini), "--config", str(config), "--tool-version", "1"]) == 0
    capsys.readouterr()

    assert fingerprint.main(["--settings", str(ini), "--config", str(config), "--tool-version", "1", "--json"]) == 0
    printed = json.loads(capsys.readouterr().out)
    stored = json.loads((shuttle_dir / SHUTTLE_MANIFEST).read_text(encoding="utf-8"))
    assert printed == stored


def test_doctor_passes_on_fresh_shuttle(dist_dir, tmp_path):
    shuttle_dir = tmp_path / "shuttle"
    ini = _settings(tmp_path, dist_dir, shuttle_dir)
    assert build_shuttle.main(["--settings", str(ini), "--config", str(_config(tmp_path))]) == 0
    assert doctor.main(["--settings", str(ini), "--enforce"]) == 0


def test_doctor_flags_render_outputs(dist_dir, tmp_path):
    shuttle_dir = tmp_path / "shuttle"
    ini = _settings(tmp_path, dist_dir, shuttle_dir)
    assert build_shuttle.main(["--settings", str(ini), "--config", str(_config(tmp_path))]) == 0
    (shuttle_dir / "server" / "leak.html").write_text("<html></html>")
    assert doctor.main(["--settings", str(ini), "--enforce"]) == 2


def test_dispatcher_lists_tools(capsys):
    assert dispatcher.main([]) == 0
    assert "build" in capsys.readouterr().out
    assert dispatcher.main(["nope"]) == 2


def test_dispatcher_runs_tool(dist_dir, tmp_path):
    shuttle_dir = tmp_path / "shuttle"
    ini = _settings(tmp_path, dist_dir, shuttle_dir)
    before = list(sys.argv)
    code = dispatcher.main(["build", "--settings", str(ini), "--config", str(_config(tmp_path))])
    assert code == 0
    assert sys.argv == before
    assert (shuttle_dir / SHUTTLE_MANIFEST).exists()


def test_build_summary_counts(dist_dir, tmp_path):
    shuttle_dir = tmp_path / "shuttle"
    ini = _settings(tmp_path, dist_dir, shuttle_dir)
    assert build_shuttle.main(["--settings", str(ini), "--config", str(_config(tmp_path))]) == 0
    # route manifest, foo.js, pages/x.js survive the filter
    count, size = build_shuttle._tree_totals(shuttle_dir / "server")
    assert count == 3
    assert size == sum(p.stat().st_size for p in (shuttle_dir / "server").rglob("*") if p.is_file())
    assert build_shuttle._tree_totals(shuttle_dir / SHUTTLE_MANIFEST)[0] == 1
    assert build_shuttle._tree_totals(tmp_path / "missing") == (0, 0)
