# -*- coding: utf-8 -*-
from __future__ import annotations

import os

import pytest

from shuttle.selector import keep_server_artifact
from shuttle.tree_copy import recursive_copy


def _files(root):
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file())


def test_copy_everything(tmp_path):
    src = tmp_path / "src"
    (src / "a" / "b").mkdir(parents=True)
    (src / "top.txt").write_text("top")
    (src / "a" / "b" / "deep.bin").write_bytes(b"\x00\x01\x02")
    count = recursive_copy(src, tmp_path / "out")
    assert count == 2
    assert _files(tmp_path / "out") == ["a/b/deep.bin", "top.txt"]
    assert (tmp_path / "out" / "a" / "b" / "deep.bin").read_bytes() == b"\x00\x01\x02"


def test_filter_sees_relative_posix_paths(tmp_path):
    src = tmp_path / "src"
    (src / "pages").mkdir(parents=True)
    (src / "pages" / "x.js").write_text("x")
    seen = []

    def keep(rel):
        seen.append(rel)
        return True

    recursive_copy(src, tmp_path / "out", keep=keep)
    assert seen == ["pages/x.js"]


def test_rejected_files_skip_but_directories_exist(tmp_path):
    src = tmp_path / "src"
    (src / "app").mkdir(parents=True)
    for name in ("a.rsc", "b.meta", "c.html", "d.js"):
        (src / name).write_text(name)
    (src / "app" / "page.rsc").write_text("0:[]")
    out = tmp_path / "out"
    count = recursive_copy(src, out, keep=keep_server_artifact)
    assert count == 1
    assert _files(out) == ["d.js"]
    assert (out / "app").is_dir()
    assert (out / "d.js").read_bytes() == (src / "d.js").read_bytes()


def test_preserves_mode(tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    script = src / "run.sh"
    script.write_text("#!/bin/sh\n")
    script.chmod(0o755)
    recursive_copy(src, tmp_path / "out")
    assert os.stat(tmp_path / "out" / "run.sh").st_mode & 0o777 == 0o755


def test_symlinks_are_resolved_into_copies(tmp_path):
    src = tmp_path / "dist" / "server"
    (src / "real").mkdir(parents=True)
    (src / "real" / "f.js").write_text("f")
    vendor = tmp_path / "node_modules"
    vendor.mkdir()
    (vendor / "lib.js").write_text("lib")
    os.symlink("real/f.js", src / "link.js")
    os.symlink("real", src / "linkdir")
    os.symlink("../../node_modules/lib.js", src / "lib.js")
    out = tmp_path / "cache" / "deep" / "shuttle" / "server"
    count = recursive_copy(src, out)
    assert count == 4
    for rel in ("link.js", "linkdir", "linkdir/f.js", "lib.js"):
        assert not (out / rel).is_symlink()
    assert (out / "link.js").read_text() == "f"
    assert (out / "linkdir" / "f.js").read_text() == "f"
    assert (out / "lib.js").read_text() == "lib"


def test_filter_applies_below_linked_directory(tmp_path):
    src = tmp_path / "src"
    (src / "real").mkdir(parents=True)
    (src / "real" / "page.html").write_text("<html></html>")
    os.symlink("real", src / "linkdir")
    out = tmp_path / "out"
    recursive_copy(src, out, keep=keep_server_artifact)
    assert _files(out) == []
    assert (out / "linkdir").is_dir()


def test_directory_cycle_is_not_followed(tmp_path):
    src = tmp_path / "src"
    (src / "a").mkdir(parents=True)
    (src / "a" / "x.js").write_text("x")
    os.symlink("..", src / "a" / "up")
    out = tmp_path / "out"
    assert recursive_copy(src, out) == 1
    assert _files(out) == ["a/x.js"]


def test_dangling_link_raises(tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    os.symlink("missing.js", src / "gone.js")
    with pytest.raises(FileNotFoundError):
        recursive_copy(src, tmp_path / "out")


def test_missing_source_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        recursive_copy(tmp_path / "nope", tmp_path / "out")
