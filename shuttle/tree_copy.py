# -*- coding: utf-8 -*-
"""Recursive directory copy with a path predicate."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Callable, FrozenSet, Optional, Tuple

logger = logging.getLogger(__name__)

PathPredicate = Callable[[str], bool]


def _dir_key(path: Path) -> Tuple[int, int]:
    st = path.stat()
    return st.st_dev, st.st_ino


def _copy_dir(
    src_root: Path,
    src: Path,
    dest: Path,
    keep: Optional[PathPredicate],
    ancestors: FrozenSet[Tuple[int, int]],
) -> int:
    copied = 0
    for item in sorted(src.iterdir(), key=lambda p: p.name):
        target = dest / item.name
        if item.is_dir():
            key = _dir_key(item)
            if key in ancestors:
                # linked back into its own ancestry
                logger.debug("skip cycle %s", item)
                continue
            target.mkdir(exist_ok=True)
            copied += _copy_dir(src_root, item, target, keep, ancestors | {key})
            continue

        rel = item.relative_to(src_root).as_posix()
        if keep is not None and not keep(rel):
            logger.debug("skip %s", rel)
            continue
        # links are resolved; the copy must not depend on files outside it
        shutil.copy2(item, target)
        copied += 1
    return copied


def recursive_copy(src: Path, dest: Path, *, keep: Optional[PathPredicate] = None) -> int:
    """Copy `src` into `dest` and return the number of files copied.

    `keep` receives each file's POSIX path relative to `src`. Directories are
    always created, even when every file below them is rejected. Symlinks are
    followed and copied as regular files and directories; a dangling link
    raises `FileNotFoundError`.
    """
    src = Path(src)
    dest = Path(dest)
    if not src.is_dir():
        raise FileNotFoundError(f"source directory not found: {src}")

    dest.mkdir(parents=True, exist_ok=True)
    return _copy_dir(src, src, dest, keep, frozenset({_dir_key(src)}))
