# -*- coding: utf-8 -*-
"""Which server outputs are safe to carry into a shuttle."""

from __future__ import annotations

from shuttle.constants import REJECTED_SERVER_SUFFIXES


def keep_server_artifact(rel_path: str) -> bool:
    """False for payload fragments, render metadata and pre-rendered HTML."""
    return not str(rel_path).endswith(REJECTED_SERVER_SUFFIXES)
