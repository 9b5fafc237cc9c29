# -*- coding: utf-8 -*-
"""Global invalidation key for a stored shuttle.

The hash covers the public (inlined) environment variables and an explicit
allow-list of config options. Options outside that list never affect it, so
the list in `shuttle.constants.TRACKED_CONFIG_KEYS` has to stay complete.
"""

from __future__ import annotations

import ast
import hashlib
import inspect
import json
import textwrap
from typing import Any, Mapping, TypedDict

from shuttle.config.build_config import MISSING, BuildConfig, resolve_tracked
from shuttle.constants import TRACKED_CONFIG_KEYS


class FingerprintError(ValueError):
    pass


class ShuttleManifest(TypedDict):
    toolVersion: str
    globalHash: str


def _lambda_source(value: Any) -> str:
    """Cut a lambda's own text out of the line(s) it was written on.

    Lambdas starting on the same line are told apart by the code positions
    of their instructions (3.11+). Without positions only a lone lambda on
    its line is accepted.
    """
    code = value.__code__
    try:
        lines, _ = inspect.findsource(value)
    except (OSError, TypeError) as exc:
        raise FingerprintError(f"cannot read source of {value!r}: {exc}") from exc
    source = "".join(lines)
    try:
        tree = ast.parse(source)
    except SyntaxError as exc:
        raise FingerprintError(f"cannot parse source of {value!r}: {exc}") from exc

    candidates = [
        node
        for node in ast.walk(tree)
        if isinstance(node, ast.Lambda) and node.lineno == code.co_firstlineno
    ]

    positions = set()
    co_positions = getattr(code, "co_positions", None)
    if co_positions is not None:
        for line, end_line, col, end_col in co_positions():
            if None in (line, end_line, col, end_col):
                continue
            # zero-width entries (RESUME) carry no column information
            if (line, col) == (end_line, end_col):
                continue
            positions.add((line, col, end_line, end_col))

    def span(node: ast.Lambda):
        return (node.lineno, node.col_offset, node.end_lineno, node.end_col_offset)

    def contains(node: ast.Lambda, pos) -> bool:
        return (node.lineno, node.col_offset) <= (pos[0], pos[1]) and (pos[2], pos[3]) <= (
            node.end_lineno,
            node.end_col_offset,
        )

    if positions:
        enclosing = [node for node in candidates if all(contains(node, pos) for pos in positions)]
        # a lambda created by the target shows up with its exact span
        candidates = [node for node in enclosing if span(node) not in positions] or enclosing
        candidates.sort(key=lambda node: (node.end_lineno - node.lineno, node.end_col_offset - node.col_offset))
        candidates = candidates[:1]

    if len(candidates) != 1:
        raise FingerprintError(
            f"cannot isolate lambda on line {code.co_firstlineno}; pass the function as a string instead"
        )
    segment = ast.get_source_segment(source, candidates[0])
    if segment is None:
        raise FingerprintError(f"cannot read source of {value!r}")
    return segment


def _function_source(value: Any) -> str:
    if getattr(value, "__name__", None) == "<lambda>":
        return _lambda_source(value)
    try:
        src = inspect.getsource(value)
    except (OSError, TypeError) as exc:
        raise FingerprintError(f"cannot read source of {value!r}: {exc}") from exc
    return textwrap.dedent(src).strip()


def serialize_value(value: Any) -> str:
    """Serialize a resolved config value for hashing.

    - MISSING -> `undefined` (never collides with an explicit `null`)
    - callables -> their source text
    - anything else -> compact JSON with sorted keys
    """
    if value is MISSING:
        return "undefined"
    if callable(value):
        return _function_source(value)
    try:
        return json.dumps(value, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        raise FingerprintError(f"cannot serialize config value: {exc}") from exc


def iter_hash_inputs(config: BuildConfig, public_env: Mapping[str, str]):
    """Yield the `name=value` lines fed to the hash, in hashing order."""
    for key in sorted(public_env):
        yield f"{key}={public_env[key]}"

    for key in sorted(TRACKED_CONFIG_KEYS):
        try:
            serialized = serialize_value(resolve_tracked(config, key))
        except FingerprintError as exc:
            raise FingerprintError(f"{key}: {exc}") from exc
        yield f"{key}={serialized}"


def compute_fingerprint(
    config: BuildConfig,
    public_env: Mapping[str, str],
    *,
    tool_version: str,
) -> ShuttleManifest:
    global_hash = hashlib.sha256()
    for line in iter_hash_inputs(config, public_env):
        global_hash.update(line.encode("utf-8"))
    return {
        "toolVersion": tool_version,
        "globalHash": global_hash.hexdigest(),
    }
