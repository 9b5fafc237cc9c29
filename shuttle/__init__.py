# -*- coding: utf-8 -*-
"""Flying Shuttle: fingerprint + snapshot of a finished build."""

from shuttle.config.build_config import MISSING, BuildConfig, ExperimentalConfig, load_build_config
from shuttle.env import public_env_vars
from shuttle.fingerprint import FingerprintError, ShuttleManifest, compute_fingerprint
from shuttle.normalizer import ManifestParseError, normalize_route_manifest
from shuttle.selector import keep_server_artifact
from shuttle.tree_copy import recursive_copy
from shuttle.writer import store_shuttle

__all__ = [
    "MISSING",
    "BuildConfig",
    "ExperimentalConfig",
    "FingerprintError",
    "ManifestParseError",
    "ShuttleManifest",
    "compute_fingerprint",
    "keep_server_artifact",
    "load_build_config",
    "normalize_route_manifest",
    "public_env_vars",
    "recursive_copy",
    "store_shuttle",
]
