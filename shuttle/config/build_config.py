# -*- coding: utf-8 -*-
"""Typed view over the resolved build configuration.

Only the options that can invalidate a stored shuttle get a typed field;
everything else is kept verbatim in `extra` and never hashed.

A tracked option the build never supplied holds `MISSING`, which is not the
same thing as an explicit `None` (JSON `null`).
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Tuple


class ConfigError(ValueError):
    pass


class _Missing:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


# (attribute, key as written by the build tool)
_EXPERIMENTAL_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("flying_shuttle", "flyingShuttle"),
    ("ppr", "ppr"),
    ("react_compiler", "reactCompiler"),
)

_TOP_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("base_path", "basePath"),
    ("env", "env"),
    ("i18n", "i18n"),
    ("images", "images"),
    ("production_browser_source_maps", "productionBrowserSourceMaps"),
    ("webpack", "webpack"),
    ("sass_options", "sassOptions"),
    ("trailing_slash", "trailingSlash"),
)


@dataclass(frozen=True)
class ExperimentalConfig:
    flying_shuttle: Any = MISSING
    ppr: Any = MISSING
    react_compiler: Any = MISSING
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ExperimentalConfig":
        kwargs: Dict[str, Any] = {}
        for attr, key in _EXPERIMENTAL_FIELDS:
            if key in data:
                kwargs[attr] = data[key]
        known = {key for _, key in _EXPERIMENTAL_FIELDS}
        kwargs["extra"] = {k: v for k, v in data.items() if k not in known}
        return cls(**kwargs)


@dataclass(frozen=True)
class BuildConfig:
    base_path: Any = MISSING
    env: Any = MISSING
    i18n: Any = MISSING
    images: Any = MISSING
    production_browser_source_maps: Any = MISSING
    webpack: Any = MISSING
    sass_options: Any = MISSING
    trailing_slash: Any = MISSING
    # MISSING or None: every experimental.* key resolves to MISSING
    experimental: Any = MISSING
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BuildConfig":
        if not isinstance(data, Mapping):
            raise ConfigError(f"build config must be an object, got {type(data).__name__}")
        kwargs: Dict[str, Any] = {}
        for attr, key in _TOP_FIELDS:
            if key in data:
                kwargs[attr] = data[key]

        if "experimental" in data:
            exp = data["experimental"]
            if isinstance(exp, Mapping):
                kwargs["experimental"] = ExperimentalConfig.from_dict(exp)
            elif exp is None:
                kwargs["experimental"] = None
            else:
                raise ConfigError(f"experimental must be an object, got {type(exp).__name__}")

        known = {key for _, key in _TOP_FIELDS} | {"experimental"}
        kwargs["extra"] = {k: v for k, v in data.items() if k not in known}
        return cls(**kwargs)


def _experimental(attr: str) -> Callable[[BuildConfig], Any]:
    def get(config: BuildConfig) -> Any:
        exp = config.experimental
        if not isinstance(exp, ExperimentalConfig):
            return MISSING
        return getattr(exp, attr)

    return get


TRACKED_CONFIG_ACCESSORS: Dict[str, Callable[[BuildConfig], Any]] = {
    "basePath": lambda c: c.base_path,
    "env": lambda c: c.env,
    "i18n": lambda c: c.i18n,
    "images": lambda c: c.images,
    "productionBrowserSourceMaps": lambda c: c.production_browser_source_maps,
    "webpack": lambda c: c.webpack,
    "sassOptions": lambda c: c.sass_options,
    "trailingSlash": lambda c: c.trailing_slash,
    "experimental.flyingShuttle": _experimental("flying_shuttle"),
    "experimental.ppr": _experimental("ppr"),
    "experimental.reactCompiler": _experimental("react_compiler"),
}


def resolve_tracked(config: BuildConfig, key: str) -> Any:
    try:
        accessor = TRACKED_CONFIG_ACCESSORS[key]
    except KeyError:
        raise KeyError(f"not a tracked config key: {key}") from None
    return accessor(config)


def load_build_config(path: Path) -> BuildConfig:
    p = Path(path)
    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid build config {p}: {exc}") from exc
    return BuildConfig.from_dict(data)
