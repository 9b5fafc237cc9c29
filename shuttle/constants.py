# -*- coding: utf-8 -*-
"""Fixed names shared by the shuttle stage."""

from __future__ import annotations

SHUTTLE_MANIFEST = "shuttle-manifest.json"

SERVER_DIR = "server"
STATIC_DIR = "static"
MANIFESTS_DIR = "manifests"

# route -> compiled output file, lives under {distDir}/server/
ROUTE_MANIFEST = "route-manifest.json"

BUILD_MANIFEST = "build-manifest.json"
ROUTES_MANIFEST = "routes-manifest.json"
APP_BUILD_MANIFEST = "app-build-manifest.json"
REACT_LOADABLE_MANIFEST = "react-loadable-manifest.json"
APP_PATH_ROUTES_MANIFEST = "app-path-routes-manifest.json"

# manifests not nested in {distDir}/server/
TOP_LEVEL_MANIFESTS = (
    BUILD_MANIFEST,
    ROUTES_MANIFEST,
    APP_BUILD_MANIFEST,
    REACT_LOADABLE_MANIFEST,
    APP_PATH_ROUTES_MANIFEST,
)

# render-time outputs that are regenerated after static generation
REJECTED_SERVER_SUFFIXES = (".rsc", ".meta", ".html")

DEFAULT_PUBLIC_ENV_PREFIX = "NEXT_PUBLIC_"

# minimal set of config values that can impact the build output
TRACKED_CONFIG_KEYS = (
    "basePath",
    "env",
    "i18n",
    "images",
    "productionBrowserSourceMaps",
    "webpack",
    "sassOptions",
    "trailingSlash",
    "experimental.flyingShuttle",
    "experimental.ppr",
    "experimental.reactCompiler",
)
