#!/usr/bin/env python3
"""Shuttle tool registry."""

TOOLS = [
    # --- CLI tools (apps/cli/commands) ---
    {
        "file": "fingerprint.py",
        "alias": "fingerprint",
        "desc": "Print the global invalidation hash for the current config + env",
        "usage": "shuttle fingerprint [--config PATH] [--settings PATH] [--json] [--inputs]",
        "type": "CLI",
        "folder": "apps/cli/commands"
    },
    {
        "file": "doctor.py",
        "alias": "doctor",
        "desc": "Settings, build output and shuttle layout health check",
        "usage": "shuttle doctor [--dist-dir PATH] [--shuttle-dir PATH] [--enforce] [--strict]",
        "type": "CLI",
        "folder": "apps/cli/commands"
    },

    # --- dev tools (devtools/) ---
    {
        "file": "build_shuttle.py",
        "alias": "build",
        "desc": "Store a shuttle from a finished build output",
        "usage": "shuttle build [--dist-dir PATH] [--shuttle-dir PATH] [--config PATH] [--verbose]",
        "type": "Dev",
        "folder": "devtools"
    },
]


def get_tools():
    return TOOLS
