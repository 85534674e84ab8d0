"""Workspace path resolution.

Resolves the workspace root and the files tailwind-sync reads from it.
Uses environment variables when available, falls back to conventional
defaults.

Environment variables:
    TAILWIND_SYNC_WORKSPACE_DIR — workspace root (default: current directory)
    TAILWIND_SYNC_GRAPH — project graph file (default: <workspace>/graph.json)
"""

from __future__ import annotations

import os
from pathlib import Path

_DEFAULT_GRAPH_NAME = "graph.json"
_CONFIG_NAME = "tailwind-sync.yaml"


def workspace_root() -> Path:
    """Return the workspace root directory."""
    return Path(os.environ.get("TAILWIND_SYNC_WORKSPACE_DIR", os.getcwd()))


def graph_path(workspace: Path | None = None) -> Path:
    """Return the path to the exported project graph."""
    env = os.environ.get("TAILWIND_SYNC_GRAPH")
    if env:
        return Path(env)
    return (workspace or workspace_root()) / _DEFAULT_GRAPH_NAME


def config_path(workspace: Path | None = None) -> Path:
    """Return the path to tailwind-sync.yaml."""
    return (workspace or workspace_root()) / _CONFIG_NAME
