"""Input resolution shared by the CLI commands."""

from __future__ import annotations

import argparse
from pathlib import Path

from tailwind_sync.config import SyncOptions, load_config
from tailwind_sync.graph.loader import load_graph
from tailwind_sync.graph.models import ProjectGraph
from tailwind_sync.paths import config_path, graph_path, workspace_root


def resolve_workspace(args: argparse.Namespace) -> Path:
    """Resolve workspace path from args or environment."""
    raw = getattr(args, "workspace", None)
    if raw:
        return Path(raw).expanduser().resolve()
    return workspace_root().expanduser().resolve()


def load_project_graph(args: argparse.Namespace) -> ProjectGraph:
    raw = getattr(args, "graph", None)
    path = Path(raw).expanduser() if raw else graph_path(resolve_workspace(args))
    return load_graph(path)


def load_options(args: argparse.Namespace) -> SyncOptions:
    """Config file options, with --style-path entries appended."""
    raw = getattr(args, "config", None)
    if raw:
        options = load_config(raw)
    else:
        options = load_config(config_path(resolve_workspace(args)), required=False)

    extra = [
        *(getattr(args, "style_path", None) or []),
        *(getattr(args, "sub_style_path", None) or []),
    ]
    options.additional_style_paths.extend(p for p in extra if p not in options.additional_style_paths)
    return options
