"""Decide which projects use Tailwind v4 and where their directives go.

A project participates when either:
1. one of its stylesheets imports tailwindcss, or
2. one of its vite/vitest configs registers the @tailwindcss/vite plugin.

In case 2 the project may have no explicit import, so the first existing
stylesheet on the search path becomes the target.
"""

from __future__ import annotations

import posixpath
from collections.abc import Sequence
from dataclasses import dataclass

from tailwind_sync.graph.models import ProjectGraph, ProjectNode
from tailwind_sync.matchers import TAILWIND_IMPORT, VITE_PLUGIN
from tailwind_sync.tree import Tree

DEFAULT_STYLE_PATHS = ["src/styles.css", ".storybook/styles.css"]

VITE_CONFIG_FILES = [
    "vite.config.ts",
    "vite.config.mts",
    "vite.config.js",
    "vite.config.mjs",
    "vitest.config.ts",
    "vitest.config.mts",
    "vitest.config.storybook.ts",
]


@dataclass
class CandidateProject:
    project: ProjectNode
    target_file: str | None = None
    participates: bool = False
    uses_vite_plugin: bool = False


def _join(root: str, rel_path: str) -> str:
    return posixpath.normpath(posixpath.join(root, rel_path))


def _search_paths(
    root: str,
    additional_paths: list[str] | None,
    default_paths: Sequence[str],
) -> list[str]:
    return [_join(root, p) for p in [*default_paths, *(additional_paths or [])]]


def find_tailwind_css_file(
    tree: Tree,
    project_root: str,
    additional_paths: list[str] | None = None,
    default_paths: Sequence[str] = DEFAULT_STYLE_PATHS,
) -> str | None:
    """First stylesheet on the search path that imports tailwindcss."""
    for path in _search_paths(project_root, additional_paths, default_paths):
        if TAILWIND_IMPORT.matches(tree.read(path)):
            return path
    return None


def find_any_styles_file(
    tree: Tree,
    project_root: str,
    additional_paths: list[str] | None = None,
    default_paths: Sequence[str] = DEFAULT_STYLE_PATHS,
) -> str | None:
    """First stylesheet on the search path that exists at all."""
    for path in _search_paths(project_root, additional_paths, default_paths):
        if tree.exists(path):
            return path
    return None


def uses_vite_plugin(tree: Tree, project_root: str) -> bool:
    for config_file in VITE_CONFIG_FILES:
        if VITE_PLUGIN.matches(tree.read(_join(project_root, config_file))):
            return True
    return False


def classify_project(
    tree: Tree,
    project: ProjectNode,
    additional_paths: list[str] | None = None,
    default_paths: Sequence[str] = DEFAULT_STYLE_PATHS,
) -> CandidateProject:
    """Classify one project. Never writes to the tree.

    default_paths are searched first, then additional_paths, all relative
    to the project root.
    """
    if not project.root:
        return CandidateProject(project=project)

    target = find_tailwind_css_file(tree, project.root, additional_paths, default_paths)
    vite = uses_vite_plugin(tree, project.root)

    if target is None and vite:
        target = find_any_styles_file(tree, project.root, additional_paths, default_paths)

    return CandidateProject(
        project=project,
        target_file=target,
        participates=target is not None or vite,
        uses_vite_plugin=vite,
    )


def find_tailwind_projects(
    graph: ProjectGraph,
    tree: Tree,
    additional_paths: list[str] | None = None,
    default_paths: Sequence[str] = DEFAULT_STYLE_PATHS,
) -> list[CandidateProject]:
    """Participating projects, in graph order."""
    results = []
    for project in graph.nodes.values():
        candidate = classify_project(tree, project, additional_paths, default_paths)
        if candidate.participates:
            results.append(candidate)
    return results
