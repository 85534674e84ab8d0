"""Render @source directives for a dependency set."""

from __future__ import annotations

import posixpath
from collections.abc import Iterable

from tailwind_sync.graph.models import ProjectGraph


def relative_source_path(from_dir: str, to_root: str) -> str:
    """Forward-slash path from a stylesheet's directory to a project root."""
    return posixpath.relpath(posixpath.normpath(to_root), posixpath.normpath(from_dir or "."))


def render_directive(relative_path: str) -> str:
    return f'@source "{relative_path}";'


def generate_directives(
    dependencies: Iterable[str],
    css_dir: str,
    graph: ProjectGraph,
) -> list[str]:
    """One directive per dependency that has a node with a root, sorted.

    The sort is over the rendered strings, so ``../../`` and ``../../../``
    entries interleave lexically. Dependencies resolving to the same path
    are emitted once each.
    """
    directives = []
    for dep in dependencies:
        node = graph.get(dep)
        if node is None or not node.root:
            continue
        directives.append(render_directive(relative_source_path(css_dir, node.root)))

    directives.sort()
    return directives
