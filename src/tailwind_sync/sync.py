"""Tailwind @source sync — walks the project graph, updates managed blocks.

The sync process:
1. Classify every project in the graph
2. For each participating project with a stylesheet, collect its
   transitive dependencies
3. Render them as @source directives relative to the stylesheet
4. Merge the directives into the stylesheet's managed block

Writes go through the tree, once per changed file. Preserves all
manually-written content outside the markers.
"""

from __future__ import annotations

import posixpath
from dataclasses import dataclass, field

from tailwind_sync.classifier import find_tailwind_projects
from tailwind_sync.config import SyncOptions
from tailwind_sync.directives import generate_directives
from tailwind_sync.graph.collector import collect_dependencies
from tailwind_sync.graph.models import ProjectGraph
from tailwind_sync.logging import get_logger
from tailwind_sync.merge import merge_block
from tailwind_sync.tree import Tree

log = get_logger("sync")


@dataclass
class SyncResult:
    updated: list[str] = field(default_factory=list)
    unchanged: list[str] = field(default_factory=list)
    without_stylesheet: list[str] = field(default_factory=list)
    files: dict[str, str] = field(default_factory=dict)

    @property
    def out_of_sync_message(self) -> str | None:
        if not self.updated:
            return None
        return f"Tailwind @source directives updated for: {', '.join(self.updated)}"

    def summary(self) -> str:
        lines = [
            "Tailwind Source Sync Results",
            "─" * 40,
            f"  Updated:   {len(self.updated)}",
            f"  Unchanged: {len(self.unchanged)}",
        ]
        if self.without_stylesheet:
            lines.append(f"  No stylesheet: {len(self.without_stylesheet)}")
        for name in self.updated:
            lines.append(f"    - {name}: {self.files[name]}")
        return "\n".join(lines)


def update_source_directives(
    tree: Tree,
    project_name: str,
    css_file: str,
    graph: ProjectGraph,
) -> bool:
    """Bring one stylesheet's managed block in line with the graph.

    Returns:
        True if the file was written.
    """
    dependencies = collect_dependencies(project_name, graph)
    directives = generate_directives(dependencies, posixpath.dirname(css_file), graph)

    result = merge_block(tree.read(css_file), directives)
    if result.changed:
        tree.write(css_file, result.content)
    return result.changed


def sync_all(
    tree: Tree,
    graph: ProjectGraph,
    options: SyncOptions | None = None,
) -> SyncResult:
    """Sync managed @source blocks for every Tailwind project in the graph."""
    opts = options or SyncOptions()
    result = SyncResult()

    for candidate in find_tailwind_projects(graph, tree, opts.additional_style_paths):
        name = candidate.project.name
        if candidate.target_file is None:
            log.debug("%s uses @tailwindcss/vite but has no stylesheet", name)
            result.without_stylesheet.append(name)
            continue

        result.files[name] = candidate.target_file
        if update_source_directives(tree, name, candidate.target_file, graph):
            log.info("updated %s", candidate.target_file)
            result.updated.append(name)
        else:
            log.debug("%s already in sync", name)
            result.unchanged.append(name)

    return result
