"""Transitive dependency collection."""

from __future__ import annotations

from collections import deque

from tailwind_sync.graph.models import ProjectGraph


def collect_dependencies(project_name: str, graph: ProjectGraph) -> set[str]:
    """Return every project reachable from project_name, excluding itself.

    Breadth-first over outgoing edges with a visited set, so cycles
    terminate and each project is recorded once. Targets missing from
    graph.nodes are still returned; rendering drops them.
    """
    dependencies: set[str] = set()
    queue = deque([project_name])
    visited = {project_name}

    while queue:
        current = queue.popleft()
        for target in graph.targets_of(current):
            if target == project_name:
                continue
            dependencies.add(target)
            if target not in visited:
                visited.add(target)
                queue.append(target)

    return dependencies
