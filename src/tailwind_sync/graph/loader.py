"""Load an exported project graph from JSON or YAML.

Two layouts are accepted:

* the Nx ``graph.json`` export (``nx graph --file=graph.json``)::

    {"graph": {"nodes": {"app": {"name": "app", "data": {"root": "apps/app"}}},
               "dependencies": {"app": [{"source": "app", "target": "ui"}]}}}

  The bare ``{"nodes": ..., "dependencies": ...}`` form is accepted too.

* a compact hand-written layout::

    projects:
      app:
        root: apps/app
        dependencies: [ui]
"""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from tailwind_sync.graph.models import DependencyEdge, ProjectGraph, ProjectNode


class GraphLoadError(ValueError):
    """The project graph file could not be interpreted."""


def load_graph(path: Path | str) -> ProjectGraph:
    """Read a project graph file.

    Args:
        path: Path to a ``.json``, ``.yaml`` or ``.yml`` file.

    Returns:
        Parsed ProjectGraph.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        GraphLoadError: If the file is malformed.
    """
    graph_file = Path(path)
    with open(graph_file) as f:
        try:
            if graph_file.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise GraphLoadError(f"{graph_file}: {e}") from e

    return graph_from_dict(data, source=str(graph_file))


def graph_from_dict(data: object, source: str = "<graph>") -> ProjectGraph:
    """Build a ProjectGraph from an already-parsed document."""
    if not isinstance(data, dict):
        raise GraphLoadError(f"{source}: project graph is not a mapping")

    if "projects" in data:
        return _from_compact(data["projects"], source)

    body = data.get("graph", data)
    if not isinstance(body, dict) or "nodes" not in body:
        raise GraphLoadError(f"{source}: expected 'graph.nodes' or 'projects'")
    return _from_nx(body, source)


def _from_nx(body: dict, source: str) -> ProjectGraph:
    raw_nodes = body.get("nodes") or {}
    raw_deps = body.get("dependencies") or {}
    if not isinstance(raw_nodes, dict) or not isinstance(raw_deps, dict):
        raise GraphLoadError(f"{source}: 'nodes' and 'dependencies' must be mappings")

    graph = ProjectGraph()
    for name, node in raw_nodes.items():
        if not isinstance(node, dict):
            raise GraphLoadError(f"{source}: node '{name}' is not a mapping")
        node_data = node.get("data") or {}
        root = node_data.get("root") or node.get("root") or ""
        graph.nodes[name] = ProjectNode(name=node.get("name", name), root=root)

    for name, edges in raw_deps.items():
        if not isinstance(edges, list):
            raise GraphLoadError(f"{source}: dependencies of '{name}' must be a list")
        parsed = []
        for edge in edges:
            if isinstance(edge, str):
                parsed.append(DependencyEdge(source=name, target=edge))
            elif isinstance(edge, dict) and "target" in edge:
                parsed.append(DependencyEdge(
                    source=edge.get("source", name),
                    target=edge["target"],
                    type=edge.get("type", "static"),
                ))
            else:
                raise GraphLoadError(f"{source}: malformed edge under '{name}': {edge!r}")
        graph.dependencies[name] = parsed

    return graph


def _from_compact(projects: object, source: str) -> ProjectGraph:
    if not isinstance(projects, dict):
        raise GraphLoadError(f"{source}: 'projects' must be a mapping")

    graph = ProjectGraph()
    for name, entry in projects.items():
        entry = entry or {}
        if not isinstance(entry, dict):
            raise GraphLoadError(f"{source}: project '{name}' is not a mapping")
        graph.nodes[name] = ProjectNode(name=name, root=entry.get("root") or "")
        deps = entry.get("dependencies", []) or []
        if not isinstance(deps, list):
            raise GraphLoadError(f"{source}: dependencies of '{name}' must be a list")
        graph.dependencies[name] = [
            DependencyEdge(source=name, target=str(dep)) for dep in deps
        ]

    return graph
