"""Graph module — load, traverse, and validate the workspace project graph."""

from tailwind_sync.graph.models import DependencyEdge, ProjectGraph, ProjectNode
from tailwind_sync.graph.loader import GraphLoadError, graph_from_dict, load_graph
from tailwind_sync.graph.collector import collect_dependencies

__all__ = [
    "DependencyEdge",
    "ProjectGraph",
    "ProjectNode",
    "GraphLoadError",
    "graph_from_dict",
    "load_graph",
    "collect_dependencies",
]
