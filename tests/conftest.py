"""Shared test fixtures for tailwind-sync."""

from pathlib import Path

import pytest

from tailwind_sync.graph.loader import load_graph
from tailwind_sync.graph.models import DependencyEdge, ProjectGraph, ProjectNode

FIXTURES = Path(__file__).parent / "fixtures"


def make_graph(roots: dict[str, str], edges: dict[str, list[str]]) -> ProjectGraph:
    """Build a graph from {name: root} and {name: [targets]}."""
    return ProjectGraph(
        nodes={name: ProjectNode(name, root) for name, root in roots.items()},
        dependencies={
            src: [DependencyEdge(src, tgt) for tgt in targets]
            for src, targets in edges.items()
        },
    )


@pytest.fixture
def graph():
    return load_graph(FIXTURES / "graph-minimal.json")


@pytest.fixture
def build_graph():
    return make_graph
