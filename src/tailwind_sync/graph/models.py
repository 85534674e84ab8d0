"""Project graph data model."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProjectNode:
    """A workspace project and the directory it lives in."""

    name: str
    root: str = ""


@dataclass(frozen=True)
class DependencyEdge:
    source: str
    target: str
    type: str = "static"


@dataclass
class ProjectGraph:
    """Named projects plus the ordered outgoing edges of each one.

    Built once per run and never mutated by the sync.
    """

    nodes: dict[str, ProjectNode] = field(default_factory=dict)
    dependencies: dict[str, list[DependencyEdge]] = field(default_factory=dict)

    def get(self, name: str) -> ProjectNode | None:
        return self.nodes.get(name)

    def targets_of(self, name: str) -> list[str]:
        """Edge targets of a project, in declared order."""
        return [edge.target for edge in self.dependencies.get(name, [])]

    @property
    def total_edges(self) -> int:
        return sum(len(edges) for edges in self.dependencies.values())

    def summary(self) -> str:
        lines = [f"Project Graph: {len(self.nodes)} projects, {self.total_edges} edges"]
        for name in sorted(self.nodes):
            node = self.nodes[name]
            targets = self.targets_of(name)
            lines.append(f"  {name} ({node.root or '<no root>'})")
            for target in targets:
                lines.append(f"    -> {target}")
        return "\n".join(lines)
