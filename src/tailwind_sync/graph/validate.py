"""Project graph validation — missing targets, self-deps, rootless projects, cycles.

The sync tolerates all of these; the report exists so they can be fixed
at the source.
"""

from collections import defaultdict
from dataclasses import dataclass, field

from tailwind_sync.graph.models import ProjectGraph


@dataclass
class GraphReport:
    """Result of project graph validation."""

    total_projects: int = 0
    total_edges: int = 0
    missing_targets: list[tuple[str, str]] = field(default_factory=list)
    self_deps: list[str] = field(default_factory=list)
    rootless: list[str] = field(default_factory=list)
    cycles: list[list[str]] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return (
            len(self.missing_targets) == 0
            and len(self.self_deps) == 0
            and len(self.rootless) == 0
        )

    @property
    def violations(self) -> list[str]:
        v = []
        for f, t in self.missing_targets:
            v.append(f"Missing target: {f} -> {t}")
        for s in self.self_deps:
            v.append(f"Self-dep: {s}")
        for r in self.rootless:
            v.append(f"No root: {r}")
        return v

    def summary(self) -> str:
        lines = [
            "Project Graph Validation",
            "─" * 40,
            f"  Projects: {self.total_projects}",
            f"  Total edges: {self.total_edges}",
            f"  Missing targets: {len(self.missing_targets)}",
            f"  Self-dependencies: {len(self.self_deps)}",
            f"  Projects without root: {len(self.rootless)}",
            f"  Cycles: {len(self.cycles)}",
        ]
        if self.violations:
            lines.append("\n  Violations:")
            for v in self.violations:
                lines.append(f"    {v}")
        if self.cycles:
            # Cycles are legal in a project graph; listed for information only
            lines.append("\n  Cycles:")
            for c in self.cycles:
                lines.append(f"    {' -> '.join(c)}")
        lines.append(f"\n  Result: {'PASS' if self.passed else 'FAIL'}")
        return "\n".join(lines)


def validate_graph(graph: ProjectGraph) -> GraphReport:
    """Validate a project graph.

    Checks:
    1. All edge targets exist as nodes
    2. No self-dependencies
    3. Every project has a root
    4. Cycles (reported, not failing)

    Args:
        graph: Loaded project graph.

    Returns:
        GraphReport with all findings.
    """
    report = GraphReport(total_projects=len(graph.nodes), total_edges=graph.total_edges)

    adj: dict[str, list[str]] = defaultdict(list)
    for source, edges in graph.dependencies.items():
        for edge in edges:
            if edge.target not in graph.nodes:
                report.missing_targets.append((source, edge.target))
            if edge.target == source:
                report.self_deps.append(source)
            else:
                adj[source].append(edge.target)

    for name, node in graph.nodes.items():
        if not node.root:
            report.rootless.append(name)

    # Cycle detection (DFS with coloring)
    WHITE, GRAY, BLACK = 0, 1, 2
    color: dict[str, int] = defaultdict(lambda: WHITE)

    def dfs(node: str, path: list[str]) -> None:
        color[node] = GRAY
        path.append(node)
        for neighbor in adj[node]:
            if color[neighbor] == GRAY:
                cycle_start = path.index(neighbor)
                report.cycles.append(path[cycle_start:] + [neighbor])
            elif color[neighbor] == WHITE:
                dfs(neighbor, path)
        path.pop()
        color[node] = BLACK

    for name in sorted(graph.nodes):
        if color[name] == WHITE:
            dfs(name, [])

    return report
