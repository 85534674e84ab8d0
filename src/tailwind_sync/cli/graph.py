"""Project graph CLI commands."""

import argparse

from tailwind_sync.cli.common import load_project_graph


def cmd_graph_deps(args: argparse.Namespace) -> int:
    from tailwind_sync.graph.collector import collect_dependencies

    graph = load_project_graph(args)
    if args.project not in graph.nodes:
        print(f"ERROR: Project '{args.project}' not found")
        return 1

    deps = collect_dependencies(args.project, graph)
    print(f"Transitive dependencies of {args.project}: {len(deps)}\n")
    for name in sorted(deps):
        node = graph.get(name)
        root = node.root if node and node.root else "<missing>"
        print(f"  {name:<30} {root}")
    return 0


def cmd_graph_check(args: argparse.Namespace) -> int:
    from tailwind_sync.graph.validate import validate_graph

    report = validate_graph(load_project_graph(args))
    print(report.summary())
    return 0 if report.passed else 1


def cmd_graph_show(args: argparse.Namespace) -> int:
    print(load_project_graph(args).summary())
    return 0
