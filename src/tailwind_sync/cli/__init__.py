"""Unified CLI for tailwind-sync.

Usage:
    tailwind-sync sync [--dry-run] [--check] [--style-path P ...]
    tailwind-sync projects [--style-path P ...]
    tailwind-sync graph show
    tailwind-sync graph deps <project>
    tailwind-sync graph check

Global options:
    --workspace <path>      Workspace root (default: $TAILWIND_SYNC_WORKSPACE_DIR or cwd)
    --graph <file>          Exported project graph (default: <workspace>/graph.json)
    --config <file>         tailwind-sync.yaml (default: <workspace>/tailwind-sync.yaml)
    --style-path <relpath>  Extra stylesheet location, repeatable
    --verbose               Debug logging
"""

import argparse
import sys

from tailwind_sync.cli.graph import cmd_graph_check, cmd_graph_deps, cmd_graph_show
from tailwind_sync.cli.projects import cmd_projects
from tailwind_sync.cli.sync import cmd_sync
from tailwind_sync.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tailwind-sync",
        description="Keep Tailwind @source directives in step with the project graph",
    )
    parser.add_argument(
        "--workspace", default=None,
        help="Workspace root directory",
    )
    parser.add_argument(
        "--graph", default=None,
        help="Path to the exported project graph (JSON or YAML)",
    )
    parser.add_argument(
        "--config", default=None,
        help="Path to tailwind-sync.yaml",
    )
    parser.add_argument(
        "--style-path", action="append", default=[],
        help="Additional stylesheet path relative to each project root",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    # --style-path is also accepted after the sync and projects subcommands
    style_paths = argparse.ArgumentParser(add_help=False)
    style_paths.add_argument(
        "--style-path", dest="sub_style_path", action="append", default=[],
        help="Additional stylesheet path relative to each project root",
    )

    # sync
    sync = sub.add_parser("sync", help="Update managed @source blocks", parents=[style_paths])
    sync.add_argument(
        "--dry-run", action="store_true",
        help="Report changes without writing",
    )
    sync.add_argument(
        "--check", action="store_true",
        help="Exit 1 if any stylesheet is out of sync; never writes",
    )

    # projects
    sub.add_parser(
        "projects", help="List Tailwind projects and their stylesheets",
        parents=[style_paths],
    )

    # graph
    graph = sub.add_parser("graph", help="Project graph operations")
    graph_sub = graph.add_subparsers(dest="subcommand")
    graph_sub.add_parser("show", help="Print projects and edges")
    deps = graph_sub.add_parser("deps", help="Show transitive dependencies")
    deps.add_argument("project", help="Project name")
    graph_sub.add_parser("check", help="Validate the project graph")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    configure_logging(verbose=args.verbose)

    dispatch = {
        ("sync", ""): cmd_sync,
        ("projects", ""): cmd_projects,
        ("graph", "show"): cmd_graph_show,
        ("graph", "deps"): cmd_graph_deps,
        ("graph", "check"): cmd_graph_check,
    }

    subcommand: str | None = getattr(args, "subcommand", None)
    handler = dispatch.get((args.command, subcommand or ""))
    if not handler:
        parser.parse_args([args.command, "--help"])
        return 0

    try:
        return handler(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"ERROR: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
