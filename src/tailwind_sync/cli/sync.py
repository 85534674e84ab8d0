"""Sync CLI commands."""

import argparse

from tailwind_sync.cli.common import load_options, load_project_graph, resolve_workspace


def cmd_sync(args: argparse.Namespace) -> int:
    from tailwind_sync.sync import sync_all
    from tailwind_sync.tree import FsTree

    tree = FsTree(resolve_workspace(args))
    graph = load_project_graph(args)
    result = sync_all(tree, graph, load_options(args))

    if args.check:
        if result.out_of_sync_message:
            print(result.out_of_sync_message)
            for change in tree.list_changes():
                print(f"  - {change.path}")
            return 1
        print("All Tailwind @source directives are up to date.")
        return 0

    print(result.summary())
    if args.dry_run:
        print("\n[DRY RUN] No files were modified.")
        return 0

    tree.flush()
    return 0
