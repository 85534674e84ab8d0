"""Project discovery CLI command."""

import argparse

from tailwind_sync.cli.common import load_options, load_project_graph, resolve_workspace


def cmd_projects(args: argparse.Namespace) -> int:
    from tailwind_sync.classifier import find_tailwind_projects
    from tailwind_sync.tree import FsTree

    tree = FsTree(resolve_workspace(args))
    options = load_options(args)
    candidates = find_tailwind_projects(
        load_project_graph(args), tree, options.additional_style_paths,
    )

    print(f"Found {len(candidates)} Tailwind projects:\n")
    for c in candidates:
        how = "vite plugin" if c.uses_vite_plugin else "css import"
        print(f"  {c.project.name:<30} {c.target_file or '<no stylesheet>'}  ({how})")
    return 0
