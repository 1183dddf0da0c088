"""Workspace discovery CLI command."""

import argparse

from clawx_context.workspace.discover import discover_workspaces


def cmd_workspaces(args: argparse.Namespace) -> int:
    report = discover_workspaces(args.openclaw_home)

    print(f"Agent workspaces ({len(report.directories)})")
    print("─" * 40)
    for path, source in report.sources.items():
        marker = "" if path.is_dir() else "  (missing)"
        print(f"  [{source:<7}] {path}{marker}")
    for e in report.errors:
        print(f"  ! {e['source']}: {e['error']}")
    return 0
