"""Command line interface for the ClawX context synchronizer.

Usage:
    clawx-context workspaces
    clawx-context repair [--dry-run]
    clawx-context sync [--dry-run] [--context-dir <path>]
    clawx-context startup [--dry-run] [--context-dir <path>]
"""

import argparse
import logging
import sys

from clawx_context import __version__
from clawx_context.cli.context import cmd_repair, cmd_startup, cmd_sync
from clawx_context.cli.workspaces import cmd_workspaces


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clawx-context",
        description="Keep ClawX context sections in OpenClaw agent workspaces",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--openclaw-home", default=None,
        help="OpenClaw state directory (default: $CLAWX_OPENCLAW_DIR or ~/.openclaw)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log skipped files as well",
    )
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("workspaces", help="List discovered agent workspaces")

    rep = sub.add_parser(
        "repair", help="Remove bootstrap files holding only a ClawX section",
    )
    rep.add_argument(
        "--dry-run", action="store_true",
        help="Report without deleting",
    )

    for name, help_text in (
        ("sync", "Merge ClawX context into workspace documents"),
        ("startup", "Repair, then sync (gateway startup order)"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument(
            "--dry-run", action="store_true",
            help="Report changes without writing",
        )
        cmd.add_argument(
            "--context-dir", default=None,
            help="Directory of *.clawx.md templates (default: bundled resources)",
        )

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    dispatch = {
        "workspaces": cmd_workspaces,
        "repair": cmd_repair,
        "sync": cmd_sync,
        "startup": cmd_startup,
    }
    return dispatch[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
