"""Repair and sync CLI commands."""

import argparse

from clawx_context.sync import repair_hollow_bootstraps, run_startup, sync_context


def cmd_repair(args: argparse.Namespace) -> int:
    report = repair_hollow_bootstraps(dry_run=args.dry_run, openclaw_home=args.openclaw_home)
    print(report.summary())
    return 1 if report.errors else 0


def cmd_sync(args: argparse.Namespace) -> int:
    report = sync_context(
        dry_run=args.dry_run,
        openclaw_home=args.openclaw_home,
        context_dir=args.context_dir,
    )
    print(report.summary())
    return 1 if report.errors else 0


def cmd_startup(args: argparse.Namespace) -> int:
    repair, sync = run_startup(
        dry_run=args.dry_run,
        openclaw_home=args.openclaw_home,
        context_dir=args.context_dir,
    )
    print(repair.summary())
    print()
    print(sync.summary())
    return 1 if repair.errors or sync.errors else 0
