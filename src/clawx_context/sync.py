"""Workspace context sync — repairs hollow bootstraps, merges ClawX sections.

The startup sequence:
1. Discover every agent workspace (config, workspace* scan, default)
2. Delete bootstrap files that hold nothing but a ClawX section, so the
   gateway re-seeds them with its full template
3. Load the bundled *.clawx.md templates once
4. For each workspace x template, merge the section into the matching
   document if the gateway has already created it

Target documents are never created here; only the workspace directory is.
Every failure is recorded per file and logged, never raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from clawx_context import DOCUMENT_SUFFIX
from clawx_context.paths import context_dir as default_context_dir
from clawx_context.section import MALFORMED, is_hollow_bootstrap, merge_section, section_state
from clawx_context.templates import ContextTemplate, load_templates
from clawx_context.workspace.discover import resolve_workspace_dirs

logger = logging.getLogger(__name__)

UPDATED = "updated"
UNCHANGED = "unchanged"
REMOVED = "removed"
SKIPPED = "skipped"
ERROR = "error"
CREATED_DIR = "created-dir"


@dataclass
class FileAction:
    """Outcome for one file or directory."""

    path: str
    action: str
    reason: str | None = None


@dataclass
class SyncReport:
    """Per-item outcomes of a repair or sync pass."""

    operation: str
    dry_run: bool = False
    actions: list[FileAction] = field(default_factory=list)

    def record(self, path: Path | str, action: str, reason: str | None = None) -> None:
        self.actions.append(FileAction(str(path), action, reason))

    def _with(self, action: str) -> list[FileAction]:
        return [a for a in self.actions if a.action == action]

    @property
    def updated(self) -> list[FileAction]:
        return self._with(UPDATED)

    @property
    def unchanged(self) -> list[FileAction]:
        return self._with(UNCHANGED)

    @property
    def removed(self) -> list[FileAction]:
        return self._with(REMOVED)

    @property
    def skipped(self) -> list[FileAction]:
        return self._with(SKIPPED)

    @property
    def errors(self) -> list[FileAction]:
        return self._with(ERROR)

    @property
    def created_dirs(self) -> list[FileAction]:
        return self._with(CREATED_DIR)

    def reasons(self, path: Path | str) -> list[str]:
        """Skip/error reasons recorded for a path."""
        return [a.reason for a in self.actions if a.path == str(path) and a.reason]

    def summary(self) -> str:
        lines = [f"ClawX Context {self.operation.title()}", "─" * 40]
        for label, items in (
            ("Updated", self.updated),
            ("Unchanged", self.unchanged),
            ("Removed", self.removed),
            ("Created dirs", self.created_dirs),
            ("Skipped", self.skipped),
        ):
            if items:
                lines.append(f"  {label + ':':<14}{len(items)}")
        if self.errors:
            lines.append(f"  {'Errors:':<14}{len(self.errors)}")
            for e in self.errors:
                lines.append(f"    - {e.path}: {e.reason}")
        if not self.actions:
            lines.append("  Nothing to do.")
        if self.dry_run:
            lines.append("\n[DRY RUN] No files were modified.")
        return "\n".join(lines)


def repair_hollow_bootstraps(
    dry_run: bool = False,
    openclaw_home: Path | str | None = None,
) -> SyncReport:
    """Delete bootstrap documents that contain only the ClawX section.

    Must run before sync_context in a given startup, otherwise the hollow
    file is merged into and never re-seeded by the gateway.
    """
    report = SyncReport("repair", dry_run=dry_run)

    for workspace in resolve_workspace_dirs(openclaw_home):
        try:
            if not workspace.is_dir():
                continue
            documents = sorted(p for p in workspace.iterdir() if p.name.endswith(DOCUMENT_SUFFIX))
        except OSError as e:
            logger.warning("Cannot list workspace %s: %s", workspace, e)
            report.record(workspace, SKIPPED, "unreadable")
            continue

        for doc in documents:
            try:
                if not doc.is_file():
                    continue
                content = read_document(doc)
            except (OSError, UnicodeDecodeError) as e:
                logger.debug("Skipping unreadable %s: %s", doc, e)
                report.record(doc, SKIPPED, "unreadable")
                continue

            if not is_hollow_bootstrap(content):
                continue

            if not dry_run:
                try:
                    doc.unlink()
                except OSError as e:
                    logger.warning("Failed to remove ClawX-only bootstrap file %s: %s", doc, e)
                    report.record(doc, ERROR, str(e))
                    continue
            logger.info("Removed ClawX-only bootstrap file for re-seeding: %s (%s)", doc.name, workspace)
            report.record(doc, REMOVED, "hollow")

    return report


def sync_context(
    dry_run: bool = False,
    openclaw_home: Path | str | None = None,
    context_dir: Path | str | None = None,
) -> SyncReport:
    """Merge every bundled template into the matching workspace documents."""
    report = SyncReport("sync", dry_run=dry_run)

    templates_dir = Path(context_dir) if context_dir else default_context_dir()
    try:
        found = templates_dir is not None and templates_dir.is_dir()
    except OSError:
        found = False
    if not found:
        logger.debug("ClawX context directory not found, skipping context merge")
        return report

    try:
        templates = load_templates(templates_dir)
    except OSError as e:
        logger.warning("Cannot load context templates from %s: %s", templates_dir, e)
        report.record(templates_dir, ERROR, str(e))
        return report

    if not templates:
        return report

    for workspace in resolve_workspace_dirs(openclaw_home):
        try:
            exists = workspace.is_dir()
        except OSError as e:
            logger.warning("Cannot stat workspace %s: %s", workspace, e)
            report.record(workspace, SKIPPED, "unreadable")
            continue

        if not exists:
            if not dry_run:
                try:
                    workspace.mkdir(parents=True, exist_ok=True)
                except OSError as e:
                    logger.warning("Cannot create workspace %s: %s", workspace, e)
                    report.record(workspace, ERROR, str(e))
                    continue
            report.record(workspace, CREATED_DIR)

        for template in templates:
            sync_document(workspace, template, report)

    return report


def sync_document(workspace: Path, template: ContextTemplate, report: SyncReport) -> str:
    """Merge one template into one workspace document; returns the action taken."""
    target = workspace / template.target_name

    try:
        present = target.is_file()
    except OSError as e:
        logger.warning("Cannot stat %s: %s", target, e)
        report.record(target, SKIPPED, "unreadable")
        return SKIPPED

    if not present:
        logger.debug(
            "Skipping %s in %s (file does not exist yet, will be seeded by gateway)",
            template.target_name, workspace,
        )
        report.record(target, SKIPPED, "target-missing")
        return SKIPPED

    try:
        existing = read_document(target)
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("Cannot read %s: %s", target, e)
        report.record(target, SKIPPED, "unreadable")
        return SKIPPED

    if section_state(existing) == MALFORMED:
        logger.warning("Leaving %s alone: ClawX markers are out of order", target)
        report.record(target, SKIPPED, "malformed-markers")
        return SKIPPED

    merged = merge_section(existing, template.body)
    if merged == existing:
        report.record(target, UNCHANGED)
        return UNCHANGED

    if not report.dry_run:
        try:
            write_document(target, merged)
        except OSError as e:
            logger.warning("Cannot write %s: %s", target, e)
            report.record(target, ERROR, str(e))
            return ERROR
    logger.info("Merged ClawX context into %s (%s)", template.target_name, workspace)
    report.record(target, UPDATED)
    return UPDATED


def run_startup(
    dry_run: bool = False,
    openclaw_home: Path | str | None = None,
    context_dir: Path | str | None = None,
) -> tuple[SyncReport, SyncReport]:
    """Repair, then sync — the order a gateway startup hook should use."""
    repair = repair_hollow_bootstraps(dry_run=dry_run, openclaw_home=openclaw_home)
    sync = sync_context(dry_run=dry_run, openclaw_home=openclaw_home, context_dir=context_dir)
    return repair, sync


def read_document(path: Path) -> str:
    # newline="" keeps CRLF intact so comparisons are byte-exact
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def write_document(path: Path, content: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)
