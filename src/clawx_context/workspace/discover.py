"""Discover agent workspace directories under the OpenClaw state directory.

Structure:
    ~/.openclaw/openclaw.json        agents.defaults.workspace, agents.list[].workspace
    ~/.openclaw/workspace*/          one directory per agent

Each source contributes independently. A broken config does not stop the
directory scan, and an unreadable state directory does not discard what the
config declared. The result is never empty.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from clawx_context.paths import default_workspace_dir, openclaw_config_path, openclaw_dir
from clawx_context.workspace.config import read_openclaw_config

logger = logging.getLogger(__name__)

WORKSPACE_PREFIX = "workspace"


@dataclass
class DiscoveryReport:
    """Workspace directories found, with the source that produced each one."""

    sources: dict[Path, str] = field(default_factory=dict)
    errors: list[dict[str, str]] = field(default_factory=list)

    @property
    def directories(self) -> list[Path]:
        return list(self.sources)

    def add(self, path: Path, source: str) -> None:
        # First source wins; later duplicates are ignored
        self.sources.setdefault(path, source)


def expand_workspace_path(raw: str, base: Path) -> Path:
    """Expand a leading ~ and anchor relative paths at the state directory."""
    path = Path(raw.strip()).expanduser()
    if not path.is_absolute():
        path = base / path
    return path


def discover_workspaces(openclaw_home: Path | str | None = None) -> DiscoveryReport:
    """Collect every workspace directory, recording where each came from.

    Args:
        openclaw_home: Gateway state directory. Defaults to ~/.openclaw.

    Returns:
        DiscoveryReport with at least one directory.
    """
    base = Path(openclaw_home) if openclaw_home else openclaw_dir()
    report = DiscoveryReport()

    # 1. Declared in openclaw.json
    config_path = openclaw_config_path(base)
    try:
        config = read_openclaw_config(config_path)
    except FileNotFoundError:
        pass
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("Ignoring unreadable OpenClaw config %s: %s", config_path, e)
        report.errors.append({"source": "config", "path": str(config_path), "error": str(e)})
    else:
        for raw in config.workspace_paths():
            report.add(expand_workspace_path(raw, base), "config")

    # 2. Existing workspace* directories
    try:
        entries = sorted(base.iterdir())
    except FileNotFoundError:
        entries = []
    except OSError as e:
        logger.warning("Cannot scan OpenClaw directory %s: %s", base, e)
        report.errors.append({"source": "scan", "path": str(base), "error": str(e)})
        entries = []
    for entry in entries:
        if not entry.name.startswith(WORKSPACE_PREFIX):
            continue
        try:
            if entry.is_dir():
                report.add(entry, "scan")
        except OSError as e:
            logger.warning("Cannot stat %s: %s", entry, e)
            report.errors.append({"source": "scan", "path": str(entry), "error": str(e)})

    # 3. Fallback
    if not report.sources:
        report.add(default_workspace_dir(base), "default")

    return report


def resolve_workspace_dirs(openclaw_home: Path | str | None = None) -> list[Path]:
    """Return all unique workspace directories, never empty, never raising."""
    return discover_workspaces(openclaw_home).directories
