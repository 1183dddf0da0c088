"""OpenClaw and resource path resolution.

Resolves paths to the gateway's state directory and to the bundled context
templates. Uses environment variables when available, falls back to
conventional defaults. Nothing is cached: every call re-reads the environment
so directories added between runs are picked up.

Environment variables:
    CLAWX_OPENCLAW_DIR — gateway state directory (default: ~/.openclaw)
    CLAWX_RESOURCES_DIR — bundled resources (default: <package>/resources)
"""

from __future__ import annotations

import os
from pathlib import Path

_OPENCLAW_DIRNAME = ".openclaw"
_CONFIG_FILENAME = "openclaw.json"
_DEFAULT_WORKSPACE_NAME = "workspace"
_BUNDLED_RESOURCES = Path(__file__).parent / "resources"


def openclaw_dir() -> Path:
    """Return the gateway's base configuration directory."""
    env = os.environ.get("CLAWX_OPENCLAW_DIR")
    if env:
        return Path(env).expanduser()
    return Path.home() / _OPENCLAW_DIRNAME


def openclaw_config_path(base: Path | None = None) -> Path:
    """Return the path to openclaw.json."""
    return (base or openclaw_dir()) / _CONFIG_FILENAME


def default_workspace_dir(base: Path | None = None) -> Path:
    """Return the workspace used when discovery finds nothing."""
    return (base or openclaw_dir()) / _DEFAULT_WORKSPACE_NAME


def resources_dir() -> Path | None:
    """Return the bundled resources directory, or None if it cannot be resolved."""
    env = os.environ.get("CLAWX_RESOURCES_DIR")
    if env:
        return Path(env).expanduser()
    return _BUNDLED_RESOURCES if _BUNDLED_RESOURCES.is_dir() else None


def context_dir() -> Path | None:
    """Return the directory holding the *.clawx.md templates."""
    res = resources_dir()
    if res is None:
        return None
    return res / "context"
