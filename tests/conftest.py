"""Shared test fixtures for clawx-context."""

import errno
import os
from pathlib import Path

import pytest


@pytest.fixture
def home(tmp_path, monkeypatch):
    """Isolated home directory; ~ and Path.home() resolve here."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.delenv("CLAWX_OPENCLAW_DIR", raising=False)
    monkeypatch.delenv("CLAWX_RESOURCES_DIR", raising=False)
    return home_dir


@pytest.fixture
def openclaw_home(home):
    base = home / ".openclaw"
    base.mkdir()
    return base


@pytest.fixture
def context_dir(tmp_path):
    ctx = tmp_path / "resources" / "context"
    ctx.mkdir(parents=True)
    (ctx / "AGENTS.clawx.md").write_text("Rules: be nice")
    return ctx


@pytest.fixture
def deny_stat(monkeypatch):
    """Make Path.stat raise EACCES for a path and everything below it."""
    denied = []
    real_stat = Path.stat

    def stat(self, *args, **kwargs):
        text = str(self)
        for blocked in denied:
            if text == blocked or text.startswith(blocked + os.sep):
                raise PermissionError(errno.EACCES, "Permission denied", text)
        return real_stat(self, *args, **kwargs)

    monkeypatch.setattr(Path, "stat", stat)
    return lambda path: denied.append(str(path))
