"""Tests for the clawx-context CLI."""

import argparse

import pytest

from clawx_context import CLAWX_BEGIN, CLAWX_END
from clawx_context.cli import build_parser, main


class TestParser:
    def test_build_parser_returns_parser(self):
        assert isinstance(build_parser(), argparse.ArgumentParser)

    def test_no_args_shows_help(self, capsys):
        assert main([]) == 0
        assert "clawx-context" in capsys.readouterr().out

    @pytest.mark.parametrize("cmd", [
        ["--help"],
        ["sync", "--help"],
        ["repair", "--help"],
        ["startup", "--help"],
    ])
    def test_help(self, cmd):
        with pytest.raises(SystemExit) as exc:
            main(cmd)
        assert exc.value.code == 0

    def test_sync_flags(self):
        args = build_parser().parse_args(
            ["--openclaw-home", "/tmp/oc", "sync", "--dry-run", "--context-dir", "/tmp/ctx"]
        )
        assert args.openclaw_home == "/tmp/oc"
        assert args.dry_run is True
        assert args.context_dir == "/tmp/ctx"


class TestCommands:
    def test_workspaces(self, openclaw_home, capsys):
        (openclaw_home / "workspace-a").mkdir()
        assert main(["workspaces"]) == 0
        out = capsys.readouterr().out
        assert "Agent workspaces (1)" in out
        assert "workspace-a" in out

    def test_sync(self, openclaw_home, context_dir, capsys):
        ws = openclaw_home / "workspace"
        ws.mkdir()
        (ws / "AGENTS.md").write_text("Hello\n")

        assert main(["sync", "--context-dir", str(context_dir)]) == 0
        assert CLAWX_BEGIN in (ws / "AGENTS.md").read_text()
        assert "Updated:" in capsys.readouterr().out

    def test_repair_dry_run(self, openclaw_home, capsys):
        ws = openclaw_home / "workspace"
        ws.mkdir()
        (ws / "AGENTS.md").write_text(f"{CLAWX_BEGIN}\nx\n{CLAWX_END}")

        assert main(["repair", "--dry-run"]) == 0
        assert (ws / "AGENTS.md").exists()
        out = capsys.readouterr().out
        assert "Removed:" in out
        assert "[DRY RUN]" in out

    def test_startup_explicit_home(self, tmp_path, context_dir, capsys):
        ws = tmp_path / "state" / "workspace-main"
        ws.mkdir(parents=True)
        (ws / "AGENTS.md").write_text(f"{CLAWX_BEGIN}\nx\n{CLAWX_END}")

        rc = main([
            "--openclaw-home", str(tmp_path / "state"),
            "startup", "--context-dir", str(context_dir),
        ])
        assert rc == 0
        assert not (ws / "AGENTS.md").exists()
        out = capsys.readouterr().out
        assert "ClawX Context Repair" in out
        assert "ClawX Context Sync" in out

    def test_errors_give_exit_status(self, monkeypatch, capsys):
        from clawx_context.sync import SyncReport

        def failing_sync(**kwargs):
            report = SyncReport("sync")
            report.record("/w/AGENTS.md", "error", "disk full")
            return report

        monkeypatch.setattr("clawx_context.cli.context.sync_context", failing_sync)
        assert main(["sync"]) == 1
        assert "disk full" in capsys.readouterr().out
