"""Tests for the command-line entry point."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from kubesnap import cli


class TestMain:
    """Tests for the kubesnap command."""

    def test_runs_app_with_loaded_settings(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config = tmp_path / "settings.yaml"
        config.write_text("clusters:\n  - name: prod\n", encoding="utf-8")
        launched: list[tuple[list[str], Path]] = []

        def _fake_run(self) -> None:
            launched.append((self.registry.names(), self.config_path))

        monkeypatch.setattr("kubesnap.app.SnapshotMonitorApp.run", _fake_run)
        monkeypatch.setattr(cli, "configure_logging", lambda level, log_file: None)

        result = CliRunner().invoke(cli.main, ["--config", str(config), "--log-file", str(tmp_path / "x.log")])

        assert result.exit_code == 0, result.output
        assert launched == [(["prod"], config)]

    def test_invalid_config_exits_with_message(self, tmp_path: Path) -> None:
        config = tmp_path / "settings.yaml"
        config.write_text("- not a mapping\n", encoding="utf-8")

        result = CliRunner().invoke(cli.main, ["--config", str(config)])

        assert result.exit_code == 1
        assert "must contain a mapping" in result.output

    def test_log_level_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        levels: list[str] = []
        monkeypatch.setattr("kubesnap.app.SnapshotMonitorApp.run", lambda self: None)
        monkeypatch.setattr(cli, "configure_logging", lambda level, log_file: levels.append(level))

        result = CliRunner().invoke(
            cli.main,
            ["--config", str(tmp_path / "missing.yaml"), "--log-level", "debug"],
        )

        assert result.exit_code == 0, result.output
        assert levels == ["DEBUG"]
