"""Command-line interface for the snapshot monitor."""

from __future__ import annotations

from pathlib import Path

import click

from kubesnap.models.state.config_manager import CONFIG_PATH_ENV, ConfigLoadError, ConfigManager
from kubesnap.utils.logging import configure_logging


@click.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar=CONFIG_PATH_ENV,
    default=None,
    help="Settings YAML file (default: ~/.config/kubesnap/settings.yaml).",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Override the log level from settings.",
)
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=Path("~/.local/state/kubesnap/kubesnap.log"),
    show_default=True,
    help="Log destination; the terminal is used by the TUI.",
)
def main(config_path: Path | None, log_level: str | None, log_file: Path) -> None:
    """Watch Virtual Machines and their VolumeSnapshots across clusters."""
    try:
        settings = ConfigManager.load(config_path)
    except ConfigLoadError as e:
        raise click.ClickException(str(e)) from e

    configure_logging(log_level or settings.log_level, log_file)

    from kubesnap.app import SnapshotMonitorApp

    SnapshotMonitorApp(settings=settings, config_path=ConfigManager.config_path(config_path)).run()


if __name__ == "__main__":
    main()
