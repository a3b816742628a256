"""CLI interface for historian — click-based command."""

from __future__ import annotations

from datetime import date
from pathlib import Path

import click

from historian.config import (
    DEFAULT_CONFIG_PATH,
    HistorianConfig,
    generate_config_toml,
    load_config,
)
from historian.errors import HistorianError
from historian.formatter import check_template
from historian.models import TimeRange
from historian.pipeline import Pipeline


def parse_date_arg(value: str) -> TimeRange:
    """Parse a date argument into a single-day TimeRange.

    Supports: 'today', 'yesterday', 'YYYY-MM-DD'
    """
    value = value.strip().lower()
    if value == "today":
        return TimeRange.today()
    if value == "yesterday":
        return TimeRange.yesterday()
    try:
        d = date.fromisoformat(value)
        return TimeRange.for_date(d)
    except ValueError:
        msg = f"Invalid date: '{value}'. Use 'today', 'yesterday', or YYYY-MM-DD."
        raise click.BadParameter(msg, param_hint="'-d' / '--date'") from None


@click.command()
@click.argument("hosts", nargs=-1)
@click.option(
    "-d", "--date", "date_str", default="today", help="Day to show: today, yesterday or YYYY-MM-DD"
)
@click.option("-v", "--verbose", is_flag=True, help="Show progress messages")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("-t", "--template", default=None, help="Output template, e.g. '{host} {cmd}'")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Config file (default: {DEFAULT_CONFIG_PATH})",
)
@click.option("--init", is_flag=True, help="Create default configuration and exit")
@click.version_option(package_name="historian")
def cli(
    hosts: tuple[str, ...],
    date_str: str,
    verbose: bool,
    no_color: bool,
    template: str | None,
    config_path: Path | None,
    init: bool,
) -> None:
    """Historian — show shell history of many hosts as one timeline.

    Fetches ~/.bash_history from each HOST over ssh and prints the commands
    run on the given day, oldest first. Without HOSTS, targets are taken from
    the ssh commands in your local shell history.
    """
    if init:
        _init_config(config_path or DEFAULT_CONFIG_PATH)
        return

    config = _load_config(config_path)
    time_range = parse_date_arg(date_str)

    if template is not None:
        problem = check_template(template)
        if problem:
            raise click.BadParameter(problem, param_hint="'-t' / '--template'")

    pipeline = Pipeline(
        config,
        verbose=verbose or None,
        colorize=False if no_color else None,
        template=template,
    )
    try:
        pipeline.run(list(hosts), time_range)
    except HistorianError as e:
        raise click.ClickException(str(e)) from None


def _init_config(config_path: Path) -> None:
    """Write the default configuration file."""
    if config_path.exists() and not click.confirm(
        f"Config already exists at {config_path}. Overwrite?"
    ):
        return

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(generate_config_toml(HistorianConfig()))
    click.echo(f"✓ Config created at: {config_path}")


def _load_config(config_path: Path | None) -> HistorianConfig:
    """Load config, falling back to defaults when the default file is absent."""
    if config_path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            return HistorianConfig()
        config_path = DEFAULT_CONFIG_PATH

    try:
        return load_config(config_path)
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e)) from None
