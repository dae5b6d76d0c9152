"""Schedule file CLI commands — validate and list."""

from pathlib import Path

import click

from cronbuilder.schedules.config import ScheduleConfig
from cronbuilder.schedules.loader import (
    ScheduleFileError,
    load_schedule_file,
    validate_schedule_file,
)


def _resolve_schedules_path(target_path: Path | None) -> Path:
    """Use --path if given, otherwise the configured schedule file."""
    if target_path is not None:
        return target_path
    return ScheduleConfig.from_env(Path.cwd()).schedules_path


@click.group()
def schedules():
    """Schedule file commands."""
    pass


@schedules.command()
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat warnings as errors.",
)
@click.option(
    "--path",
    "target_path",
    default=None,
    type=click.Path(path_type=Path),
    help="Schedule file to validate (defaults to CRONBUILDER_SCHEDULES_PATH or ./schedules.yaml).",
)
def validate(strict: bool, target_path: Path | None):
    """Validate every schedule in a YAML schedule file."""
    path = _resolve_schedules_path(target_path)

    if not path.exists():
        click.echo(f"Error: Schedule file not found at {path}", err=True)
        raise SystemExit(1)

    issues = validate_schedule_file(path, strict=strict)
    errors = [i for i in issues if i.severity == "error"]
    warnings = [i for i in issues if i.severity == "warning"]

    for issue in issues:
        colour = "red" if issue.severity == "error" else "yellow"
        click.echo(click.style(str(issue), fg=colour))

    if errors:
        click.echo(
            click.style(
                f"\n{len(errors)} error(s) found"
                + (f", {len(warnings)} warning(s)" if warnings else ""),
                fg="red",
                bold=True,
            )
        )
        raise SystemExit(1)

    if warnings:
        click.echo(click.style(f"{len(warnings)} warning(s) found.", fg="yellow"))

    click.echo(click.style("All schedules are valid.", fg="green", bold=True))


@schedules.command("list")
@click.option(
    "--path",
    "target_path",
    default=None,
    type=click.Path(path_type=Path),
    help="Schedule file to read (defaults to CRONBUILDER_SCHEDULES_PATH or ./schedules.yaml).",
)
def list_cmd(target_path: Path | None):
    """List every schedule with its canonical expression."""
    path = _resolve_schedules_path(target_path)

    try:
        loaded = load_schedule_file(path)
    except ScheduleFileError as exc:
        click.echo(click.style(f"Error: {exc}", fg="red"), err=True)
        raise SystemExit(1)

    if not loaded:
        click.echo("No schedules defined.")
        return

    click.echo(f"{len(loaded)} schedule(s):")
    for name, builder in loaded.items():
        click.echo(f"  {name}: {builder.build()}")
