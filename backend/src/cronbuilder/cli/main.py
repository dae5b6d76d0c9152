"""cronbuilder CLI entry point."""

import logging

import click

from cronbuilder.schedules.config import ScheduleConfig


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level (defaults to CRONBUILDER_LOG_LEVEL or WARNING).",
)
def cli(log_level: str | None):
    """cronbuilder — build and validate cron expressions."""
    level = (log_level or ScheduleConfig.from_env().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register subcommand groups
from cronbuilder.cli.expression_cmd import expression  # noqa: E402
from cronbuilder.cli.schedules_cmd import schedules  # noqa: E402

cli.add_command(expression)
cli.add_command(schedules)
