"""Expression CLI commands — validate, build, show."""

import json

import click

from cronbuilder.expression import (
    FIELD_ORDER,
    FIELD_RANGES,
    CronBuilder,
    CronExpressionError,
)


def _split_assignment(ctx, param, values: tuple[str, ...]) -> list[tuple[str, str]]:
    """Parse repeated FIELD=VALUE options."""
    pairs = []
    for item in values:
        field, sep, value = item.partition("=")
        if not sep or not field:
            raise click.BadParameter(f"expected FIELD=VALUE, got '{item}'", param=param)
        pairs.append((field.strip(), value.strip()))
    return pairs


def _fail(exc: CronExpressionError, as_json: bool = False):
    if as_json:
        click.echo(json.dumps({"error": exc.to_dict()}))
    else:
        click.echo(click.style(f"Error [{exc.code}]: {exc.message}", fg="red"), err=True)
    raise SystemExit(1)


@click.group()
def expression():
    """Cron expression commands."""
    pass


@expression.command()
@click.argument("text")
def validate(text: str):
    """Validate a cron expression and print its canonical form."""
    try:
        builder = CronBuilder(text)
    except CronExpressionError as exc:
        _fail(exc)

    click.echo(builder.build())
    click.echo(click.style("Expression is valid.", fg="green"))


@expression.command()
@click.argument("text", required=False, default=None)
@click.option(
    "--set", "set_values", multiple=True, callback=_split_assignment,
    help="Replace a field, e.g. --set hour=1,2,3 (an empty value resets it).",
)
@click.option(
    "--add", "add_values", multiple=True, callback=_split_assignment,
    help="Add values to a field, e.g. --add minute=15.",
)
@click.option(
    "--remove", "remove_values", multiple=True, callback=_split_assignment,
    help="Remove a value from a field, e.g. --remove minute=15.",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Print fields as JSON.")
def build(text, set_values, add_values, remove_values, as_json: bool):
    """Build an expression, optionally starting from TEXT.

    Mutations are applied in order: --set, then --add, then --remove.

        cronbuilder expression build --add hour=5 --add hour=10
        cronbuilder expression build "0 0 1 1 0" --set month=1,6 --json
    """
    try:
        builder = CronBuilder(text)
        for field, value in set_values:
            builder.set(field, value.split(",") if value else [])
        for field, value in add_values:
            builder.add_value(field, value)
        for field, value in remove_values:
            message = builder.remove_value(field, value)
            if message and not as_json:
                click.echo(click.style(message, fg="yellow"), err=True)
    except CronExpressionError as exc:
        _fail(exc, as_json)

    if as_json:
        data = builder.get_all().to_dict()
        data["expression"] = builder.build()
        click.echo(json.dumps(data))
    else:
        click.echo(builder.build())


@expression.command()
@click.argument("text")
def show(text: str):
    """Show each field of an expression with its allowed range."""
    try:
        builder = CronBuilder(text)
    except CronExpressionError as exc:
        _fail(exc)

    for measure in FIELD_ORDER:
        limits = FIELD_RANGES[measure]
        click.echo(
            f"  {measure.value:<14} {builder.get(measure):<20} "
            f"({limits.min}-{limits.max})"
        )
