"""prefgroups CLI entry point."""

import logging

import click

from prefgroups.config import SerializerSettings


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log at DEBUG level.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """prefgroups - validated preference stores and JSONC settings files."""
    try:
        settings = SerializerSettings.from_env()
    except ValueError as e:
        click.echo(click.style(f"Invalid configuration: {e}", fg="red"), err=True)
        raise SystemExit(1)
    level = logging.DEBUG if verbose else settings.logging_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = settings


# Register subcommands
from prefgroups.cli.schema_cmd import check, render, schema  # noqa: E402

cli.add_command(schema)
cli.add_command(render)
cli.add_command(check)
