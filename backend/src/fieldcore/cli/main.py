"""fieldcore CLI entry point."""

import logging

import click


@click.group()
@click.option(
    "--log-level",
    envvar="FIELDCORE_LOG_LEVEL",
    default="warning",
    show_default=True,
    type=click.Choice(["debug", "info", "warning", "error"], case_sensitive=False),
    help="Logging level for engine and loader messages.",
)
def cli(log_level: str):
    """fieldcore — validated field engine CLI."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register subcommand groups
from fieldcore.cli.fields_cmd import fields  # noqa: E402

cli.add_command(fields)
