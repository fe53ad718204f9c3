"""selectorkit CLI entry point: Click group with subcommands."""

import click

from selectorkit import __version__
from selectorkit.config import SelectorkitConfig, configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level for selectorkit loggers",
)
@click.option("--indent", type=int, default=None, help="Indent JSON output")
@click.pass_context
def cli(ctx: click.Context, log_level: str, indent: int | None) -> None:
    """selectorkit - build CSS selectors from parts."""
    config = SelectorkitConfig(log_level=log_level, json_indent=indent)
    configure_logging(config)
    ctx.obj = config


# Import and register subcommands
from selectorkit.cli.build import build, combine  # noqa: E402
from selectorkit.cli.rectangle import rectangle  # noqa: E402

cli.add_command(build)
cli.add_command(combine)
cli.add_command(rectangle)
