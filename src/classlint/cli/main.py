"""classlint CLI entry point: Click group with subcommands."""

import click

from classlint import __version__


@click.group()
@click.version_option(version=__version__, prog_name="classlint")
def cli() -> None:
    """classlint - find duplicate and unknown utility classes and sort class lists."""


# Import and register subcommands
from classlint.cli.lint import lint  # noqa: E402
from classlint.cli.inspect import inspect  # noqa: E402

cli.add_command(lint)
cli.add_command(inspect)
