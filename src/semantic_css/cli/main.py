"""semantic-css CLI entry point: Click group with subcommands."""

import click

from semantic_css import __version__


@click.group()
@click.version_option(version=__version__, prog_name="semantic-css")
def cli() -> None:
    """semantic-css - convert utility-class markup into semantic CSS modules."""


# Import and register subcommands
from semantic_css.cli.convert import convert  # noqa: E402
from semantic_css.cli.inspect import inspect  # noqa: E402

cli.add_command(convert)
cli.add_command(inspect)
