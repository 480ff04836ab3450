"""CLI command: semantic-css inspect -- print the CSS a file would produce."""

from __future__ import annotations

import sys

import click

from semantic_css.converter import Converter
from semantic_css.errors import SourceReadError
from semantic_css.generator.css import CSSGenerator
from semantic_css.parser.markup import MarkupParser


@click.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option("--mappings", is_flag=True, default=False, help="Also list class-to-name mappings")
def inspect(source: str, mappings: bool) -> None:
    """Convert SOURCE in memory and print the generated CSS.

    Nothing is written to disk.
    """
    try:
        document = MarkupParser().parse_file(source)
    except SourceReadError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    result = Converter().convert_document(document)
    if result.is_empty:
        click.echo("No utility classes found.")
        return

    if result.component:
        click.echo(f"/* Component: {result.component} */")
    click.echo(CSSGenerator().render(result.rules), nl=False)

    if mappings:
        click.echo()
        click.echo("Mappings:")
        for mapping in result.mappings:
            click.echo(f"  .{mapping.semantic_name} <- {mapping.original_classes}")
