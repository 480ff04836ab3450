"""CLI command: semantic-css convert -- convert a file or directory tree."""

from __future__ import annotations

import logging
import sys

import click

from semantic_css.config import ConverterConfig
from semantic_css.errors import ConversionError
from semantic_css.events.bus import EventBus
from semantic_css.events.types import (
    CompilationFallback,
    FileConverted,
    FileSkipped,
    RunStarted,
)
from semantic_css.report import render_text
from semantic_css.runner import ConversionRunner


def _echo_event(event: object) -> None:
    if isinstance(event, RunStarted):
        click.echo(f"Converting from: {event.input_dir}")
        click.echo(f"Output to: {event.output_dir}")
        click.echo(f"Files found: {event.file_count}")
    elif isinstance(event, FileConverted):
        click.echo(f"  converted {event.path} ({event.rule_count} rules) -> {event.css_path}")
    elif isinstance(event, FileSkipped):
        click.echo(f"  skipped {event.path}: {event.reason}")
    elif isinstance(event, CompilationFallback):
        click.echo(f"Warning: {event.path}: {event.warning}", err=True)


@click.command()
@click.option("-i", "--input", "input_path", required=True, help="Input file or directory")
@click.option("-o", "--output", "output_path", required=True, help="Output directory")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Verbose output")
@click.option("--compile", "compile_css", is_flag=True, default=False,
              help="Also emit compiled tailwind/vanilla dual output")
@click.option("--ai/--no-ai", default=False, help="Resolve unknown classes through the AI client")
@click.option("--report", is_flag=True, default=False, help="Write and print a change report per file")
def convert(
    input_path: str,
    output_path: str,
    verbose: bool,
    compile_css: bool,
    ai: bool,
    report: bool,
) -> None:
    """Convert utility classes in HTML/JSX/TSX/Vue files to CSS modules.

    Writes a ``.module.css`` file and rewritten markup for every source file
    under INPUT into the mirrored location under OUTPUT.
    """
    if verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    config = ConverterConfig.from_env(compile=compile_css, use_ai=ai, write_report=report)

    event_bus = EventBus(record=True)
    if verbose:
        event_bus.on_all(_echo_event)

    runner = ConversionRunner(config, event_bus=event_bus)
    try:
        summary = runner.run(input_path, output_path)
    except ConversionError as exc:
        click.echo(f"Error processing files: {exc}", err=True)
        sys.exit(1)

    if report:
        for outcome in summary.converted:
            if outcome.report is not None:
                click.echo(render_text(outcome.report))
                click.echo()

    fallbacks = {e.path for e in event_bus.of_type(CompilationFallback)}
    if fallbacks and verbose:
        click.echo(f"Compilation fell back to plain CSS for {len(fallbacks)} file(s)", err=True)

    unresolved = sorted({name for o in summary.converted for name in o.unresolved})
    if unresolved:
        click.echo(f"Unresolved classes: {' '.join(unresolved)}", err=True)

    click.echo(
        f"Converted {len(summary.converted)} file(s), skipped {len(summary.skipped)}."
    )
    click.echo("Conversion completed successfully!")
