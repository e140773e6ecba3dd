"""Click CLI entry point for podchapters."""

from __future__ import annotations

import logging

import click

from podchapters.converter import (
    FORMATS,
    detect_format,
    format_chapter_table,
    load_chapters,
    save_chapters,
)
from podchapters.errors import ChaptersError

FORMAT_CHOICE = click.Choice(FORMATS)


@click.group()
@click.version_option(package_name="podchapters")
@click.option("--verbose", is_flag=True, help="Show debug logging")
def cli(verbose: bool):
    """Convert podcast chapters between JSON, descriptions and MP3 tags."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s  [%(name)s] %(message)s",
    )


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.option("--from", "from_format", type=FORMAT_CHOICE, default=None,
              help="Input format (default: guessed from extension)")
def show(input_path: str, from_format: str | None):
    """List the chapters found in INPUT_PATH."""
    try:
        chapters = load_chapters(input_path, from_format)
    except ChaptersError as e:
        raise click.ClickException(str(e))

    click.echo("Chapters ({}):\n".format(len(chapters)))
    for line in format_chapter_table(chapters):
        click.echo(line)


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False))
@click.argument("output_path", type=click.Path(dir_okay=False))
@click.option("--from", "from_format", type=FORMAT_CHOICE, default=None,
              help="Input format (default: guessed from extension)")
@click.option("--to", "to_format", type=FORMAT_CHOICE, default=None,
              help="Output format (default: guessed from extension)")
@click.option("--audio", default=None, type=click.Path(exists=True, dir_okay=False),
              help="MP3 whose audio is copied when writing MP3 output")
def convert(
    input_path: str,
    output_path: str,
    from_format: str | None,
    to_format: str | None,
    audio: str | None,
):
    """Convert chapters from INPUT_PATH into OUTPUT_PATH.

    When writing MP3 output from an MP3 input, the input's audio is reused
    unless --audio is given.
    """
    try:
        chapters = load_chapters(input_path, from_format)
        if audio is None and (from_format or detect_format(input_path)) == "mp3":
            audio = input_path
        save_chapters(chapters, output_path, to_format, source_audio=audio)
    except ChaptersError as e:
        raise click.ClickException(str(e))

    click.echo("Wrote {} chapters to {}".format(len(chapters), output_path))
