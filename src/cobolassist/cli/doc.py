"""cobolassist doc command - show the documentation of one declaration."""

from pathlib import Path

import click

from cobolassist.cli.utils import DEFAULT_SOURCE_ENCODING, read_source
from cobolassist.completion.index import build_index
from cobolassist.source.scanner import DATA_ITEM, PARAGRAPH


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("name")
@click.option("--encoding", default=DEFAULT_SOURCE_ENCODING, show_default=True)
def doc_command(file: Path, name: str, encoding: str) -> None:
    """Print the documentation of paragraph or data item NAME in FILE as markdown."""
    buffer = read_source(file, encoding)
    for pattern in (PARAGRAPH, DATA_ITEM):
        record = build_index(buffer, pattern).get(name)
        if record is not None:
            break
    else:
        raise click.ClickException(f"'{name}' is not declared in {file}")

    markdown = record.documentation.to_markdown()
    click.echo(markdown if markdown else f"'{name}' has no documentation.")
