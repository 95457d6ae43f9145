"""cobolassist scan command - list declarations of a source file."""

from pathlib import Path

import click

from cobolassist.cli.utils import DEFAULT_SOURCE_ENCODING, echo_json, read_source
from cobolassist.completion.index import build_index
from cobolassist.source.scanner import DATA_ITEM, PARAGRAPH


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--variables", is_flag=True, help="List data items instead of paragraphs")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option("--encoding", default=DEFAULT_SOURCE_ENCODING, show_default=True)
def scan_command(file: Path, variables: bool, as_json: bool, encoding: str) -> None:
    """List the paragraphs (or data items) declared in FILE.

    Only the first declaration of each name is listed.
    """
    buffer = read_source(file, encoding)
    index = build_index(buffer, DATA_ITEM if variables else PARAGRAPH)

    if as_json:
        echo_json(
            [
                {
                    "name": record.name,
                    "line": record.line_index + 1,
                    "summary": record.documentation.summary,
                }
                for record in index.values()
            ]
        )
        return

    if not index:
        click.echo("No declarations found.")
        return
    width = max(len(name) for name in index)
    for record in index.values():
        summary = record.documentation.summary
        line = f"{record.line_index + 1:>6}  {record.name:<{width}}"
        click.echo(f"{line}  {summary}" if summary else line)
