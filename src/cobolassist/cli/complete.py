"""cobolassist complete command - completion items at a cursor position."""

import asyncio
from pathlib import Path

import click

from cobolassist.cli.utils import apply_logging_config, echo_json, read_source
from cobolassist.completion.service import CompletionRequest, CompletionService
from cobolassist.config.loader import load_config
from cobolassist.core.errors import ConfigError
from cobolassist.expansion.models import ExpansionMode
from cobolassist.expansion.naming import build_cache_file_name
from cobolassist.expansion.provider import SubprocessExpansionProvider


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--line", "line", type=int, required=True, help="0-based line of the cursor")
@click.option("--character", type=int, required=True, help="0-based character of the cursor")
@click.option("--expand", is_flag=True, help="Index the copy-expanded source")
@click.option(
    "--project-root",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory holding .cobolassist/config.yaml (default: current directory)",
)
@click.pass_context
def complete_command(
    ctx: click.Context,
    file: Path,
    line: int,
    character: int,
    expand: bool,
    project_root: Path | None,
) -> None:
    """Print completion items for the cursor at LINE/CHARACTER of FILE as JSON."""
    obj = ctx.ensure_object(dict)
    config = obj.get("config")
    if project_root is not None or config is None:
        try:
            config = load_config(project_root)
        except ConfigError as e:
            raise click.ClickException(str(e)) from e
        apply_logging_config(config, obj.get("verbose", False))

    buffer = read_source(file, config.expansion.encoding)
    if not 0 <= line < len(buffer):
        raise click.ClickException(f"Line {line} is outside {file} ({len(buffer)} lines)")

    uri = file.resolve().as_uri()
    if expand:
        mode = ExpansionMode.USE_EXTERNAL_EXPANSION
        identity = build_cache_file_name(uri, config.expansion.cache_dir)
    else:
        mode = ExpansionMode.USE_LOCAL_BUFFER
        identity = str(file.resolve())

    service = CompletionService(
        config.completion,
        provider=SubprocessExpansionProvider(config.expansion) if config.expansion.command else None,
    )
    request = CompletionRequest(
        uri=uri,
        file_identity=identity,
        line=line,
        character=character,
        lines=buffer,
        mode=mode,
        variable_mode=mode,
    )
    items = asyncio.run(service.complete(request))
    echo_json([item.to_dict() for item in items])
