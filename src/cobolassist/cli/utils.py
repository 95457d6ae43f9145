"""CLI utilities."""

import json
from pathlib import Path
from typing import Any

import click

from cobolassist.config.models import CobolAssistConfig
from cobolassist.core.logging import configure_logging
from cobolassist.source.buffer import SourceBuffer, split_lines

DEFAULT_SOURCE_ENCODING = "latin-1"


def read_source(path: Path, encoding: str = DEFAULT_SOURCE_ENCODING) -> SourceBuffer:
    """Read a source file into a buffer.

    Raises:
        click.ClickException: If the file cannot be read
    """
    try:
        text = path.read_text(encoding=encoding, errors="replace")
    except OSError as e:
        raise click.ClickException(f"Cannot read {path}: {e.strerror or e}") from e
    return split_lines(text)


def echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2))


def apply_logging_config(config: CobolAssistConfig, verbose: bool = False) -> None:
    """Configure logging from the ``logging`` section; ``verbose`` forces DEBUG."""
    logging_config = config.logging
    if verbose:
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    configure_logging(config=logging_config)
