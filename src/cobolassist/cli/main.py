"""cobol-assist CLI - cobolassist command."""

import click

from cobolassist import __version__
from cobolassist.cli.complete import complete_command
from cobolassist.cli.doc import doc_command
from cobolassist.cli.scan import scan_command
from cobolassist.cli.utils import apply_logging_config
from cobolassist.config.loader import load_config
from cobolassist.core.errors import ConfigError


@click.group()
@click.version_option(version=__version__, prog_name="cobolassist")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """cobol-assist - Declaration completion and documentation for COBOL sources."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    try:
        config = load_config()
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
    ctx.obj["config"] = config
    apply_logging_config(config, verbose)


cli.add_command(scan_command, name="scan")
cli.add_command(doc_command, name="doc")
cli.add_command(complete_command, name="complete")


if __name__ == "__main__":
    cli()
