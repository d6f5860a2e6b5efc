"""locscan CLI - locscan command."""

import click

from locscan import __version__
from locscan.cli.markup import markup_command
from locscan.cli.refs import refs_command
from locscan.cli.strings import strings_command
from locscan.config.loader import load_config
from locscan.core.errors import ConfigError
from locscan.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="locscan")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """locscan - find string literals and resource references in C# and VB code."""
    try:
        config = load_config()
    except ConfigError as e:
        raise click.ClickException(str(e)) from e

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = config
    if verbose:
        configure_logging(level="DEBUG")
    else:
        configure_logging(config=config.logging)


cli.add_command(strings_command, name="strings")
cli.add_command(refs_command, name="refs")
cli.add_command(markup_command, name="markup")


if __name__ == "__main__":
    cli()
