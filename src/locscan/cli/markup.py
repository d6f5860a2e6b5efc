"""locscan markup command - list string literals in ASP.NET code blocks."""

from pathlib import Path

import click

from locscan.cli.utils import get_config, print_results, read_source, resolve_dialect
from locscan.scanning.markup import scan_markup_literals


@click.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--lang",
    type=click.Choice(["csharp", "vb"]),
    required=True,
    help="Language of the page's code blocks",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option(
    "--include-unlocalizable",
    is_flag=True,
    help="Also list literals marked with a no-localize comment",
)
@click.pass_context
def markup_command(
    ctx: click.Context,
    file: Path,
    lang: str,
    as_json: bool,
    include_unlocalizable: bool,
) -> None:
    """List string literals inside the <% %> code blocks of FILE."""
    config = get_config(ctx)
    text = read_source(file, config)
    results = scan_markup_literals(
        text,
        resolve_dialect(file, lang, config),
        source_path=str(file),
    )
    if not (include_unlocalizable or config.scan.include_unlocalizable):
        results = [result for result in results if not result.marked_unlocalizable]
    print_results(results, as_json=as_json, title="String literals")
