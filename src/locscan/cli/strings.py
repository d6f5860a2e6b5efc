"""locscan strings command - list string literals of source files."""

from pathlib import Path

import click

from locscan.cli.utils import get_config, print_results, read_source, resolve_dialect
from locscan.scanning.batch import BatchScanner, ScanJob


@click.command()
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option("--dialect", type=click.Choice(["csharp", "vb"]), help="Override detection by extension")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option(
    "--include-unlocalizable",
    is_flag=True,
    help="Also list literals marked with a no-localize comment",
)
@click.pass_context
def strings_command(
    ctx: click.Context,
    files: tuple[Path, ...],
    dialect: str | None,
    as_json: bool,
    include_unlocalizable: bool,
) -> None:
    """List the string literals in FILES."""
    config = get_config(ctx)
    jobs = [
        ScanJob(
            path=str(file),
            text=read_source(file, config),
            dialect=resolve_dialect(file, dialect, config),
        )
        for file in files
    ]

    scanner = BatchScanner(max_workers=config.batch.max_workers)
    results = [result for group in scanner.scan_literals(jobs) for result in group]
    if not (include_unlocalizable or config.scan.include_unlocalizable):
        results = [result for result in results if not result.marked_unlocalizable]

    print_results(results, as_json=as_json, title="String literals")
