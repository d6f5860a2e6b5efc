"""locscan refs command - list resource references of source files."""

from pathlib import Path

import click

from locscan.cli.utils import get_config, print_results, read_source, resolve_dialect
from locscan.core.errors import LocScanError
from locscan.scanning.batch import BatchScanner, ScanJob
from locscan.scanning.models import ResourceEntry, ResourceOrigin
from locscan.scanning.resources import load_resource_file
from locscan.scanning.trie import ReferenceTrie
from locscan.scanning.usings import read_usings


def _find_origin(trie: ReferenceTrie, prefer: Path) -> ResourceOrigin:
    wanted = prefer.resolve()
    for origin in trie.origins():
        if origin.path and Path(origin.path).resolve() == wanted:
            return origin
    raise click.ClickException(f"--prefer {prefer} is not one of the loaded resource files")


@click.command()
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--resources",
    "-r",
    "resource_paths",
    multiple=True,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help=".resx file or YAML/JSON entry list (repeatable)",
)
@click.option("--namespace", "-n", default="", help="Namespace of the classes generated from .resx files")
@click.option("--dialect", type=click.Choice(["csharp", "vb"]), help="Override detection by extension")
@click.option(
    "--prefer",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Resource file that wins when a key exists in several of them",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def refs_command(
    ctx: click.Context,
    files: tuple[Path, ...],
    resource_paths: tuple[Path, ...],
    namespace: str,
    dialect: str | None,
    prefer: Path | None,
    as_json: bool,
) -> None:
    """List references to resource keys in FILES.

    A reference is a dotted Namespace.Class.Key expression that resolves,
    through the file's using/Imports declarations, to an entry of one of
    the given resource files.
    """
    config = get_config(ctx)

    def load_entries() -> list[ResourceEntry]:
        entries: list[ResourceEntry] = []
        for resource_path in resource_paths:
            entries.extend(load_resource_file(resource_path, namespace))
        return entries

    resource_set = ",".join(str(path.resolve()) for path in resource_paths)
    scanner = BatchScanner(max_workers=config.batch.max_workers)
    try:
        trie = scanner.cache.get_or_build(namespace, resource_set, load_entries)
    except LocScanError as e:
        raise click.ClickException(str(e)) from e
    preferred = _find_origin(trie, prefer) if prefer is not None else None

    jobs = []
    for file in files:
        code_dialect = resolve_dialect(file, dialect, config)
        text = read_source(file, config)
        jobs.append(
            ScanJob(
                path=str(file),
                text=text,
                dialect=code_dialect,
                namespaces=read_usings(text, code_dialect.name),
            )
        )

    groups = scanner.scan_references(jobs, (namespace, resource_set), load_entries, preferred)
    results = [result for group in groups for result in group]
    print_results(results, as_json=as_json, title="Resource references")
