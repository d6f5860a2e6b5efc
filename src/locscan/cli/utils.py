"""CLI utilities."""

import json
from collections.abc import Sequence
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from locscan.config.models import LocScanConfig
from locscan.core.errors import LocScanError
from locscan.scanning.dialects import Dialect, dialect_for_path, get_dialect
from locscan.scanning.models import ReferenceResult, ScanResult


def get_config(ctx: click.Context) -> LocScanConfig:
    """Config loaded by the cli group, or defaults when a command runs standalone."""
    obj = ctx.find_object(dict)
    if obj and "config" in obj:
        return obj["config"]  # type: ignore[no-any-return]
    return LocScanConfig()


def read_source(path: Path, config: LocScanConfig) -> str:
    """Read a source file, refusing files above the configured size limit."""
    size_mb = path.stat().st_size / (1024 * 1024)
    if size_mb > config.scan.max_file_size_mb:
        raise click.ClickException(
            f"{path} is {size_mb:.1f} MB, above the {config.scan.max_file_size_mb} MB limit "
            "(scan.max_file_size_mb)"
        )
    # .NET tooling often writes a BOM
    return path.read_text(encoding="utf-8-sig")


def resolve_dialect(path: Path, name: str | None, config: LocScanConfig) -> Dialect:
    try:
        if name:
            return get_dialect(name)
        return dialect_for_path(path, default=config.scan.default_dialect)
    except LocScanError as e:
        raise click.ClickException(str(e)) from e


def _short(text: str, width: int = 60) -> str:
    text = text.replace("\r", "\\r").replace("\n", "\\n")
    if len(text) > width:
        return text[: width - 1] + "…"
    return text


def print_results(results: Sequence[ScanResult], *, as_json: bool, title: str) -> None:
    """Render results as a rich table, or as a JSON array with --json."""
    if as_json:
        click.echo(json.dumps([result.to_dict() for result in results], indent=2))
        return

    console = Console()
    if not results:
        console.print(f"[yellow]No {title.lower()} found[/yellow]")
        return

    table = Table(title=title, padding=(0, 1), pad_edge=False)
    table.add_column("line", style="cyan", justify="right")
    table.add_column("col", style="cyan", justify="right")
    table.add_column("text", style="white")
    table.add_column("value", style="green")
    table.add_column("flags", style="dim")

    for result in results:
        flags = []
        if result.marked_unlocalizable:
            flags.append("no-loc comment")
        if result.within_no_localize_scope:
            flags.append("no-loc scope")
        if isinstance(result, ReferenceResult):
            flags.append(result.full_text)
            if result.origin.culture:
                flags.append(result.origin.culture)
        table.add_row(
            str(result.span.start_line),
            str(result.span.start_column),
            _short(result.text),
            _short(result.value),
            ", ".join(flags),
        )
    console.print(table)
