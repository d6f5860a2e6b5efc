"""Dialect registry.

Dialects are stateless, so one shared instance per language is handed to
every scanner.
"""

from __future__ import annotations

from pathlib import Path

from locscan.core.errors import ScanError
from locscan.scanning.dialects.base import NORMAL, Dialect, LexState
from locscan.scanning.dialects.csharp import CSharpDialect
from locscan.scanning.dialects.vb import VisualBasicDialect

_DIALECTS: dict[str, Dialect] = {
    dialect.name: dialect for dialect in (CSharpDialect(), VisualBasicDialect())
}


def get_dialect(name: str) -> Dialect:
    """Dialect registered under `name` (case-insensitive)."""
    dialect = _DIALECTS.get(name.lower())
    if dialect is None:
        raise ScanError.unknown_dialect(name, sorted(_DIALECTS))
    return dialect


def dialect_for_path(path: str | Path, default: str | None = None) -> Dialect:
    """Dialect for a source file, chosen by extension.

    Falls back to `default` when the extension is unknown; raises
    ScanError when there is no default either.
    """
    suffix = Path(path).suffix.lower()
    for dialect in _DIALECTS.values():
        if suffix in dialect.extensions:
            return dialect
    if default is None:
        raise ScanError.unknown_dialect(suffix or str(path), sorted(_DIALECTS))
    return get_dialect(default)


def known_dialects() -> list[str]:
    return sorted(_DIALECTS)


__all__ = [
    "NORMAL",
    "CSharpDialect",
    "Dialect",
    "LexState",
    "VisualBasicDialect",
    "dialect_for_path",
    "get_dialect",
    "known_dialects",
]
