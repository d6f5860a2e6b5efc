"""Scanning: literal and reference lookup in C#/VB code."""

from locscan.scanning.batch import BatchScanner, ResourceSetCache, ScanJob, filter_selection
from locscan.scanning.dialects import dialect_for_path, get_dialect
from locscan.scanning.engine import Scanner
from locscan.scanning.markup import (
    CodeBlock,
    find_code_blocks,
    read_markup_imports,
    scan_markup_literals,
    scan_markup_references,
)
from locscan.scanning.models import (
    CodeContext,
    LiteralResult,
    ReferenceRecord,
    ReferenceResult,
    ResourceEntry,
    ResourceOrigin,
    ScanResult,
)
from locscan.scanning.namespaces import NamespaceTable
from locscan.scanning.position import Position, TextSpan, advance
from locscan.scanning.resolver import ReferenceResolver, split_dotted
from locscan.scanning.resources import (
    load_entries,
    load_resource_file,
    load_resx,
    parse_culture,
)
from locscan.scanning.trie import ReferenceTrie, TrieNode
from locscan.scanning.usings import read_usings

__all__ = [
    # Engine
    "Scanner",
    "get_dialect",
    "dialect_for_path",
    # Data model
    "Position",
    "TextSpan",
    "advance",
    "CodeContext",
    "LiteralResult",
    "ReferenceRecord",
    "ReferenceResult",
    "ResourceEntry",
    "ResourceOrigin",
    "ScanResult",
    # References
    "NamespaceTable",
    "ReferenceResolver",
    "ReferenceTrie",
    "TrieNode",
    "read_usings",
    "split_dotted",
    # Resources
    "load_entries",
    "load_resource_file",
    "load_resx",
    "parse_culture",
    # Markup
    "CodeBlock",
    "find_code_blocks",
    "read_markup_imports",
    "scan_markup_literals",
    "scan_markup_references",
    # Batch
    "BatchScanner",
    "ResourceSetCache",
    "ScanJob",
    "filter_selection",
]
