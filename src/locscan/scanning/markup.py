"""Code blocks embedded in ASP.NET markup (.aspx, .ascx, .master).

Only the code inside <% %>, <%= %>, <%: %> and <%# %> blocks is scanned.
Directives (<%@ %>), expression builders (<%$ %>) and server comments
(<%-- --%>) are skipped. Each block is scanned with its own anchor
position so results carry positions in the markup file.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from locscan.scanning.dialects.base import Dialect
from locscan.scanning.engine import Scanner
from locscan.scanning.models import LiteralResult, ReferenceResult, ResourceOrigin
from locscan.scanning.namespaces import NamespaceTable
from locscan.scanning.position import Position, advance_text
from locscan.scanning.trie import ReferenceTrie

_BLOCK_PATTERN = re.compile(r"<%(?:--.*?--%>|(?P<marker>#:|[@$=:#]?)(?P<code>.*?)%>)", re.DOTALL)

_IMPORT_DIRECTIVE = re.compile(
    r"<%@\s*Import\s+Namespace\s*=\s*[\"'](?P<name>[^\"']+)[\"']",
    re.IGNORECASE,
)

_BLOCK_KINDS = {
    "": "statement",
    "=": "expression",
    ":": "encoded",
    "#": "binding",
    "#:": "binding",
}


@dataclass(frozen=True, slots=True)
class CodeBlock:
    """Code between the delimiters of one markup block.

    Attributes:
        code: Text between the opening marker and %>
        start: Position of code[0] in the markup file
        kind: statement, expression, encoded or binding
    """

    code: str
    start: Position
    kind: str


def find_code_blocks(text: str, start: Position | None = None) -> list[CodeBlock]:
    """Code blocks of `text` in document order."""
    position = start or Position()
    consumed = 0
    blocks: list[CodeBlock] = []
    for match in _BLOCK_PATTERN.finditer(text):
        marker = match.group("marker")
        if marker is None or marker in ("@", "$"):
            continue
        code_start = match.start("code")
        position = advance_text(position, text[consumed:code_start])
        consumed = code_start
        blocks.append(CodeBlock(match.group("code"), position, _BLOCK_KINDS[marker]))
    return blocks


def read_markup_imports(text: str) -> NamespaceTable:
    """Namespaces imported with <%@ Import Namespace="..." %> directives."""
    names = [match.group("name").strip() for match in _IMPORT_DIRECTIVE.finditer(text)]
    return NamespaceTable(namespaces=tuple(dict.fromkeys(names)))


def scan_markup_literals(
    text: str,
    dialect: Dialect,
    *,
    start: Position | None = None,
    within_no_localize_scope: bool = False,
    source_path: str | None = None,
) -> list[LiteralResult]:
    scanner = Scanner(dialect)
    results: list[LiteralResult] = []
    for block in find_code_blocks(text, start):
        results.extend(
            scanner.scan_literals(
                block.code,
                block.start,
                within_no_localize_scope=within_no_localize_scope,
                source_path=source_path,
            )
        )
    return results


def scan_markup_references(
    text: str,
    dialect: Dialect,
    *,
    trie: ReferenceTrie,
    namespaces: NamespaceTable | None = None,
    start: Position | None = None,
    within_no_localize_scope: bool = False,
    preferred_origin: ResourceOrigin | None = None,
    source_path: str | None = None,
) -> list[ReferenceResult]:
    """References inside the code blocks of `text`.

    Without an explicit table, the page's Import directives are used.
    """
    if namespaces is None:
        namespaces = read_markup_imports(text)
    scanner = Scanner(dialect)
    results: list[ReferenceResult] = []
    for block in find_code_blocks(text, start):
        results.extend(
            scanner.scan_references(
                block.code,
                block.start,
                trie=trie,
                namespaces=namespaces,
                within_no_localize_scope=within_no_localize_scope,
                preferred_origin=preferred_origin,
                source_path=source_path,
            )
        )
    return results
