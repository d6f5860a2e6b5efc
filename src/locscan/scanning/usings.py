"""Read using/Imports and namespace declarations into a NamespaceTable.

This is a line-oriented reader, not a parser: it recognizes declarations
that sit on their own line and ignores anything it does not understand.
"""

from __future__ import annotations

import re

from locscan.scanning.namespaces import NamespaceTable

_NAME = r"[A-Za-z_][\w]*(?:\s*\.\s*[A-Za-z_][\w]*)*"

_CSHARP_USING = re.compile(
    rf"^\s*(?:global\s+)?using\s+(?P<static>static\s+)?"
    rf"(?:(?P<alias>[A-Za-z_]\w*)\s*=\s*)?(?P<name>(?:global::)?{_NAME})\s*;",
    re.MULTILINE,
)
_CSHARP_NAMESPACE = re.compile(rf"^\s*namespace\s+(?P<name>{_NAME})\s*[{{;]?", re.MULTILINE)

_VB_IMPORTS = re.compile(
    rf"^[ \t]*Imports[ \t]+(?P<clauses>[^\r\n']+)",
    re.MULTILINE | re.IGNORECASE,
)
_VB_CLAUSE = re.compile(rf"^(?:(?P<alias>[A-Za-z_]\w*)\s*=\s*)?(?P<name>{_NAME})$")
_VB_NAMESPACE = re.compile(rf"^[ \t]*Namespace[ \t]+(?P<name>{_NAME})", re.MULTILINE | re.IGNORECASE)


def _clean(name: str) -> str:
    name = re.sub(r"\s+", "", name)
    if name.startswith("global::"):
        name = name[len("global::") :]
    return name


def _read_csharp(text: str) -> tuple[list[str], dict[str, str], list[str]]:
    imported: list[str] = []
    aliases: dict[str, str] = {}
    for match in _CSHARP_USING.finditer(text):
        name = _clean(match.group("name"))
        if match.group("alias"):
            aliases[match.group("alias")] = name
        elif not match.group("static"):
            imported.append(name)
    declared = [_clean(match.group("name")) for match in _CSHARP_NAMESPACE.finditer(text)]
    return imported, aliases, declared


def _read_vb(text: str) -> tuple[list[str], dict[str, str], list[str]]:
    imported: list[str] = []
    aliases: dict[str, str] = {}
    for match in _VB_IMPORTS.finditer(text):
        for clause in match.group("clauses").split(","):
            # XML namespace imports (<xmlns:...>) are not type namespaces
            parsed = _VB_CLAUSE.match(clause.strip())
            if parsed is None:
                continue
            name = _clean(parsed.group("name"))
            if parsed.group("alias"):
                aliases[parsed.group("alias")] = name
            else:
                imported.append(name)
    declared = [_clean(match.group("name")) for match in _VB_NAMESPACE.finditer(text)]
    return imported, aliases, declared


def read_usings(
    text: str,
    dialect: str,
    *,
    root_namespace: str | None = None,
) -> NamespaceTable:
    """Namespace table for a whole source file.

    Imports come first in declaration order, followed by the declared
    namespaces and their parents. Only the first namespace declaration is
    treated as enclosing the file. For VB, `root_namespace` is the
    project's root namespace that every declared namespace lives in.
    """
    if dialect == "vb":
        imported, aliases, declared = _read_vb(text)
    else:
        imported, aliases, declared = _read_csharp(text)

    table = NamespaceTable(namespaces=tuple(dict.fromkeys(imported)), aliases=aliases)
    if root_namespace:
        declared = [f"{root_namespace}.{name}" for name in declared] or [root_namespace]
    if declared:
        table = table.with_enclosing(declared[0])
    return table
