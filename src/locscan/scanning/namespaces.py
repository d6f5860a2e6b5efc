"""In-scope namespace and alias table for one block of code."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


def qualify(namespace: str | None, name: str) -> str:
    """Join a namespace and a name, treating "" / None as the global namespace."""
    if namespace:
        return f"{namespace}.{name}"
    return name


def enclosing_namespaces(namespace: str | None) -> list[str]:
    """A.B.C -> [A.B.C, A.B, A]."""
    if not namespace:
        return []
    segments = namespace.split(".")
    return [".".join(segments[:index]) for index in range(len(segments), 0, -1)]


@dataclass(frozen=True)
class NamespaceTable:
    """Namespaces, aliases and types visible from a block of code.

    Attributes:
        namespaces: In-scope namespaces in lookup order
        aliases: Alias name -> fully-qualified namespace
        known_types: Fully-qualified names of types that exist (Ns.Class)
    """

    namespaces: tuple[str, ...] = ()
    aliases: Mapping[str, str] = field(default_factory=dict)
    known_types: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        object.__setattr__(self, "namespaces", tuple(self.namespaces))
        object.__setattr__(self, "aliases", MappingProxyType(dict(self.aliases)))
        object.__setattr__(self, "known_types", frozenset(self.known_types))

    def get_alias(self, prefix: str) -> str | None:
        """Namespace an alias stands for, or None if `prefix` is not an alias."""
        return self.aliases.get(prefix)

    def resolve_type(self, name: str) -> str | None:
        """Namespace through which `name` (Class or Sub.Class) is visible.

        In-scope namespaces are tried in order, the global namespace last.
        Returns "" for a type in the global namespace and None when the
        name does not resolve.
        """
        for namespace in self.namespaces:
            if qualify(namespace, name) in self.known_types:
                return namespace
        if name in self.known_types:
            return ""
        return None

    def with_known_types(self, types: Iterable[str]) -> NamespaceTable:
        """Copy of this table that also knows `types`."""
        return NamespaceTable(
            namespaces=self.namespaces,
            aliases=self.aliases,
            known_types=self.known_types | frozenset(types),
        )

    def with_enclosing(self, namespace: str | None) -> NamespaceTable:
        """Copy with `namespace` and its parents searched after the imports."""
        extra = [ns for ns in enclosing_namespaces(namespace) if ns not in self.namespaces]
        return NamespaceTable(
            namespaces=(*self.namespaces, *extra),
            aliases=self.aliases,
            known_types=self.known_types,
        )
