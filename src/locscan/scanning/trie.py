"""Prefix tree over dotted resource paths.

Every resource entry Namespace.Class.Key is registered under each of its
dotted suffixes that still contains Class.Key (A.B.Res.Key, B.Res.Key,
Res.Key), so a reference written relative to a using declaration or an
alias ends on a terminal node too. Terminal nodes keep every record that
ends there, in insertion order; the resolver picks among them.

After build() the trie is never mutated and may be read by any number of
concurrent scans.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import structlog

from locscan.scanning.chars import is_identifier_char
from locscan.scanning.models import ReferenceRecord, ResourceEntry, ResourceOrigin

logger = structlog.get_logger()


def is_identifier_path(path: str) -> bool:
    """True if every dotted segment of `path` is a non-empty identifier."""
    return all(segment and all(map(is_identifier_char, segment)) for segment in path.split("."))


class TrieNode:
    """One state of the trie walk."""

    __slots__ = ("children", "records", "depth")

    def __init__(self, depth: int = 0) -> None:
        self.children: dict[str, TrieNode] = {}
        self.records: list[ReferenceRecord] = []
        self.depth = depth

    @property
    def is_terminal(self) -> bool:
        return bool(self.records)

    def __repr__(self) -> str:
        return f"TrieNode(depth={self.depth}, children={len(self.children)}, records={len(self.records)})"


class ReferenceTrie:
    """Trie of dotted resource paths with a total step function."""

    def __init__(self) -> None:
        self.root = TrieNode()
        self._origins: dict[ResourceOrigin, None] = {}
        self._entry_count = 0

    @classmethod
    def build(cls, entries: Iterable[ResourceEntry]) -> ReferenceTrie:
        """Build a trie from resource entries.

        Entries whose key is not a valid identifier can never be referenced
        from code and are skipped.
        """
        trie = cls()
        skipped = 0
        for entry in entries:
            if not is_identifier_path(entry.path):
                skipped += 1
                continue
            trie._add(entry)
        logger.debug(
            "trie_built",
            entries=trie._entry_count,
            origins=len(trie._origins),
            skipped=skipped,
        )
        return trie

    def _add(self, entry: ResourceEntry) -> None:
        record = entry.to_record()
        for path in _suffix_paths(entry):
            node = self.root
            for ch in path:
                child = node.children.get(ch)
                if child is None:
                    child = TrieNode(node.depth + 1)
                    node.children[ch] = child
                node = child
            node.records.append(record)
        self._origins[entry.origin] = None
        self._entry_count += 1

    def step(self, node: TrieNode, ch: str) -> TrieNode:
        """Follow the transition for `ch`; any dead end falls back to the root."""
        child = node.children.get(ch)
        if child is None:
            return self.root
        return child

    def lookup(self, path: str) -> list[ReferenceRecord]:
        """Records registered for exactly `path`, or an empty list."""
        node = self.root
        for ch in path:
            child = node.children.get(ch)
            if child is None:
                return []
            node = child
        return list(node.records)

    def origins(self) -> list[ResourceOrigin]:
        """Distinct origins in first-registration order."""
        return list(self._origins)

    def known_types(self) -> frozenset[str]:
        """Fully-qualified class names of every registered origin."""
        return frozenset(origin.qualified_class for origin in self._origins)

    def __len__(self) -> int:
        return self._entry_count

    def __iter__(self) -> Iterator[TrieNode]:
        stack = [self.root]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(node.children.values())


def _suffix_paths(entry: ResourceEntry) -> list[str]:
    segments = entry.namespace.split(".") if entry.namespace else []
    tail = f"{entry.class_name}.{entry.key}"
    paths = [".".join([*segments[index:], tail]) for index in range(len(segments))]
    paths.append(tail)
    return paths
