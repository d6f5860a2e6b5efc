"""Decide which resource record a dotted reference points to.

A terminal trie node can carry records from several origins: the same
Class.Key may exist in different namespaces, and every culture-specific
file repeats the keys of its culture-neutral sibling. The resolver narrows
the candidates to one namespace using the in-scope NamespaceTable and then
breaks the remaining tie.
"""

from __future__ import annotations

from collections.abc import Sequence

from locscan.scanning.models import ReferenceRecord, ResourceOrigin
from locscan.scanning.namespaces import NamespaceTable, qualify


def split_dotted(text: str) -> tuple[str | None, str, str] | None:
    """Split A.B.Class.Key into ("A.B", "Class", "Key").

    Class.Key yields (None, "Class", "Key"). Returns None for text that is
    not at least two non-empty dotted segments.
    """
    segments = text.split(".")
    if len(segments) < 2 or not all(segments):
        return None
    key = segments[-1]
    class_name = segments[-2]
    if len(segments) == 2:
        return None, class_name, key
    return ".".join(segments[:-2]), class_name, key


class ReferenceResolver:
    """Resolves dotted references against one namespace table."""

    def __init__(
        self,
        namespaces: NamespaceTable,
        preferred_origin: ResourceOrigin | None = None,
    ) -> None:
        self.namespaces = namespaces
        self.preferred_origin = preferred_origin

    def resolve(self, text: str, records: Sequence[ReferenceRecord]) -> ReferenceRecord | None:
        """Record `text` refers to, or None when it cannot be resolved."""
        parts = split_dotted(text)
        if parts is None or not records:
            return None
        prefix, class_name, _key = parts

        if not prefix:
            namespace = self.namespaces.resolve_type(class_name)
            if namespace is None:
                return None
            return self._pick(records, namespace, class_name)

        alias = self.namespaces.get_alias(prefix)
        if alias:
            return self._pick(records, alias, class_name)

        record = self._pick(records, prefix, class_name)
        if record is not None:
            return record

        # prefix may be relative to an imported namespace
        namespace = self.namespaces.resolve_type(f"{prefix}.{class_name}")
        if namespace is None:
            return None
        return self._pick(records, qualify(namespace, prefix), class_name)

    def _pick(
        self,
        records: Sequence[ReferenceRecord],
        namespace: str,
        class_name: str,
    ) -> ReferenceRecord | None:
        candidates = [
            record
            for record in records
            if record.origin.namespace == namespace and record.origin.class_name == class_name
        ]
        if not candidates:
            return None
        if self.preferred_origin is not None:
            for record in candidates:
                if record.origin == self.preferred_origin:
                    return record
        for record in candidates:
            if not record.origin.is_culture_specific:
                return record
        return candidates[0]
