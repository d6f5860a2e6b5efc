"""Resource records and scan result items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from locscan.scanning.position import TextSpan


@dataclass(frozen=True, slots=True)
class ResourceOrigin:
    """One resource container, e.g. Strings.resx or Strings.de-DE.resx.

    Attributes:
        namespace: Namespace of the generated resource class ("" for global)
        class_name: Name of the generated resource class
        culture: Culture name for locale-specific files, None for the neutral one
        path: Location of the container, informational only
    """

    namespace: str
    class_name: str
    culture: str | None = None
    path: str | None = None

    @property
    def is_culture_specific(self) -> bool:
        return bool(self.culture)

    @property
    def qualified_class(self) -> str:
        if self.namespace:
            return f"{self.namespace}.{self.class_name}"
        return self.class_name


@dataclass(frozen=True, slots=True)
class ReferenceRecord:
    """A resource key as registered at a terminal trie node."""

    key: str
    value: str
    origin: ResourceOrigin


@dataclass(frozen=True, slots=True)
class ResourceEntry:
    """Trie build input: (namespace, class, key, value, origin)."""

    namespace: str
    class_name: str
    key: str
    value: str
    origin: ResourceOrigin

    @classmethod
    def from_origin(cls, origin: ResourceOrigin, key: str, value: str) -> ResourceEntry:
        return cls(origin.namespace, origin.class_name, key, value, origin)

    @property
    def path(self) -> str:
        """Fully-qualified dotted path: Namespace.Class.Key."""
        if self.namespace:
            return f"{self.namespace}.{self.class_name}.{self.key}"
        return f"{self.class_name}.{self.key}"

    def to_record(self) -> ReferenceRecord:
        return ReferenceRecord(key=self.key, value=self.value, origin=self.origin)


@dataclass(frozen=True, slots=True)
class CodeContext:
    """Where a scanned block lives; copied onto literal results."""

    namespace: str | None = None
    class_name: str | None = None
    method: str | None = None
    variable: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ScanResult:
    """Common fields of literal and reference result items.

    text is the exact source covered by span/offset/length; value is the
    decoded literal or the resource value a reference points to.
    """

    text: str
    value: str
    span: TextSpan
    offset: int
    length: int
    within_no_localize_scope: bool = False
    marked_unlocalizable: bool = False
    from_generated_source: bool = False
    source_path: str | None = None

    kind: ClassVar[str] = "result"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "text": self.text,
            "value": self.value,
            "line": self.span.start_line,
            "column": self.span.start_column,
            "end_line": self.span.end_line,
            "end_column": self.span.end_column,
            "offset": self.offset,
            "length": self.length,
            "within_no_localize_scope": self.within_no_localize_scope,
            "marked_unlocalizable": self.marked_unlocalizable,
            "from_generated_source": self.from_generated_source,
            "source_path": self.source_path,
        }


@dataclass(frozen=True, slots=True, kw_only=True)
class LiteralResult(ScanResult):
    """A string literal found in code."""

    is_verbatim: bool = False
    context: CodeContext | None = None

    kind: ClassVar[str] = "literal"

    def to_dict(self) -> dict[str, Any]:
        data = ScanResult.to_dict(self)
        data["is_verbatim"] = self.is_verbatim
        if self.context is not None:
            data["context"] = {
                "namespace": self.context.namespace,
                "class": self.context.class_name,
                "method": self.context.method,
                "variable": self.context.variable,
            }
        return data


@dataclass(frozen=True, slots=True, kw_only=True)
class ReferenceResult(ScanResult):
    """A resolved reference to a resource key.

    original_text is the dotted token as written (comments and whitespace
    removed); full_text is the fully-qualified Namespace.Class.Key.
    """

    key: str
    origin: ResourceOrigin
    original_text: str
    full_text: str

    kind: ClassVar[str] = "reference"

    def to_dict(self) -> dict[str, Any]:
        data = ScanResult.to_dict(self)
        data.update(
            key=self.key,
            original_text=self.original_text,
            full_text=self.full_text,
            origin={
                "namespace": self.origin.namespace,
                "class": self.origin.class_name,
                "culture": self.origin.culture,
                "path": self.origin.path,
            },
        )
        return data
