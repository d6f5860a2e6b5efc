"""Single-pass scanner for string literals and resource references.

One loop walks the text a character at a time, asks the dialect for the
lexical state after each character and turns state changes into events
(string opened/closed, comment opened/closed, plain code character). Two
scan contexts consume those events:

- _LiteralContext reports every finished string literal and remembers
  whether a no-localize comment came right before it;
- _ReferenceContext feeds code characters through the reference trie and
  resolves dotted tokens that end on a terminal node.

Every scan_* call builds a new context, so a Scanner holds no mutable state
and can be shared between threads.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import structlog

from locscan.core.errors import ScanError
from locscan.scanning.chars import char_at, is_identifier_char
from locscan.scanning.dialects.base import NORMAL, Dialect, LexState
from locscan.scanning.models import (
    CodeContext,
    LiteralResult,
    ReferenceResult,
    ResourceOrigin,
    ScanResult,
)
from locscan.scanning.namespaces import NamespaceTable
from locscan.scanning.position import Position, TextSpan, advance
from locscan.scanning.resolver import ReferenceResolver
from locscan.scanning.trie import ReferenceTrie, TrieNode

logger = structlog.get_logger()

ResultSink = Callable[[ScanResult], None]


def _require(**arguments: Any) -> None:
    for name, value in arguments.items():
        if value is None:
            raise ScanError.invalid_argument(name)


class _ScanContext:
    """Main loop shared by both scan modes. Subclasses override the on_* hooks."""

    mode = "scan"

    def __init__(
        self,
        dialect: Dialect,
        text: str,
        start: Position,
        *,
        within_no_localize_scope: bool,
        source_path: str | None,
        sink: ResultSink | None,
    ) -> None:
        self.dialect = dialect
        self.text = text
        self.start = start
        self.within_no_localize_scope = within_no_localize_scope
        self.source_path = source_path
        self.sink = sink
        self.results: list[Any] = []

    def run(self) -> list[Any]:
        logger.debug(
            "scan_started",
            mode=self.mode,
            dialect=self.dialect.name,
            chars=len(self.text),
            source_path=self.source_path,
        )
        text = self.text
        dialect = self.dialect
        state = NORMAL
        position = self.start
        skip_until = -1
        token_index = -1
        token_start = position

        for index, ch in enumerate(text):
            if index < skip_until:
                pass
            elif state.skip_line:
                if ch == "\n":
                    self.on_line_comment_end(state.opened_at, index)
                    state = NORMAL
            else:
                length = dialect.continuation_length(text, index) if state.is_code else 0
                if length:
                    skip_until = index + length
                else:
                    new_state = dialect.classify(text, index, state)
                    if new_state.skip_line and not state.skip_line:
                        self.on_line_comment_start(index)
                    elif new_state.in_comment and not state.in_comment:
                        # detected on the second character of the opener
                        self.on_block_comment_start(index - 1)
                    elif state.in_comment and not new_state.in_comment:
                        self.on_block_comment_end(state.opened_at - 1, index)
                    elif new_state.in_string and not state.in_string:
                        token_index = index - new_state.prefix_length
                        token_start = position.back(new_state.prefix_length)
                        self.on_string_start(token_index)
                    elif state.in_string and not new_state.in_string:
                        if not new_state.aborted and dialect.is_reportable(
                            text, token_index, index, state
                        ):
                            self.on_string_end(token_index, token_start, index, position, state)
                    elif new_state.is_code:
                        self.on_code_char(index, ch, position)
                    state = new_state
            position = advance(position, ch)

        logger.debug(
            "scan_completed",
            mode=self.mode,
            results=len(self.results),
            source_path=self.source_path,
        )
        return self.results

    def emit(self, result: ScanResult) -> None:
        self.results.append(result)
        if self.sink is not None:
            self.sink(result)

    def on_code_char(self, index: int, ch: str, position: Position) -> None:
        pass

    def on_string_start(self, index: int) -> None:
        pass

    def on_string_end(
        self,
        start_index: int,
        start: Position,
        end_index: int,
        end: Position,
        state: LexState,
    ) -> None:
        pass

    def on_block_comment_start(self, index: int) -> None:
        pass

    def on_block_comment_end(self, start_index: int, end_index: int) -> None:
        pass

    def on_line_comment_start(self, index: int) -> None:
        pass

    def on_line_comment_end(self, start_index: int, end_index: int) -> None:
        pass


class _LiteralContext(_ScanContext):
    mode = "literals"

    def __init__(
        self,
        dialect: Dialect,
        text: str,
        start: Position,
        *,
        within_no_localize_scope: bool,
        from_generated_source: bool,
        source_path: str | None,
        context: CodeContext | None,
        sink: ResultSink | None,
    ) -> None:
        super().__init__(
            dialect,
            text,
            start,
            within_no_localize_scope=within_no_localize_scope,
            source_path=source_path,
            sink=sink,
        )
        self.from_generated_source = from_generated_source
        self.context = context
        self._marker_end = -1
        self._marked = False

    def _check_marker(self, comment: str, end_index: int) -> None:
        if comment.strip() == self.dialect.no_localize_comment:
            self._marker_end = end_index

    def on_block_comment_end(self, start_index: int, end_index: int) -> None:
        self._check_marker(self.text[start_index : end_index + 1], end_index)

    def on_line_comment_end(self, start_index: int, end_index: int) -> None:
        self._check_marker(self.text[start_index:end_index], end_index)

    def on_string_start(self, index: int) -> None:
        between = self.text[self._marker_end + 1 : index]
        self._marked = self._marker_end >= 0 and not between.strip()

    def on_string_end(
        self,
        start_index: int,
        start: Position,
        end_index: int,
        end: Position,
        state: LexState,
    ) -> None:
        raw = self.text[start_index : end_index + 1]
        self.emit(
            LiteralResult(
                text=raw,
                value=self.dialect.decode_literal(raw),
                span=TextSpan.between(start, end),
                offset=start.offset,
                length=len(raw),
                within_no_localize_scope=self.within_no_localize_scope,
                marked_unlocalizable=self._marked,
                from_generated_source=self.from_generated_source,
                source_path=self.source_path,
                is_verbatim=state.in_verbatim,
                context=self.context,
            )
        )
        self._marked = False


@dataclass(frozen=True, slots=True)
class _Walk:
    """Trie walk plus the dotted token accumulated so far.

    prefix holds the identifier and dot characters of the token as written;
    start_index/start locate its first character. chained is set after a
    dot, so the next identifier extends the token instead of starting one.
    """

    node: TrieNode
    prefix: str = ""
    start_index: int = -1
    start: Position | None = None
    chained: bool = False


class _ReferenceContext(_ScanContext):
    mode = "references"

    def __init__(
        self,
        dialect: Dialect,
        text: str,
        start: Position,
        *,
        trie: ReferenceTrie,
        resolver: ReferenceResolver,
        within_no_localize_scope: bool,
        source_path: str | None,
        sink: ResultSink | None,
    ) -> None:
        super().__init__(
            dialect,
            text,
            start,
            within_no_localize_scope=within_no_localize_scope,
            source_path=source_path,
            sink=sink,
        )
        self.trie = trie
        self.resolver = resolver
        self._walk = _Walk(trie.root)
        self._before_last: _Walk | None = None
        self._saved: _Walk | None = None

    def _reset(self) -> None:
        self._walk = _Walk(self.trie.root)
        self._before_last = None
        self._saved = None

    def on_string_start(self, index: int) -> None:
        self._reset()

    def on_line_comment_start(self, index: int) -> None:
        self._reset()

    def on_block_comment_start(self, index: int) -> None:
        # The opener's first character was already fed as code; keep the
        # walk as it was before it.
        self._saved = self._before_last
        self._walk = _Walk(self.trie.root)

    def on_block_comment_end(self, start_index: int, end_index: int) -> None:
        if self._saved is not None:
            self._walk = self._saved
        self._saved = None

    def on_code_char(self, index: int, ch: str, position: Position) -> None:
        walk = self._walk
        self._before_last = walk
        prev = char_at(self.text, index - 1)
        identifier = is_identifier_char(ch)

        prefix = walk.prefix
        start_index = walk.start_index
        start = walk.start
        chained = walk.chained
        if prefix:
            if ch == ".":
                chained = True
            elif not identifier and not ch.isspace():
                prefix = ""
                chained = False

        if identifier and not is_identifier_char(prev):
            if not chained:
                start_index, start, prefix = index, position, ""
            chained = False

        segment = prefix[prefix.rfind(".") + 1 :]
        if identifier or ch == ".":
            prefix += ch

        node = self._step(walk.node, ch, identifier, prev, segment)
        self._walk = _Walk(node, prefix, start_index, start, chained)

        if node.is_terminal and not is_identifier_char(char_at(self.text, index + 1)):
            self._resolve(index, position, node)

    def _step(self, node: TrieNode, ch: str, identifier: bool, prev: str, segment: str) -> TrieNode:
        root = self.trie.root
        if node is root and identifier and is_identifier_char(prev):
            # inside an identifier that did not start a walk
            return root
        following = self.trie.step(node, ch)
        if following is not root or node is root or not (identifier or ch == "."):
            return following
        # Dead end: retry from the start of the current dotted segment, which
        # always begins an identifier.
        following = root
        for seg_ch in segment + ch:
            following = self.trie.step(following, seg_ch)
            if following is root:
                break
        return following

    def _resolve(self, index: int, position: Position, node: TrieNode) -> None:
        walk = self._walk
        record = self.resolver.resolve(walk.prefix, node.records)
        if record is None or walk.start is None:
            logger.debug(
                "reference_unresolved",
                text=walk.prefix,
                line=position.line,
                column=position.column,
                candidates=len(node.records),
            )
            return
        logger.debug(
            "reference_resolved",
            text=walk.prefix,
            key=record.key,
            origin=record.origin.qualified_class,
            culture=record.origin.culture,
        )
        self.emit(
            ReferenceResult(
                text=self.text[walk.start_index : index + 1],
                value=record.value,
                span=TextSpan.between(walk.start, position),
                offset=walk.start.offset,
                length=position.offset - walk.start.offset + 1,
                within_no_localize_scope=self.within_no_localize_scope,
                source_path=self.source_path,
                key=record.key,
                origin=record.origin,
                original_text=walk.prefix,
                full_text=f"{record.origin.qualified_class}.{record.key}",
            )
        )


class Scanner:
    """Finds string literals and resource references in one dialect."""

    def __init__(self, dialect: Dialect) -> None:
        _require(dialect=dialect)
        self.dialect = dialect

    def scan_literals(
        self,
        text: str,
        start: Position,
        *,
        within_no_localize_scope: bool,
        from_generated_source: bool = False,
        source_path: str | None = None,
        context: CodeContext | None = None,
        sink: ResultSink | None = None,
    ) -> list[LiteralResult]:
        """All string literals in `text`, in document order.

        `start` is the position of text[0] in its source file; spans and
        offsets of the results are absolute. Unterminated strings at the end
        of the text are dropped.
        """
        _require(text=text, start=start, within_no_localize_scope=within_no_localize_scope)
        scan = _LiteralContext(
            self.dialect,
            text,
            start,
            within_no_localize_scope=within_no_localize_scope,
            from_generated_source=from_generated_source,
            source_path=source_path,
            context=context,
            sink=sink,
        )
        return scan.run()

    def scan_references(
        self,
        text: str,
        start: Position,
        *,
        trie: ReferenceTrie,
        namespaces: NamespaceTable,
        within_no_localize_scope: bool,
        preferred_origin: ResourceOrigin | None = None,
        source_path: str | None = None,
        sink: ResultSink | None = None,
    ) -> list[ReferenceResult]:
        """All resolvable resource references in `text`, in document order.

        Types registered in `trie` are added to the known types of
        `namespaces` for the duration of the scan.
        """
        _require(
            text=text,
            start=start,
            trie=trie,
            namespaces=namespaces,
            within_no_localize_scope=within_no_localize_scope,
        )
        resolver = ReferenceResolver(
            namespaces.with_known_types(trie.known_types()),
            preferred_origin=preferred_origin,
        )
        scan = _ReferenceContext(
            self.dialect,
            text,
            start,
            trie=trie,
            resolver=resolver,
            within_no_localize_scope=within_no_localize_scope,
            source_path=source_path,
            sink=sink,
        )
        return scan.run()
