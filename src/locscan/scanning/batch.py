"""Scan many files at once against shared resource tries.

A batch typically scans every code file of a project against the same
resource set. The trie for a (project, resource set) pair is built once
and reused by every job; jobs run on a thread pool, each with its own
scan context.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import TypeVar

import structlog

from locscan.core.logging import clear_scan_id, set_scan_id
from locscan.scanning.dialects.base import Dialect
from locscan.scanning.engine import Scanner
from locscan.scanning.models import (
    CodeContext,
    LiteralResult,
    ReferenceResult,
    ResourceEntry,
    ResourceOrigin,
    ScanResult,
)
from locscan.scanning.namespaces import NamespaceTable
from locscan.scanning.position import Position, TextSpan
from locscan.scanning.trie import ReferenceTrie

logger = structlog.get_logger()

EntriesFactory = Callable[[], Iterable[ResourceEntry]]

ResultT = TypeVar("ResultT", bound=ScanResult)


class ResourceSetCache:
    """One ReferenceTrie per (project, resource set).

    Builds are serialized by a lock. A rebuild after invalidate() creates a
    new trie object, so scans still holding the old one are unaffected.
    """

    def __init__(self) -> None:
        self._tries: dict[tuple[str, str], ReferenceTrie] = {}
        self._lock = threading.Lock()

    def get_or_build(
        self,
        project: str,
        resource_set: str,
        entries_factory: EntriesFactory,
    ) -> ReferenceTrie:
        key = (project, resource_set)
        with self._lock:
            trie = self._tries.get(key)
            if trie is None:
                trie = ReferenceTrie.build(entries_factory())
                self._tries[key] = trie
                logger.info(
                    "resource_set_cached",
                    project=project,
                    resource_set=resource_set,
                    entries=len(trie),
                )
            return trie

    def invalidate(self, project: str, resource_set: str) -> bool:
        """Drop one cached trie. Returns False if it was not cached."""
        with self._lock:
            return self._tries.pop((project, resource_set), None) is not None

    def clear(self) -> None:
        with self._lock:
            self._tries.clear()

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._tries

    def __len__(self) -> int:
        with self._lock:
            return len(self._tries)


@dataclass(frozen=True)
class ScanJob:
    """One block of code to scan.

    Attributes:
        path: Source file the text comes from
        text: Code to scan
        dialect: Lexical rules for the code
        start: Position of text[0] in the source file
        namespaces: Imports in scope, used by reference scans
        within_no_localize_scope: Code lies in a localization-disabled scope
        from_generated_source: Code comes from a generated (designer) file
        context: Namespace/class/method the code belongs to
    """

    path: str
    text: str
    dialect: Dialect
    start: Position = field(default_factory=Position)
    namespaces: NamespaceTable | None = None
    within_no_localize_scope: bool = False
    from_generated_source: bool = False
    context: CodeContext | None = None


class BatchScanner:
    """Runs scan jobs on a thread pool and keeps results in job order."""

    def __init__(self, cache: ResourceSetCache | None = None, max_workers: int = 4) -> None:
        self.cache = cache if cache is not None else ResourceSetCache()
        self.max_workers = max_workers

    def scan_literals(self, jobs: Sequence[ScanJob]) -> list[list[LiteralResult]]:
        def run(job: ScanJob) -> list[LiteralResult]:
            return Scanner(job.dialect).scan_literals(
                job.text,
                job.start,
                within_no_localize_scope=job.within_no_localize_scope,
                from_generated_source=job.from_generated_source,
                source_path=job.path,
                context=job.context,
            )

        return self._run(jobs, run)

    def scan_references(
        self,
        jobs: Sequence[ScanJob],
        key: tuple[str, str],
        entries_factory: EntriesFactory,
        preferred_origin: ResourceOrigin | None = None,
    ) -> list[list[ReferenceResult]]:
        """Reference scan of every job against the trie cached under `key`."""
        trie = self.cache.get_or_build(key[0], key[1], entries_factory)

        def run(job: ScanJob) -> list[ReferenceResult]:
            return Scanner(job.dialect).scan_references(
                job.text,
                job.start,
                trie=trie,
                namespaces=job.namespaces if job.namespaces is not None else NamespaceTable(),
                within_no_localize_scope=job.within_no_localize_scope,
                preferred_origin=preferred_origin,
                source_path=job.path,
            )

        return self._run(jobs, run)

    def _run(
        self,
        jobs: Sequence[ScanJob],
        scan: Callable[[ScanJob], list[ResultT]],
    ) -> list[list[ResultT]]:
        if not jobs:
            return []

        def traced(job: ScanJob) -> list[ResultT]:
            set_scan_id()
            try:
                return scan(job)
            finally:
                clear_scan_id()

        logger.info("batch_started", jobs=len(jobs), max_workers=self.max_workers)
        with ThreadPoolExecutor(
            max_workers=self.max_workers,
            thread_name_prefix="locscan-scan",
        ) as executor:
            results = list(executor.map(traced, jobs))
        logger.info("batch_completed", jobs=len(jobs), results=sum(map(len, results)))
        return results


def filter_selection(results: Iterable[ResultT], selection: TextSpan) -> list[ResultT]:
    """Results lying fully inside `selection` whose value is not blank."""
    return [
        result
        for result in results
        if selection.contains(result.span) and result.value.strip()
    ]
