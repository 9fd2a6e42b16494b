"""Source store: owns the schema file list, staleness tracking and the merged result.

Every reload visits the configured files in order. Files whose modification
time has not advanced are not re-read; their cached records from the last
successful parse still take part in the merge, so reloading with no changes
is idempotent.
"""

import logging
import os
import threading
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from jsoncmp.codes import DiagnosticCode
from jsoncmp.contracts import CompletionItem, CompletionResult
from jsoncmp._internal.io.json_files import parse_json, read_text
from .diagnostics import DEFAULT_LIMIT, Diagnostic, DiagnosticsSink, Notify
from .extractor import RawFieldRecord, extract
from .mapping import FieldMapping, FormatSpec
from .merge import FieldDescriptor, merge

logger = logging.getLogger(__name__)

# Host registration defaults
DEFAULT_NAME = "json_completions"
DEFAULT_PRIORITY = 1000


@dataclass
class SourceFile:
    """One configured schema file and what was last extracted from it."""
    path: str
    last_loaded_mtime: Optional[int] = None  # st_mtime_ns of the last successful parse
    records: List[RawFieldRecord] = field(default_factory=list)

    def is_stale(self, mtime: int) -> bool:
        return self.last_loaded_mtime is None or mtime > self.last_loaded_mtime


@dataclass
class ReloadStats:
    """Per-reload counters, logged at INFO."""
    read: int = 0
    skipped: int = 0
    failed: int = 0


class SourceStore:
    """Holds the merged field descriptors for a fixed set of schema files.

    The host constructs one store per configuration (mapping and formats are
    immutable), calls ``reload()`` when it sees a file change, and reads
    ``descriptors`` or ``complete()`` at any time.
    """

    def __init__(
        self,
        file_paths: Sequence[Union[str, os.PathLike]],
        mapping: Optional[FieldMapping] = None,
        fmt: Optional[FormatSpec] = None,
        notify: Optional[Notify] = None,
        diagnostic_limit: int = DEFAULT_LIMIT,
        name: str = DEFAULT_NAME,
        priority: int = DEFAULT_PRIORITY,
        initial_diagnostics: Sequence[Diagnostic] = (),
    ):
        # Duplicate paths collapse onto the first occurrence
        unique_paths = list(dict.fromkeys(os.fspath(p) for p in file_paths))
        self._files: List[SourceFile] = [SourceFile(path=p) for p in unique_paths]
        self._mapping = mapping or FieldMapping()
        self._fmt = fmt or FormatSpec()
        self._name = name
        self._priority = priority
        self._sink = DiagnosticsSink(limit=diagnostic_limit, notify=notify)
        self._lock = threading.RLock()
        self._reloading = False
        # Reported once, inside the first reload, e.g. directory scan failures
        self._pending_diagnostics: List[Diagnostic] = list(initial_diagnostics)
        self._descriptors: Tuple[FieldDescriptor, ...] = ()
        self._diagnostics: Tuple[Diagnostic, ...] = ()

        if not self._mapping.can_extract():
            logger.warning(
                "Field mapping has an empty label_field or fields_container; no descriptors will be produced"
            )

        self.reload()

    @property
    def file_paths(self) -> Tuple[str, ...]:
        return tuple(f.path for f in self._files)

    @property
    def files(self) -> Tuple[SourceFile, ...]:
        return tuple(self._files)

    @property
    def name(self) -> str:
        """Name the host registers this source under."""
        return self._name

    @property
    def priority(self) -> int:
        return self._priority

    @property
    def mapping(self) -> FieldMapping:
        return self._mapping

    @property
    def fmt(self) -> FormatSpec:
        return self._fmt

    @property
    def descriptors(self) -> Tuple[FieldDescriptor, ...]:
        """The descriptors of the last completed reload (never a partial list)."""
        return self._descriptors

    @property
    def diagnostics(self) -> Tuple[Diagnostic, ...]:
        """Diagnostics delivered during the last completed reload."""
        return self._diagnostics

    def get_descriptors(self) -> Tuple[FieldDescriptor, ...]:
        return self._descriptors

    def complete(self) -> CompletionResult:
        """Current candidate set in the host-facing shape."""
        items = [
            CompletionItem(
                label=d.label,
                kind=d.kind,
                documentation=d.documentation,
                detail=d.detail,
            )
            for d in self._descriptors
        ]
        return CompletionResult(items=items, is_complete=True)

    def refresh(self) -> None:
        self.reload()

    def reload(self) -> None:
        """Re-extract stale files and rebuild the descriptor list.

        Calls from other threads are serialized. A call made from inside a
        running reload on the same thread (e.g. from the notify callback) returns
        at once. Failures are reported through the diagnostics sink and never
        raised.
        """
        with self._lock:
            if self._reloading:
                logger.debug("reload() called during a reload; ignored")
                return
            self._reloading = True
            try:
                self._reload_locked()
            finally:
                self._reloading = False

    def _reload_locked(self) -> None:
        self._sink.reset()
        stats = ReloadStats()

        pending, self._pending_diagnostics = self._pending_diagnostics, []
        for diagnostic in pending:
            self._sink.report(diagnostic)

        for source in self._files:
            self._refresh_file(source, stats)

        merged = merge(self._iter_records(), self._fmt)

        # Publish only after the merge has fully completed
        self._descriptors = tuple(merged)
        self._diagnostics = tuple(self._sink.emitted)

        logger.info(
            "Loaded %d descriptors from %d files (read=%d, unchanged=%d, failed=%d)",
            len(merged), len(self._files), stats.read, stats.skipped, stats.failed,
        )

    def _iter_records(self) -> Iterator[Tuple[str, RawFieldRecord]]:
        for source in self._files:
            for record in source.records:
                yield source.path, record

    def _refresh_file(self, source: SourceFile, stats: ReloadStats) -> None:
        path = source.path
        try:
            mtime = os.stat(path).st_mtime_ns
        except OSError as e:
            # Keep whatever was loaded before; stale data beats no data
            stats.failed += 1
            self._report(DiagnosticCode.STAT_FAILURE, f"Failed to stat {path}: {e.strerror or e}", path)
            return

        if not source.is_stale(mtime):
            stats.skipped += 1
            return

        try:
            text = read_text(path)
        except (OSError, UnicodeDecodeError) as e:
            stats.failed += 1
            source.records = []
            self._report(DiagnosticCode.READ_FAILURE, f"Failed to open {path}: {e}", path)
            return

        try:
            document = parse_json(text)
        except (ValueError, RecursionError) as e:
            # JSONDecodeError is a ValueError; so is the int digit-limit error
            stats.failed += 1
            source.records = []
            self._report(DiagnosticCode.PARSE_FAILURE, f"Failed to parse JSON in {path}: {e}", path)
            return

        records, diagnostics = extract(document, self._mapping, path=path)
        for diagnostic in diagnostics:
            self._sink.report(diagnostic)

        source.records = records
        source.last_loaded_mtime = mtime
        stats.read += 1
        logger.debug("Extracted %d records from %s", len(records), path)

    def _report(self, code: DiagnosticCode, message: str, path: str) -> None:
        self._sink.report_message(message, code, severity=logging.ERROR, path=path)
