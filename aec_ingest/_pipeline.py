"""
Internal decode pipeline for aec-ingest.

One generic sequence, parameterized by a ``RecordKind``:

  bytes -> UTF-8 text -> lines -> header -> row mappings -> groups
        -> parallel decode -> (records, failures)

Group decoding fans out over a thread pool.  Groups share only the
immutable header and their own rows, so no locking is needed; results
are collected with ``as_completed`` and therefore come back in no
particular order.

This module is **not** part of the public API; use
``aec_ingest.process_file`` / ``aec_ingest.decode_records``.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from typing import Any

from aec_ingest.exceptions import FatalFileError, GroupShapeError, RecordDecodeError
from aec_ingest.kinds import RecordKind
from aec_ingest.parsers.grouping import group_rows
from aec_ingest.parsers.header import resolve_header, split_lines
from aec_ingest.parsers.tokenizer import tokenize_line

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GroupFailure:
    """A row group that was dropped.

    Attributes:
        line: One-based line number of the group's first row.
        error: The decode error that dropped it.
    """

    line: int
    error: RecordDecodeError


@dataclass
class DecodeResult:
    """Output of ``process_file`` for one file.

    Attributes:
        kind: The record kind that was decoded.
        records: Successfully decoded records, in no guaranteed order.
        failures: Dropped groups, in no guaranteed order.
    """

    kind: RecordKind
    records: list[Any] = field(default_factory=list)
    failures: list[GroupFailure] = field(default_factory=list)

    @property
    def groups_total(self) -> int:
        return len(self.records) + len(self.failures)


def default_max_workers() -> int:
    return min(os.cpu_count() or 4, 8)


def _decode_text(data: bytes) -> str:
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise FatalFileError(f"File is not valid UTF-8: {exc}") from exc


def _decode_group(kind: RecordKind, group: Sequence[Mapping[str, str]]) -> Any:
    if len(group) < kind.group_size:
        raise GroupShapeError(kind.group_size, len(group))
    return kind.decode(group)


def process_file(
    data: bytes,
    kind: RecordKind,
    max_workers: int | None = None,
) -> DecodeResult:
    """Decode one results file into records of *kind*.

    Args:
        data: Raw bytes of the file.
        kind: Descriptor selecting group size and field decoding.
        max_workers: Thread pool size; ``None`` picks
            ``min(cpu_count, 8)``.

    Returns:
        ``DecodeResult`` with the surviving records and the dropped
        groups.  Each dropped group is also logged at WARNING.

    Raises:
        FatalFileError: If *data* is not valid UTF-8.
    """
    lines = split_lines(_decode_text(data))
    header = resolve_header(lines)
    logger.debug(
        "%s: header on line %d with %d columns",
        kind.name, header.line_number + 1, len(header.columns),
    )

    rows = [header.map_row(tokenize_line(line)) for line in lines[header.data_start:]]
    groups = group_rows(rows, kind.group_size)
    result = DecodeResult(kind=kind)

    if groups:
        workers = max_workers or default_max_workers()
        with ThreadPoolExecutor(max_workers=workers) as executor:
            future_to_line = {
                executor.submit(_decode_group, kind, group):
                    header.data_start + i * kind.group_size + 1
                for i, group in enumerate(groups)
            }
            for future in as_completed(future_to_line):
                line = future_to_line[future]
                try:
                    result.records.append(future.result())
                except RecordDecodeError as exc:
                    logger.warning(
                        "Broken row in file %s (line %d): %s", kind.name, line, exc
                    )
                    result.failures.append(GroupFailure(line=line, error=exc))

    logger.info(
        "%s: decoded %d of %d records (%d dropped)",
        kind.name, len(result.records), result.groups_total, len(result.failures),
    )
    return result


def decode_records(
    data: bytes,
    kind: RecordKind,
    max_workers: int | None = None,
) -> list[Any]:
    """Like ``process_file`` but return only the decoded records."""
    return process_file(data, kind, max_workers=max_workers).records
