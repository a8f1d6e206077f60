"""
Custom exception hierarchy for aec-ingest.

Two families live here:

- **File / run level** errors (``FatalFileError``, ``FetchError``,
  ``CacheError``, ``ConfigValidationError``, ``ExportError``) propagate
  to the caller.
- **Group level** errors (subclasses of ``RecordDecodeError``) are raised
  while decoding a single row group.  The pipeline catches them at the
  group boundary, logs them and drops the group, so one bad record never
  costs the rest of the file.

An unrecognised party code is deliberately *not* represented here: it is
recovered to ``PartyAffiliation.NAFD`` (see ``enums.py``).
"""

from __future__ import annotations


class AecIngestError(Exception):
    """Base exception for all aec-ingest errors."""


class FatalFileError(AecIngestError):
    """Raised when a whole file cannot be processed (e.g. invalid UTF-8)."""


class FetchError(AecIngestError):
    """Raised when a results file cannot be downloaded."""


class CacheError(AecIngestError):
    """Raised when a cached year exists but cannot be read back."""


class ConfigValidationError(AecIngestError):
    """Raised when aecconfig.yaml is empty or otherwise unusable."""


class ExportError(AecIngestError):
    """Raised when the exporter fails to write output files."""


class RecordDecodeError(AecIngestError):
    """Base class for failures that drop a single row group.

    Attributes:
        field: The column name involved, when the failure concerns one.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class MissingFieldError(RecordDecodeError):
    """Raised when a required column is absent from a row."""

    def __init__(self, field: str) -> None:
        super().__init__(f"No field '{field}'", field=field)


class NumericConversionError(RecordDecodeError):
    """Raised when a cell cannot be parsed as the expected numeric type."""

    def __init__(self, field: str, value: str, expected: str) -> None:
        super().__init__(
            f"Field '{field}': cannot parse {value!r} as {expected}",
            field=field,
        )
        self.value = value


class DivisionDecodeError(RecordDecodeError):
    """Raised when a division name matches no known division."""

    def __init__(self, value: str, field: str | None = None) -> None:
        super().__init__(f"Unknown division {value!r}", field=field)
        self.value = value


class GroupShapeError(RecordDecodeError):
    """Raised when a row group has fewer rows than its record kind needs."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f"Expected a group of {expected} rows, got {actual}"
        )
        self.expected = expected
        self.actual = actual
