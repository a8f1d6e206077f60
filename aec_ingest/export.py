"""
Exporter for aec-ingest.

Flattens decoded record collections into pandas DataFrames and writes
one election year to disk as CSV or Parquet.

Output file naming convention (inside the year's output directory):
  first_preferences.{format}
  two_candidate_preferred.{format}
  preference_distributions.{format}

Flattening rules:
- Enum members are written as their codes (``"ALP"``, ``"EdenMonaro"``).
- First preferences gain a ``total`` column.
- Two-candidate-preferred pairs become ``*_1`` / ``*_2`` columns, one
  row per division.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path
from typing import Literal

import pandas as pd
from pydantic import BaseModel

from aec_ingest.exceptions import ExportError
from aec_ingest.models import FirstPreference, TwoCandidatePreferred, YearResults

logger = logging.getLogger(__name__)

_SUPPORTED_FORMATS = {"csv", "parquet"}


def _flatten(record: BaseModel) -> dict[str, object]:
    if isinstance(record, TwoCandidatePreferred):
        row: dict[str, object] = {"division": record.division.value}
        for n, candidate in enumerate(record.parties, start=1):
            for key, value in candidate.model_dump(mode="json").items():
                row[f"{key}_{n}"] = value
        return row

    row = record.model_dump(mode="json")
    if isinstance(record, FirstPreference):
        row["total"] = record.total
    return row


def records_to_frame(records: Sequence[BaseModel]) -> pd.DataFrame:
    """Build a DataFrame with one row per record.

    An empty collection gives an empty DataFrame with no columns.
    """
    return pd.DataFrame([_flatten(r) for r in records])


def year_to_frames(results: YearResults) -> dict[str, pd.DataFrame]:
    """Map table name -> DataFrame for the three collections of a year."""
    return {
        "first_preferences": records_to_frame(results.first_preferences),
        "two_candidate_preferred": records_to_frame(results.two_candidate_preferred),
        "preference_distributions": records_to_frame(results.preference_distributions),
    }


def _write_dataframe(df: pd.DataFrame, path: Path, output_format: str) -> None:
    try:
        if output_format == "csv":
            df.to_csv(path, index=False, encoding="utf-8-sig")
        else:  # parquet
            df.to_parquet(path, index=False, engine="pyarrow")
    except Exception as exc:
        raise ExportError(
            f"Failed to write {path.name} as {output_format}: {exc}"
        ) from exc


def export_year(
    results: YearResults,
    output_dir: str | Path,
    output_format: Literal["csv", "parquet"] = "parquet",
) -> list[str]:
    """Write the three tables of one year to *output_dir*.

    The directory is created if needed.  CSV files use ``utf-8-sig``.

    Returns:
        Paths written, in table order.

    Raises:
        ExportError: If *output_format* is unsupported, or any write fails.
    """
    if output_format not in _SUPPORTED_FORMATS:
        raise ExportError(
            f"Unsupported output format: '{output_format}'. "
            f"Supported formats: {sorted(_SUPPORTED_FORMATS)}"
        )

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    written: list[str] = []
    for table_name, df in year_to_frames(results).items():
        file_path = out / f"{table_name}.{output_format}"
        _write_dataframe(df, file_path, output_format)
        written.append(str(file_path))
        logger.info(
            "Exported table '%s' -> %s (%d rows, %d cols)",
            table_name, file_path.name, len(df), len(df.columns),
        )
    return written
