"""
Unit tests for the exporter (aec_ingest.export).

Tests flattening, CSV and Parquet export, and error handling using
pytest's tmp_path fixture.
"""

from __future__ import annotations

import pandas as pd
import pytest

from aec_ingest.enums import Division, PartyAffiliation
from aec_ingest.exceptions import ExportError
from aec_ingest.export import export_year, records_to_frame, year_to_frames
from aec_ingest.models import (
    FirstPreference,
    PreferenceDistribution,
    TcpCandidate,
    TwoCandidatePreferred,
    YearResults,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_results() -> YearResults:
    return YearResults(
        first_preferences=[
            FirstPreference(
                party=PartyAffiliation.ALP, ordinary=100, absent=20,
                provisional=3, prepoll=40, postal=5, swing=-1.5,
            ),
        ],
        two_candidate_preferred=[
            TwoCandidatePreferred(
                division=Division.KingsfordSmith,
                parties=(
                    TcpCandidate(party=PartyAffiliation.ALP, ordinary=500, swing=3.2, ballot_position=2),
                    TcpCandidate(party=PartyAffiliation.GRN, ordinary=450, swing=-3.2, ballot_position=1),
                ),
            ),
        ],
        preference_distributions=[
            PreferenceDistribution(
                division=Division.Bean, party=PartyAffiliation.LP,
                preference_count=30000, transfer_count=1500,
            ),
            PreferenceDistribution(
                division=Division.Bean, party=PartyAffiliation.ALP,
                preference_count=40000, transfer_count=0,
            ),
        ],
    )


# ---------------------------------------------------------------------------
# Flattening
# ---------------------------------------------------------------------------

class TestRecordsToFrame:
    """Tests for records_to_frame() / year_to_frames()."""

    def test_first_preferences_gain_total(self):
        df = records_to_frame(_make_results().first_preferences)
        assert list(df.columns) == [
            "party", "ordinary", "absent", "provisional", "prepoll", "postal", "swing", "total",
        ]
        assert df["party"].iloc[0] == "ALP"
        assert df["total"].iloc[0] == 168

    def test_tcp_pairs_are_suffixed(self):
        df = records_to_frame(_make_results().two_candidate_preferred)
        assert len(df) == 1
        assert df["division"].iloc[0] == "KingsfordSmith"
        assert df["party_1"].iloc[0] == "ALP"
        assert df["party_2"].iloc[0] == "GRN"
        assert df["ballot_position_2"].iloc[0] == 1

    def test_empty_collection(self):
        assert records_to_frame([]).empty

    def test_year_to_frames_tables(self):
        frames = year_to_frames(_make_results())
        assert list(frames) == [
            "first_preferences", "two_candidate_preferred", "preference_distributions",
        ]
        assert len(frames["preference_distributions"]) == 2


# ---------------------------------------------------------------------------
# Writing
# ---------------------------------------------------------------------------

class TestExportYear:
    """Tests for export_year()."""

    def test_csv_export(self, tmp_path):
        paths = export_year(_make_results(), tmp_path, output_format="csv")
        assert len(paths) == 3
        assert all(p.endswith(".csv") for p in paths)

        loaded = pd.read_csv(tmp_path / "preference_distributions.csv", encoding="utf-8-sig")
        assert sorted(loaded["preference_count"]) == [30000, 40000]

    def test_parquet_export(self, tmp_path):
        export_year(_make_results(), tmp_path / "2022")
        loaded = pd.read_parquet(tmp_path / "2022" / "two_candidate_preferred.parquet")
        assert loaded["division"].iloc[0] == "KingsfordSmith"
        assert loaded["swing_1"].iloc[0] == pytest.approx(3.2)

    def test_unsupported_format(self, tmp_path):
        with pytest.raises(ExportError, match="Unsupported output format"):
            export_year(_make_results(), tmp_path, output_format="xlsx")  # type: ignore[arg-type]

    def test_write_failure_wrapped(self, tmp_path, monkeypatch):
        def _boom(self, *args, **kwargs):
            raise OSError("disk full")

        monkeypatch.setattr(pd.DataFrame, "to_csv", _boom)
        with pytest.raises(ExportError, match="disk full"):
            export_year(_make_results(), tmp_path, output_format="csv")
