"""
Field decoding for AEC results rows.

Converts the string cells of one row group into a typed record.  Every
failure raises a ``RecordDecodeError`` subclass naming the offending
column; the pipeline turns that into a dropped group.

Column names are the AEC download headers (``PartyAb``, ``DivisionNm``,
``OrdinaryVotes``...).  Numbers are parsed strictly:

- unsigned integers: optional ``+`` then ASCII digits, within the
  field's bit width (no signs, separators or whitespace);
- floats: what ``float()`` accepts, minus underscore grouping and
  non-finite values (``nan``, ``inf``), which cannot round-trip through
  the JSON cache.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping, Sequence

from aec_ingest.enums import Division, PartyAffiliation
from aec_ingest.exceptions import MissingFieldError, NumericConversionError
from aec_ingest.models import (
    U16_MAX,
    U64_MAX,
    FirstPreference,
    PreferenceDistribution,
    TcpCandidate,
    TwoCandidatePreferred,
)

Row = Mapping[str, str]

PARTY = "PartyAb"
DIVISION = "DivisionNm"
ORDINARY = "OrdinaryVotes"
ABSENT = "AbsentVotes"
PROVISIONAL = "ProvisionalVotes"
PREPOLL = "PrePollVotes"
POSTAL = "PostalVotes"
TOTAL_SWING = "TotalSwing"
SWING = "Swing"
BALLOT_POSITION = "BallotPosition"
CALCULATION_VALUE = "CalculationValue"

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


# ---------------------------------------------------------------------------
# Cell accessors
# ---------------------------------------------------------------------------

def get_field(row: Row, name: str) -> str:
    """Return the raw cell for column *name*.

    Raises:
        MissingFieldError: If the row has no such column.
    """
    try:
        return row[name]
    except KeyError:
        raise MissingFieldError(name) from None


def parse_unsigned(row: Row, name: str, maximum: int = U64_MAX) -> int:
    value = get_field(row, name)
    if not _UNSIGNED_RE.fullmatch(value):
        raise NumericConversionError(name, value, "unsigned integer")
    # Bounded before int() so huge cells cannot hit the int-conversion
    # digit limit, which raises a plain ValueError.
    if len(value.lstrip("+").lstrip("0")) > len(str(maximum)):
        raise NumericConversionError(name, value, f"unsigned integer <= {maximum}")
    number = int(value)
    if number > maximum:
        raise NumericConversionError(name, value, f"unsigned integer <= {maximum}")
    return number


def parse_float(row: Row, name: str) -> float:
    value = get_field(row, name)
    if "_" in value:
        raise NumericConversionError(name, value, "float")
    try:
        number = float(value)
    except ValueError:
        raise NumericConversionError(name, value, "float") from None
    if not math.isfinite(number):
        raise NumericConversionError(name, value, "finite float")
    return number


def parse_party(row: Row, name: str = PARTY) -> PartyAffiliation:
    return PartyAffiliation.decode(get_field(row, name))


def parse_division(row: Row, name: str = DIVISION) -> Division:
    return Division.decode(get_field(row, name), field=name)


# ---------------------------------------------------------------------------
# Per-kind decoders
# ---------------------------------------------------------------------------

def decode_first_preference(group: Sequence[Row]) -> FirstPreference:
    """Decode a one-row group of HouseFirstPrefsByPartyDownload."""
    row = group[0]
    return FirstPreference(
        party=parse_party(row),
        ordinary=parse_unsigned(row, ORDINARY),
        absent=parse_unsigned(row, ABSENT),
        provisional=parse_unsigned(row, PROVISIONAL),
        prepoll=parse_unsigned(row, PREPOLL),
        postal=parse_unsigned(row, POSTAL),
        swing=parse_float(row, TOTAL_SWING),
    )


def decode_tcp_candidate(row: Row) -> TcpCandidate:
    return TcpCandidate(
        party=parse_party(row),
        ordinary=parse_unsigned(row, ORDINARY),
        swing=parse_float(row, SWING),
        ballot_position=parse_unsigned(row, BALLOT_POSITION, maximum=U16_MAX),
    )


def decode_two_candidate_preferred(group: Sequence[Row]) -> TwoCandidatePreferred:
    """Decode a two-row group of HouseTcpByCandidateByPollingPlaceDownload.

    The division comes from the first row; each row is one candidate.
    """
    division = parse_division(group[0])
    first, second = (decode_tcp_candidate(row) for row in group)
    return TwoCandidatePreferred(division=division, parties=(first, second))


def decode_preference_distribution(group: Sequence[Row]) -> PreferenceDistribution:
    """Decode a four-row group of HouseDopByDivisionDownload.

    Only the first row (preference count) and the last row (transfer
    count) are read; the two middle rows carry percentages.
    """
    first, last = group[0], group[-1]
    return PreferenceDistribution(
        division=parse_division(first),
        party=parse_party(first),
        preference_count=parse_unsigned(first, CALCULATION_VALUE),
        transfer_count=parse_unsigned(last, CALCULATION_VALUE),
    )
