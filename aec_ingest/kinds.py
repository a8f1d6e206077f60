"""
Record-kind descriptors for aec-ingest.

A ``RecordKind`` is everything the generic pipeline needs to know about
one AEC download: how many consecutive rows make a record, how to decode
such a group, what to call it in logs, and which file to fetch.  Adding
a new download means adding a descriptor here, not a new pipeline.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from aec_ingest.decode import (
    decode_first_preference,
    decode_preference_distribution,
    decode_two_candidate_preferred,
)


@dataclass(frozen=True)
class RecordKind:
    """Descriptor for one AEC results download.

    Attributes:
        name: Human-readable name used in log messages.
        group_size: Number of consecutive rows per record.
        decode: Turns one full-size row group into a record.
        file_name: Download name, formatted as ``{file_name}-{code}.csv``.
    """

    name: str
    group_size: int
    decode: Callable[[Sequence[Mapping[str, str]]], Any]
    file_name: str


FIRST_PREFERENCES = RecordKind(
    name="First Preference",
    group_size=1,
    decode=decode_first_preference,
    file_name="HouseFirstPrefsByPartyDownload",
)

TWO_CANDIDATE_PREFERRED = RecordKind(
    name="Two Candidate Preferred",
    group_size=2,
    decode=decode_two_candidate_preferred,
    file_name="HouseTcpByCandidateByPollingPlaceDownload",
)

PREFERENCE_DISTRIBUTION = RecordKind(
    name="Preference Distribution",
    group_size=4,
    decode=decode_preference_distribution,
    file_name="HouseDopByDivisionDownload",
)

RECORD_KINDS: tuple[RecordKind, ...] = (
    FIRST_PREFERENCES,
    TWO_CANDIDATE_PREFERRED,
    PREFERENCE_DISTRIBUTION,
)
