"""
Typed record models for decoded AEC House of Representatives results.

Each model corresponds to one published download:

- ``FirstPreference``: HouseFirstPrefsByPartyDownload-{code}.csv
- ``TwoCandidatePreferred``: HouseTcpByCandidateByPollingPlaceDownload-{code}.csv
- ``PreferenceDistribution``: HouseDopByDivisionDownload-{code}.csv

All models are frozen: records are built once by the decoder and only
aggregated afterwards.  Frozen models are also hashable, which lets
callers compare collections as multisets (``collections.Counter``).

``YearResults`` bundles the three collections for one election and is
the unit written to and read from the cache.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from aec_ingest.enums import Division, PartyAffiliation

U16_MAX = 2**16 - 1
U64_MAX = 2**64 - 1


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True)


class FirstPreference(_Record):
    """First-preference votes for one party, split by vote type."""

    party: PartyAffiliation
    ordinary: int = Field(..., ge=0, le=U64_MAX)
    absent: int = Field(..., ge=0, le=U64_MAX)
    provisional: int = Field(..., ge=0, le=U64_MAX)
    prepoll: int = Field(..., ge=0, le=U64_MAX)
    postal: int = Field(..., ge=0, le=U64_MAX)
    swing: float

    @property
    def total(self) -> int:
        """Sum of the five vote counts (unbounded Python int)."""
        return (
            self.ordinary
            + self.absent
            + self.provisional
            + self.prepoll
            + self.postal
        )


class TcpCandidate(_Record):
    """One side of a two-candidate-preferred count."""

    party: PartyAffiliation
    ordinary: int = Field(..., ge=0, le=U64_MAX)
    swing: float
    ballot_position: int = Field(..., ge=0, le=U16_MAX)


class TwoCandidatePreferred(_Record):
    """The final two candidates of a division, in file order."""

    division: Division
    parties: tuple[TcpCandidate, TcpCandidate]


class PreferenceDistribution(_Record):
    """Preference and transfer counts for a party within a division."""

    division: Division
    party: PartyAffiliation
    preference_count: int = Field(..., ge=0, le=U64_MAX)
    transfer_count: int = Field(..., ge=0, le=U64_MAX)


class YearResults(_Record):
    """The three decoded collections for one federal election."""

    first_preferences: list[FirstPreference] = Field(default_factory=list)
    two_candidate_preferred: list[TwoCandidatePreferred] = Field(default_factory=list)
    preference_distributions: list[PreferenceDistribution] = Field(default_factory=list)
