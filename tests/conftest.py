"""
Shared test fixtures and synthetic AEC downloads for aec-ingest tests.

The samples below mimic the three published House downloads closely
enough to exercise header resolution, quoting and grouping, but are
small enough to reason about line by line.
"""

from __future__ import annotations

import pytest

# ---------------------------------------------------------------------------
# Synthetic downloads
# ---------------------------------------------------------------------------

FIRST_PREFS_CSV = """\
2022 Federal Election House of Representatives First Preferences By Party
StateAb,PartyAb,PartyNm,OrdinaryVotes,AbsentVotes,ProvisionalVotes,PrePollVotes,PostalVotes,TotalVotes,TotalPercentage,TotalSwing
NSW,ALP,Australian Labor Party,1234,56,7,890,123,2310,33.10,-1.20
NSW,LP,Liberal,2000,100,10,1500,400,4010,40.50,2.30
NSW,ZZZ,"Someone New, Inc",10,1,0,5,2,18,0.10,0.10
NSW,GRN,The Greens,abc,1,1,1,1,4,1.00,0.50
"""

TCP_CSV = """\
2022 Federal Election House of Representatives Two Candidate Preferred By Polling Place
StateAb,DivisionID,DivisionNm,PollingPlaceID,PollingPlace,CandidateID,Surname,GivenNm,BallotPosition,Elected,HistoricElected,PartyAb,PartyNm,OrdinaryVotes,Swing
NSW,101,Eden-Monaro,1,"Bega, Main St",11,SMITH,Jo,2,Y,N,ALP,Australian Labor Party,500,3.20
NSW,101,Eden-Monaro,1,"Bega, Main St",12,JONES,Al,1,N,N,LP,Liberal,450,-3.20
ACT,102,NotARealPlace,2,Civic,13,BROWN,Bo,1,N,N,ALP,Australian Labor Party,10,1.00
ACT,102,NotARealPlace,2,Civic,14,GREEN,Cy,2,N,N,GRN,The Greens,12,-1.00
WA,103,O'Connor,3,Albany,15,WHITE,Di,3,Y,Y,LP,Liberal,700,0.50
WA,103,O'Connor,3,Albany,16,BLACK,Ed,4,N,N,ALP,Australian Labor Party,600,-0.50
"""

# One unmatched candidate left over at the end.
TCP_ODD_CSV = TCP_CSV + "VIC,104,Kooyong,4,Hawthorn,17,TEAL,Mo,1,Y,N,IND,Independent,900,9.00\n"

DOP_CSV = """\
2022 Federal Election House of Representatives Distribution of Preferences By Division
StateAb,DivisionID,DivisionNm,CountNumber,BallotPosition,CandidateID,Surname,GivenNm,PartyAb,PartyNm,Elected,HistoricElected,CalculationType,CalculationValue
ACT,201,Bean,0,1,21,ONE,Ann,ALP,Australian Labor Party,Y,N,Preference Count,40000
ACT,201,Bean,0,1,21,ONE,Ann,ALP,Australian Labor Party,Y,N,Preference Percent,45.50
ACT,201,Bean,0,1,21,ONE,Ann,ALP,Australian Labor Party,Y,N,Transfer Percent,0.00
ACT,201,Bean,0,1,21,ONE,Ann,ALP,Australian Labor Party,Y,N,Transfer Count,0
ACT,201,Bean,1,2,22,TWO,Bea,LP,Liberal,N,N,Preference Count,30000
ACT,201,Bean,1,2,22,TWO,Bea,LP,Liberal,N,N,Preference Percent,34.10
ACT,201,Bean,1,2,22,TWO,Bea,LP,Liberal,N,N,Transfer Percent,1.20
ACT,201,Bean,1,2,22,TWO,Bea,LP,Liberal,N,N,Transfer Count,1500
"""


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def first_prefs_bytes() -> bytes:
    return FIRST_PREFS_CSV.encode("utf-8")


@pytest.fixture
def tcp_bytes() -> bytes:
    return TCP_CSV.encode("utf-8")


@pytest.fixture
def tcp_odd_bytes() -> bytes:
    return TCP_ODD_CSV.encode("utf-8")


@pytest.fixture
def dop_bytes() -> bytes:
    return DOP_CSV.encode("utf-8")


class FakeFetcher:
    """Serves synthetic downloads by file name and records every call."""

    def __init__(self, files: dict[str, bytes]) -> None:
        self.files = files
        self.calls: list[tuple[int, str]] = []

    def fetch(self, code: int, file_name: str) -> bytes:
        self.calls.append((code, file_name))
        return self.files[file_name]


@pytest.fixture
def fake_fetcher(first_prefs_bytes, tcp_bytes, dop_bytes) -> FakeFetcher:
    return FakeFetcher({
        "HouseFirstPrefsByPartyDownload": first_prefs_bytes,
        "HouseTcpByCandidateByPollingPlaceDownload": tcp_bytes,
        "HouseDopByDivisionDownload": dop_bytes,
    })


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: end-to-end tests over the full fetch/decode/cache flow",
    )
