"""
aec-ingest: typed ingestion of AEC House of Representatives results.

Public API surface:

- ``process_file(data, kind)`` -- decode one downloaded file into typed
  records of a ``RecordKind``.  Bad rows are logged and dropped; the
  ``DecodeResult`` carries both the records and the failures.

- ``decode_records(data, kind)`` -- same, returning only the records.

- ``load_year(election, config)`` -- fetch-or-decode one election year.
  Returns the cached ``YearResults`` when present, otherwise downloads
  and decodes the three files and caches the result.

- ``load_elections(config)`` -- ``load_year`` for every configured
  election, returned as a fresh ``{year: YearResults}`` dict.
"""

from __future__ import annotations

import logging

from aec_ingest._pipeline import DecodeResult, GroupFailure, decode_records, process_file
from aec_ingest.cache import YearCache
from aec_ingest.config import ElectionConfig, IngestConfig, default_config
from aec_ingest.download import Fetcher
from aec_ingest.enums import Division, PartyAffiliation
from aec_ingest.kinds import (
    FIRST_PREFERENCES,
    PREFERENCE_DISTRIBUTION,
    RECORD_KINDS,
    TWO_CANDIDATE_PREFERRED,
    RecordKind,
)
from aec_ingest.models import (
    FirstPreference,
    PreferenceDistribution,
    TcpCandidate,
    TwoCandidatePreferred,
    YearResults,
)

__all__ = [
    "process_file",
    "decode_records",
    "load_year",
    "load_elections",
    "DecodeResult",
    "GroupFailure",
    "RecordKind",
    "RECORD_KINDS",
    "FIRST_PREFERENCES",
    "TWO_CANDIDATE_PREFERRED",
    "PREFERENCE_DISTRIBUTION",
    "Division",
    "PartyAffiliation",
    "FirstPreference",
    "TcpCandidate",
    "TwoCandidatePreferred",
    "PreferenceDistribution",
    "YearResults",
]

logger = logging.getLogger(__name__)


def load_year(
    election: ElectionConfig,
    config: IngestConfig | None = None,
    fetcher: Fetcher | None = None,
    cache: YearCache | None = None,
) -> YearResults:
    """Fetch-or-decode the three result collections for one election.

    Orchestration:
      1. If caching is enabled and ``{year}.json`` exists, return it.
      2. Otherwise download and decode first preferences, two-candidate
         preferred and preference distribution, in that order.
      3. Write the fresh ``YearResults`` to the cache (when enabled).

    Args:
        election: The election year and AEC code.
        config: Settings; ``default_config()`` if ``None``.
        fetcher: Download collaborator; built from ``config.source`` if
            ``None``.
        cache: Cache collaborator; built from ``config.cache`` if ``None``.

    Raises:
        FetchError: If a download fails.
        FatalFileError: If a downloaded file is not valid UTF-8.
        CacheError: If a cached entry exists but cannot be read.
    """
    config = config or default_config()
    if cache is None:
        cache = YearCache(config.cache.cache_dir)

    logger.info("Loading data for Federal Election %d", election.year)

    if config.cache.enabled:
        cached = cache.read(election.year)
        if cached is not None:
            return cached

    if fetcher is None:
        fetcher = Fetcher(config.source)

    workers = config.processing.max_workers
    first, tcp, dop = (
        decode_records(fetcher.fetch(election.code, kind.file_name), kind, max_workers=workers)
        for kind in (FIRST_PREFERENCES, TWO_CANDIDATE_PREFERRED, PREFERENCE_DISTRIBUTION)
    )
    results = YearResults(
        first_preferences=first,
        two_candidate_preferred=tcp,
        preference_distributions=dop,
    )

    if config.cache.enabled:
        cache.write(election.year, results)
    return results


def load_elections(
    config: IngestConfig | None = None,
    fetcher: Fetcher | None = None,
    cache: YearCache | None = None,
) -> dict[int, YearResults]:
    """Run ``load_year`` for every configured election, keyed by year."""
    config = config or default_config()
    fetcher = fetcher or Fetcher(config.source)
    cache = cache or YearCache(config.cache.cache_dir)
    return {
        election.year: load_year(election, config, fetcher=fetcher, cache=cache)
        for election in config.elections
    }
