"""
Per-year cache of decoded results.

Each election year is stored as one JSON document,
``{cache_dir}/{year}.json``, produced by ``YearResults.model_dump_json``
and read back with ``YearResults.model_validate_json``.  The keys are the
record field names, so the files stay readable and diffable.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from pydantic import ValidationError

from aec_ingest.exceptions import CacheError
from aec_ingest.models import YearResults

logger = logging.getLogger(__name__)


class YearCache:
    """Read, write and purge cached ``YearResults`` keyed by year."""

    def __init__(self, cache_dir: str | Path = "cache") -> None:
        self.cache_dir = Path(cache_dir)

    def path_for(self, year: int) -> Path:
        return self.cache_dir / f"{year}.json"

    def read(self, year: int) -> YearResults | None:
        """Return the cached results for *year*, or ``None`` on a miss.

        Raises:
            CacheError: If an entry exists but is not valid cached results.
        """
        path = self.path_for(year)
        if not path.exists():
            logger.debug("Cache miss for %d (%s)", year, path)
            return None
        try:
            results = YearResults.model_validate_json(path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as exc:
            raise CacheError(f"Cannot read cached results {path}: {exc}") from exc
        logger.info("Loaded %d from cache (%s)", year, path)
        return results

    def write(self, year: int, results: YearResults) -> Path:
        """Persist *results* for *year*, replacing any existing entry."""
        path = self.path_for(year)
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(results.model_dump_json(indent=2), encoding="utf-8")
        logger.info("Cached %d -> %s", year, path)
        return path

    def purge(self) -> None:
        """Delete every cached year.  Failures are logged, not raised."""
        if not self.cache_dir.exists():
            return
        try:
            shutil.rmtree(self.cache_dir)
        except OSError as exc:
            logger.warning("Failed to delete cache folder %s: %s", self.cache_dir, exc)
            return
        logger.info("Purged cache folder %s", self.cache_dir)
