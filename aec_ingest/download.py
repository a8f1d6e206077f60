"""
Downloader for AEC results files.

``Fetcher`` wraps a ``requests.Session`` and retries transient failures
with exponential backoff.  It knows nothing about decoding: it returns
the raw bytes of one CSV download, or raises ``FetchError``.
"""

from __future__ import annotations

import logging
import time

import requests

from aec_ingest.config import SourceConfig
from aec_ingest.exceptions import FetchError

logger = logging.getLogger(__name__)


class Fetcher:
    """Download AEC results files by election code and file name."""

    def __init__(
        self,
        source: SourceConfig | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.source = source or SourceConfig()
        self.session = session or requests.Session()

    def url_for(self, code: int, file_name: str) -> str:
        return self.source.url_template.format(code=code, file_name=file_name)

    def fetch(self, code: int, file_name: str) -> bytes:
        """Return the raw bytes of ``{file_name}-{code}.csv``.

        Raises:
            FetchError: If every attempt fails with a transport or HTTP error.
        """
        url = self.url_for(code, file_name)
        attempts = self.source.max_retries
        last_error: requests.exceptions.RequestException | None = None

        for attempt in range(attempts):
            if attempt > 0:
                delay = self.source.backoff_seconds * (2 ** attempt)
                logger.info("Retry %d for %s, waiting %.1fs", attempt, url, delay)
                time.sleep(delay)
            try:
                response = self.session.get(url, timeout=self.source.timeout)
                response.raise_for_status()
            except requests.exceptions.RequestException as exc:
                logger.warning("Attempt %d failed for %s: %s", attempt + 1, url, exc)
                last_error = exc
                continue
            logger.info("Downloaded %s (%d bytes)", url, len(response.content))
            return response.content

        raise FetchError(
            f"Failed to download {url} after {attempts} attempt(s): {last_error}"
        ) from last_error
