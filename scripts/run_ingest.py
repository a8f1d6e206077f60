"""
Load every configured federal election via the public API.

Usage:
    python scripts/run_ingest.py                      # default elections, cached
    python scripts/run_ingest.py aecconfig.yaml       # elections from a config file
    python scripts/run_ingest.py -c                   # purge the cache first
    python scripts/run_ingest.py --export             # also write tables per year

Logs go to stdout and are appended to elc.log.  Set AEC_INGEST_DEBUG to
any value for DEBUG output.
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

LOG_FILE = "elc.log"

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.DEBUG if os.environ.get("AEC_INGEST_DEBUG") else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
    handlers=[
        logging.StreamHandler(sys.stdout),
        logging.FileHandler(LOG_FILE, encoding="utf-8"),
    ],
)
log = logging.getLogger("run_ingest")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> None:
    import aec_ingest
    from aec_ingest.cache import YearCache
    from aec_ingest.config import default_config, load_config
    from aec_ingest.export import export_year

    args = sys.argv[1:]
    clear_cache = "-c" in args or "--clear-cache" in args
    export = "--export" in args
    config_paths = [a for a in args if not a.startswith("-")]

    config = load_config(config_paths[0]) if config_paths else default_config()
    cache = YearCache(config.cache.cache_dir)

    if clear_cache:
        cache.purge()

    data = aec_ingest.load_elections(config, cache=cache)

    for year, results in data.items():
        log.info(
            "%d: %d first preference, %d two candidate preferred, "
            "%d preference distribution records",
            year,
            len(results.first_preferences),
            len(results.two_candidate_preferred),
            len(results.preference_distributions),
        )
        if export:
            out = Path(config.output.output_dir) / str(year)
            export_year(results, out, config.output.output_format)

    log.info("All elections processed.")


if __name__ == "__main__":
    main()
