"""
Configuration models and YAML I/O for aec-ingest.

This module defines the Pydantic models that map 1:1 to aecconfig.yaml,
plus helper functions for loading, saving, and building the default
config.

Key models:
- IngestConfig: Top-level config (elections + source + cache + processing + output).
- ElectionConfig: One federal election (year and AEC election code).
- SourceConfig: Download URL template, timeout and retry policy.
- CacheConfig: Where decoded years are cached, and whether to use it.
- ProcessingConfig: Decode thread pool size.
- OutputConfig: Export directory and format.

Key functions:
- load_config(path) -> IngestConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.
- default_config() -> IngestConfig: The built-in election list.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, Field, model_validator

from aec_ingest.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)

DEFAULT_URL_TEMPLATE = (
    "https://results.aec.gov.au/{code}/Website/Downloads/{file_name}-{code}.csv"
)


class ElectionConfig(BaseModel):
    """A federal election and the AEC code its downloads are filed under."""

    year: int = Field(..., description="Election year, used as the cache key")
    code: int = Field(..., ge=0, description="AEC election code, e.g. 27966")


# Older elections (2013: 17496, 2010: 15508, 2007: 13745) use divisions
# since abolished, which ``Division`` does not list.
DEFAULT_ELECTIONS = [
    ElectionConfig(year=2022, code=27966),
    ElectionConfig(year=2019, code=24310),
    ElectionConfig(year=2016, code=20499),
]


class SourceConfig(BaseModel):
    """Where and how results files are downloaded."""

    url_template: str = Field(
        DEFAULT_URL_TEMPLATE,
        description="Format string with {code} and {file_name} placeholders",
    )
    timeout: float = Field(30.0, gt=0, description="HTTP timeout in seconds")
    max_retries: int = Field(3, ge=1, description="Download attempts per file")
    backoff_seconds: float = Field(
        1.0, ge=0, description="Base delay; attempt n waits backoff * 2**n"
    )


class CacheConfig(BaseModel):
    """Per-year cache of decoded results."""

    cache_dir: str = Field("cache", description="Directory holding {year}.json")
    enabled: bool = Field(True, description="If False, always fetch and decode")


class ProcessingConfig(BaseModel):
    """Decode settings."""

    max_workers: int | None = Field(
        None, ge=1, description="Decode threads; None picks min(cpu_count, 8)"
    )


class OutputConfig(BaseModel):
    """Export settings."""

    output_dir: str = Field("outputs/", description="Directory for exported tables")
    output_format: Literal["csv", "parquet"] = Field(
        "parquet", description="Export format"
    )


class IngestConfig(BaseModel):
    """Top-level configuration for aec-ingest.

    Maps 1:1 to aecconfig.yaml.
    """

    elections: list[ElectionConfig] = Field(
        default_factory=lambda: [e.model_copy() for e in DEFAULT_ELECTIONS]
    )
    source: SourceConfig = Field(default_factory=SourceConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)

    @model_validator(mode="after")
    def _check_unique_years(self) -> IngestConfig:
        """Years are cache keys, so each may appear only once."""
        years = [e.year for e in self.elections]
        duplicates = sorted({y for y in years if years.count(y) > 1})
        if duplicates:
            raise ValueError(f"Duplicate election years in config: {duplicates}")
        return self


def default_config() -> IngestConfig:
    return IngestConfig()


def load_config(path: str | Path) -> IngestConfig:
    """Load and validate aecconfig.yaml into an IngestConfig model.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    logger.info("Loaded config from %s", path)
    return IngestConfig.model_validate(raw)


def save_config(config: IngestConfig, path: str | Path) -> None:
    """Serialize an IngestConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# aec-ingest configuration\n")
        f.write("# Edit this file to change elections, cache location, etc.\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)
