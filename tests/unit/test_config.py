"""
Unit tests for configuration models and YAML I/O (aec_ingest.config).
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from aec_ingest.config import (
    DEFAULT_URL_TEMPLATE,
    ElectionConfig,
    IngestConfig,
    default_config,
    load_config,
    save_config,
)
from aec_ingest.exceptions import ConfigValidationError


class TestDefaults:
    """Tests for the built-in defaults."""

    def test_default_elections(self):
        config = default_config()
        assert [(e.year, e.code) for e in config.elections] == [
            (2022, 27966),
            (2019, 24310),
            (2016, 20499),
        ]

    def test_default_sections(self):
        config = default_config()
        assert config.source.url_template == DEFAULT_URL_TEMPLATE
        assert config.source.timeout == 30.0
        assert config.cache.cache_dir == "cache"
        assert config.cache.enabled is True
        assert config.processing.max_workers is None
        assert config.output.output_format == "parquet"

    def test_defaults_are_not_shared(self):
        a, b = default_config(), default_config()
        a.elections.append(ElectionConfig(year=2013, code=17496))
        assert len(b.elections) == 3


class TestValidation:
    """Pydantic-level validation."""

    def test_duplicate_years_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate election years"):
            IngestConfig(elections=[
                ElectionConfig(year=2022, code=1),
                ElectionConfig(year=2022, code=2),
            ])

    def test_bad_output_format_rejected(self):
        with pytest.raises(ValidationError):
            IngestConfig.model_validate({"output": {"output_format": "xlsx"}})

    def test_zero_workers_rejected(self):
        with pytest.raises(ValidationError):
            IngestConfig.model_validate({"processing": {"max_workers": 0}})


class TestYamlIO:
    """Tests for load_config() / save_config()."""

    def test_round_trip(self, tmp_path):
        path = tmp_path / "aecconfig.yaml"
        config = IngestConfig(
            elections=[ElectionConfig(year=2013, code=17496)],
        )
        config.cache.enabled = False
        save_config(config, path)
        assert load_config(path) == config

    def test_saved_file_has_header_comment(self, tmp_path):
        path = tmp_path / "nested" / "aecconfig.yaml"
        save_config(default_config(), path)
        assert path.read_text(encoding="utf-8").startswith("# aec-ingest configuration")

    def test_partial_file_fills_defaults(self, tmp_path):
        path = tmp_path / "aecconfig.yaml"
        path.write_text("elections:\n  - year: 2010\n    code: 15508\n", encoding="utf-8")
        config = load_config(path)
        assert config.elections == [ElectionConfig(year=2010, code=15508)]
        assert config.cache.cache_dir == "cache"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "aecconfig.yaml"
        path.write_text("", encoding="utf-8")
        with pytest.raises(ConfigValidationError, match="empty"):
            load_config(path)
