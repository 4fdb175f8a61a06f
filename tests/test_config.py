# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Tests for codec configuration."""

from genro_queries.config import DEFAULTS, CodecConfig, default_config
from genro_queries.querystring import parse_query_string


class TestCodecConfig:
    """Tests for CodecConfig."""

    def test_defaults(self) -> None:
        """Test built-in defaults apply when nothing is given."""
        config = CodecConfig()
        assert config.separator == DEFAULTS["separator"]
        assert config.encoding == "utf-8"
        assert config.max_depth == 64
        assert config.max_fields is None
        assert config.space_as_plus is True

    def test_explicit_overrides(self) -> None:
        """Test constructor parameters override defaults."""
        config = CodecConfig(separator=";", max_depth=3, max_fields=10, space_as_plus=False)
        assert config.separator == ";"
        assert config.max_depth == 3
        assert config.max_fields == 10
        assert config.space_as_plus is False

    def test_none_is_ignored(self) -> None:
        """Test None parameters keep the defaults."""
        config = CodecConfig(separator=None, encoding=None)
        assert config.separator == "&"
        assert config.encoding == "utf-8"

    def test_as_dict(self) -> None:
        """Test as_dict lists every option."""
        assert CodecConfig(separator=";").as_dict() == {
            "separator": ";",
            "encoding": "utf-8",
            "max_depth": 64,
            "max_fields": None,
            "space_as_plus": True,
        }

    def test_repr(self) -> None:
        """Test repr shows the options."""
        assert "CodecConfig" in repr(CodecConfig())


class TestDefaultConfig:
    """Tests for default_config."""

    def test_cached(self) -> None:
        """Test the process default is built once."""
        assert default_config() is default_config()
        assert isinstance(default_config(), CodecConfig)


class TestEnvironment:
    """Tests for GENRO_QUERIES_* environment overrides."""

    def test_env_overrides_defaults(self, monkeypatch) -> None:
        """Test an environment variable replaces the built-in default."""
        monkeypatch.setenv("GENRO_QUERIES_MAX_DEPTH", "1")
        config = CodecConfig()
        assert config.max_depth == 1
        assert config.separator == "&"

    def test_explicit_beats_env(self, monkeypatch) -> None:
        """Test constructor parameters win over the environment."""
        monkeypatch.setenv("GENRO_QUERIES_MAX_DEPTH", "1")
        assert CodecConfig(max_depth=5).max_depth == 5

    def test_env_limit_applies_to_parsing(self, monkeypatch) -> None:
        """Test the environment limit reaches the parser."""
        monkeypatch.setenv("GENRO_QUERIES_MAX_DEPTH", "1")
        config = CodecConfig()
        assert parse_query_string("a[b][c]=1&d[e]=2", config) == {"d": {"e": "2"}}
