# tests/unit/config/test_settings.py — v2
"""Tests for config/settings.py — typed Settings and validation rules."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from uuidcache.config.settings import ConfigurationError, Settings, load_settings


class TestSettingsDefaults:
    def test_default_cache(self):
        s = Settings(_env_file=None)
        assert s.cache_backend == "sqlite"
        assert s.cache_path == Path("~/.uuidcache/uuid_cache.db")

    def test_default_logging(self):
        s = Settings(_env_file=None)
        assert s.log_level == "INFO"
        assert s.log_format == "json"
        assert s.log_file is None

    def test_resolved_path_expands_home(self):
        s = Settings(_env_file=None)
        assert "~" not in str(s.resolved_cache_path)


class TestSettingsValidation:
    def test_redis_without_url(self):
        with pytest.raises(ConfigurationError, match="CACHE_REDIS_URL"):
            Settings(_env_file=None, cache_backend="redis")

    def test_redis_with_url(self):
        s = Settings(
            _env_file=None, cache_backend="redis", cache_redis_url="redis://localhost"
        )
        assert s.cache_redis_key == "uuidcache:names"

    def test_invalid_backend(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, cache_backend="postgres")

    def test_negative_retention(self):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_retention=-1)


class TestEnvironment:
    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("CACHE_BACKEND", "memory")
        s = Settings(_env_file=None)
        assert s.cache_backend == "memory"

    def test_env_file(self, tmp_path):
        env = tmp_path / ".env"
        env.write_text("CACHE_PATH=/tmp/names.db\nLOG_FORMAT=text\n", encoding="utf-8")
        s = Settings(_env_file=env)
        assert s.cache_path == Path("/tmp/names.db")
        assert s.log_format == "text"


class TestLoadSettings:
    def test_overrides(self, tmp_path):
        s = load_settings(_env_file=None, cache_path=tmp_path / "x.db")
        assert s.cache_path == tmp_path / "x.db"
