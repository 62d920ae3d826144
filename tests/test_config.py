"""Tests for environment configuration."""

from __future__ import annotations

import pytest

from dupfinder.config import (
    ENV_CAPACITY,
    ENV_CHUNK_SIZE,
    config_from_env,
    load_env_file,
)
from dupfinder.fingerprint import DEFAULT_CHUNK_SIZE


class TestConfigFromEnv:
    """Parsing DUPFINDER_* variables."""

    def test_defaults(self):
        config = config_from_env({})
        assert config.capacity is None
        assert config.chunk_size == DEFAULT_CHUNK_SIZE

    def test_values(self):
        config = config_from_env({ENV_CAPACITY: "64", ENV_CHUNK_SIZE: "4096"})
        assert config.capacity == 64
        assert config.chunk_size == 4096

    def test_blank_is_unset(self):
        assert config_from_env({ENV_CAPACITY: "  "}).capacity is None

    @pytest.mark.parametrize("raw", ["x", "1.5", "0", "-1"])
    def test_invalid(self, raw):
        with pytest.raises(ValueError, match=ENV_CAPACITY):
            config_from_env({ENV_CAPACITY: raw})


class TestLoadEnvFile:
    """Loading .env files with python-dotenv."""

    def test_missing_file(self, tmp_path):
        assert load_env_file(tmp_path / ".env") is False

    def test_does_not_override(self, tmp_path, monkeypatch):
        env = tmp_path / ".env"
        env.write_text(f"{ENV_CAPACITY}=9\n{ENV_CHUNK_SIZE}=5\n")
        monkeypatch.setenv(ENV_CAPACITY, "3")
        monkeypatch.setenv(ENV_CHUNK_SIZE, "")
        monkeypatch.delenv(ENV_CHUNK_SIZE)
        assert load_env_file(env) is True
        config = config_from_env()
        assert config.capacity == 3
        assert config.chunk_size == 5
