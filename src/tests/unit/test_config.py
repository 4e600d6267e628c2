"""Tests for hexnote.core.config."""

import logging

import pytest

import hexnote.core.config as config


class TestEnvHelpers:
    """Tests for environment variable helpers."""

    def test_get_env_returns_value(self, monkeypatch):
        """get_env returns environment variable value."""
        monkeypatch.setenv("TEST_VAR", "test_value")

        assert config.get_env("TEST_VAR") == "test_value"

    def test_get_env_returns_default(self, monkeypatch):
        """get_env returns default when var not set."""
        monkeypatch.delenv("NONEXISTENT_VAR", raising=False)

        assert config.get_env("NONEXISTENT_VAR", "default") == "default"

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("42", 42),
            ("not_a_number", 99),
            (None, 123),
        ],
    )
    def test_get_env_int(self, monkeypatch, value, expected):
        """get_env_int parses or falls back to default."""
        if value is None:
            monkeypatch.delenv("INT_VAR", raising=False)
        else:
            monkeypatch.setenv("INT_VAR", value)

        assert config.get_env_int("INT_VAR", expected) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("true", True),
            ("True", True),
            ("1", True),
            ("yes", True),
            ("false", False),
            ("0", False),
            ("no", False),
            ("maybe", True),
        ],
    )
    def test_get_env_bool(self, monkeypatch, value, expected):
        """get_env_bool understands the usual spellings."""
        monkeypatch.setenv("BOOL_VAR", value)

        assert config.get_env_bool("BOOL_VAR", default=True) is expected


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_returns_package_logger(self):
        """setup_logging hands back the hexnote logger."""
        logger = config.setup_logging("WARNING")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "hexnote"

    def test_unknown_level_is_tolerated(self):
        """An unknown level name falls back to INFO instead of failing."""
        config.setup_logging("LOUD")


def test_default_port():
    """The API has a default port."""
    assert isinstance(config.HEXNOTE_PORT, int)
