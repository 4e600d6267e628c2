"""Shared test fixtures and configuration."""

from __future__ import annotations

import pytest

from hexnote.cards.repository import CardRepository, set_card_repository
from hexnote.tools.card_tools import set_card_tools
from hexnote.tools.registry import set_tool_registry


class FakeClock:
    """Controllable time source for repositories."""

    def __init__(self, now: float = 1_700_000_000):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def cards_dir(tmp_path):
    """Provide an isolated cards directory (not yet created)."""
    return tmp_path / "cards"


@pytest.fixture
def clock():
    """Provide a controllable clock."""
    return FakeClock()


@pytest.fixture
def repository(cards_dir, clock):
    """Create a CardRepository over a temp directory."""
    return CardRepository(cards_dir, clock=clock)


@pytest.fixture
def mock_env(monkeypatch, tmp_path):
    """Set up mock environment variables."""
    env_vars = {
        "HEXNOTE_CARDS_DIR": str(tmp_path / "env_cards"),
        "LOG_LEVEL": "DEBUG",
    }
    for key, value in env_vars.items():
        monkeypatch.setenv(key, value)
    return env_vars


@pytest.fixture
def sample_record():
    """A well-formed record as it appears on disk."""
    return (
        "---\n"
        'id: "5b0c7c1e-8d5e-4a34-9a3c-1f2b3c4d5e6f"\n'
        "created_at: 1700000000\n"
        "updated_at: 1700000100\n"
        "---\n"
        "# Groceries\n"
        "- milk\n"
        "- eggs\n"
    )


@pytest.fixture(autouse=True)
def reset_default_instances():
    """Drop module-level default instances between tests."""
    yield
    set_card_repository(None)
    set_card_tools(None)
    set_tool_registry(None)
