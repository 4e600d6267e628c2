"""Tests for cards directory resolution."""

from pathlib import Path

import pytest

from hexnote.cards.errors import PathResolutionError
from hexnote.core.paths import get_cards_directory


@pytest.fixture(autouse=True)
def clear_override(monkeypatch):
    """Start every test without the env override."""
    monkeypatch.delenv("HEXNOTE_CARDS_DIR", raising=False)


def test_env_override_wins(monkeypatch, tmp_path):
    """HEXNOTE_CARDS_DIR overrides the platform default."""
    monkeypatch.setenv("HEXNOTE_CARDS_DIR", str(tmp_path / "mine"))

    assert get_cards_directory("win32") == tmp_path / "mine"


def test_env_override_expands_user(monkeypatch):
    """A leading ~ is expanded."""
    monkeypatch.setenv("HEXNOTE_CARDS_DIR", "~/cards")

    assert get_cards_directory() == Path.home() / "cards"


def test_windows_uses_appdata(monkeypatch, tmp_path):
    """Windows stores cards under APPDATA."""
    monkeypatch.setenv("APPDATA", str(tmp_path))

    assert get_cards_directory("win32") == (
        tmp_path / "HexStickyNote" / "HexStickyNote" / "data" / "cards"
    )


def test_windows_without_appdata(monkeypatch):
    """Missing APPDATA is an error."""
    monkeypatch.delenv("APPDATA", raising=False)

    with pytest.raises(PathResolutionError, match="APPDATA"):
        get_cards_directory("win32")


def test_macos_application_support():
    """macOS uses Application Support with the bundle id."""
    assert get_cards_directory("darwin") == (
        Path.home()
        / "Library"
        / "Application Support"
        / "com.HexStickyNote.HexStickyNote"
        / "data"
        / "cards"
    )


def test_linux_xdg_data_home(monkeypatch, tmp_path):
    """Linux honours XDG_DATA_HOME."""
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))

    assert get_cards_directory("linux") == (
        tmp_path / "HexStickyNote" / "HexStickyNote" / "data" / "cards"
    )


def test_linux_default(monkeypatch):
    """Without XDG_DATA_HOME, ~/.local/share is used."""
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)

    assert get_cards_directory("linux") == (
        Path.home()
        / ".local"
        / "share"
        / "HexStickyNote"
        / "HexStickyNote"
        / "data"
        / "cards"
    )
