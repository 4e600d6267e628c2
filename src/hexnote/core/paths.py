"""Default location of the cards directory.

The desktop app keeps its cards under the per-user data directory of the
platform. ``HEXNOTE_CARDS_DIR`` overrides the platform default.
"""

import os
import sys
from pathlib import Path

from hexnote.cards.errors import PathResolutionError
from hexnote.core.config import get_env

APP_DIR_NAME = "HexStickyNote"
MACOS_BUNDLE_ID = "com.HexStickyNote.HexStickyNote"


def get_cards_directory(platform: str | None = None) -> Path:
    """
    Resolve the directory holding the card files.

    Args:
        platform: Value in the style of ``sys.platform`` (defaults to the
            running platform)

    Returns:
        Path to the cards directory (not created)

    Raises:
        PathResolutionError: On Windows when APPDATA is not set
    """
    override = get_env("HEXNOTE_CARDS_DIR")
    if override:
        return Path(override).expanduser()

    platform = platform or sys.platform

    if platform == "win32":
        app_data = os.getenv("APPDATA")
        if not app_data:
            raise PathResolutionError("APPDATA environment variable is not set")
        return Path(app_data) / APP_DIR_NAME / APP_DIR_NAME / "data" / "cards"

    if platform == "darwin":
        return (
            Path.home()
            / "Library"
            / "Application Support"
            / MACOS_BUNDLE_ID
            / "data"
            / "cards"
        )

    data_home = os.getenv("XDG_DATA_HOME") or str(Path.home() / ".local" / "share")
    return Path(data_home) / APP_DIR_NAME / APP_DIR_NAME / "data" / "cards"
