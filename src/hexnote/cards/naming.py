"""Collision-free filenames for card records.

Allocation claims a name by creating an empty placeholder with an exclusive
create, so two writers racing on the same title never receive the same file.
The caller then replaces the placeholder with the finished record.
"""

import logging
from collections.abc import Iterator
from pathlib import Path
from uuid import uuid4

from hexnote.cards.errors import AllocationExhausted

RECORD_SUFFIX = ".md"

# Highest numeric suffix tried before falling back to a random name
MAX_SUFFIX = 999

logger = logging.getLogger(__name__)


def candidate_names(base_name: str) -> Iterator[str]:
    """Yield "<base>.md", then "<base> (2).md" up to "<base> (999).md"."""
    yield f"{base_name}{RECORD_SUFFIX}"
    for n in range(2, MAX_SUFFIX + 1):
        yield f"{base_name} ({n}){RECORD_SUFFIX}"


def claim(path: Path) -> bool:
    """
    Atomically create an empty file at path.

    Returns:
        True if the file was created, False if something already exists there
    """
    try:
        with open(path, "x", encoding="utf-8"):
            pass
    except FileExistsError:
        return False
    return True


def allocate(directory: Path, base_name: str, *, current: str | None = None) -> str:
    """
    Claim a filename for a record in directory.

    Args:
        directory: Cards directory
        base_name: Sanitized filename stem
        current: Filename the card already occupies; it counts as free

    Returns:
        Filename (not path). Unless it equals current, an empty placeholder
        now exists under that name.

    Raises:
        AllocationExhausted: If even the random fallback name was taken
    """
    for name in candidate_names(base_name):
        if name == current:
            return name
        if claim(directory / name):
            return name

    fallback = f"{uuid4()}{RECORD_SUFFIX}"
    logger.warning(
        "All numbered names for '%s' are taken, using %s", base_name, fallback
    )
    if not claim(directory / fallback):
        raise AllocationExhausted(f"Could not allocate a filename for '{base_name}'")
    return fallback
