"""File-backed card repository.

Each card lives in its own Markdown file named after the card's title. The
filename carries no meaning: a card is found by decoding files until one
with the requested id turns up. Nothing is cached between calls, the
directory is the only state.
"""

import logging
import os
import tempfile
import time
from collections.abc import Callable, Iterator
from pathlib import Path
from uuid import uuid4

from hexnote.cards.codec import decode_card, encode
from hexnote.cards.errors import CardNotFoundError, FormatError
from hexnote.cards.naming import RECORD_SUFFIX, allocate
from hexnote.cards.titles import filename_stem
from hexnote.core.types import Card

logger = logging.getLogger(__name__)


class CardRepository:
    """Create, list, read, update and delete cards in a directory."""

    def __init__(
        self,
        directory: Path | str | None = None,
        clock: Callable[[], float] | None = None,
    ):
        """
        Initialize card repository.

        Args:
            directory: Cards directory (defaults to the platform data dir)
            clock: Returns the current time in seconds (defaults to time.time)
        """
        if directory is None:
            from hexnote.core.paths import get_cards_directory

            directory = get_cards_directory()
        self.directory = Path(directory)
        self._clock = clock or time.time

    # --- Public API ---

    def create(self, content: str) -> Card:
        """Create a new card and write it to a file named after its title."""
        self.ensure_directory()
        now = self._now()
        card = Card(id=str(uuid4()), content=content, created_at=now, updated_at=now)

        path = self._write(card)
        logger.debug("Created card %s at %s", card.id, path.name)
        return card

    def list(self) -> list[Card]:
        """
        Decode every record in the directory.

        Files that are not valid records are skipped with a warning. If two
        files carry the same id, the one updated last wins.
        """
        self.ensure_directory()
        cards: dict[str, Card] = {}
        for path, card in self._scan():
            seen = cards.get(card.id)
            if seen is not None:
                logger.warning("Duplicate card id %s in %s", card.id, path.name)
                if seen.updated_at >= card.updated_at:
                    continue
            cards[card.id] = card
        return list(cards.values())

    def read(self, card_id: str) -> Card:
        """
        Get a card by id.

        Raises:
            CardNotFoundError: If no record carries the id
        """
        _, card = self._resolve(card_id)
        return card

    def update(self, card_id: str, content: str) -> Card:
        """
        Replace a card's content.

        The record is rewritten under a name derived from the new title. When
        that name differs from the old one, the old file is removed after the
        new one is in place.

        Raises:
            CardNotFoundError: If no record carries the id
        """
        old_path, existing = self._resolve(card_id)
        updated = Card(
            id=existing.id,
            content=content,
            created_at=existing.created_at,
            updated_at=max(self._now(), existing.updated_at),
        )

        new_path = self._write(updated, current=old_path.name)
        if new_path != old_path:
            try:
                old_path.unlink()
            except OSError as e:
                logger.warning("Failed to remove stale card file %s: %s", old_path, e)
            logger.debug(
                "Renamed card %s: %s -> %s", card_id, old_path.name, new_path.name
            )
        return updated

    def delete(self, card_id: str) -> None:
        """
        Delete a card.

        Raises:
            CardNotFoundError: If no record carries the id
        """
        path, _ = self._resolve(card_id)
        try:
            path.unlink()
        except FileNotFoundError as e:
            raise CardNotFoundError(card_id) from e
        logger.debug("Deleted card %s (%s)", card_id, path.name)

    def path_for(self, card_id: str) -> Path:
        """Get the file currently holding a card."""
        path, _ = self._resolve(card_id)
        return path

    def ensure_directory(self) -> Path:
        """Create the cards directory if needed and return it."""
        self.directory.mkdir(parents=True, exist_ok=True)
        return self.directory

    # --- Internals ---

    def _now(self) -> int:
        return int(self._clock())

    def _scan(self) -> Iterator[tuple[Path, Card]]:
        """Yield (path, card) for every decodable record."""
        for path in sorted(self.directory.glob(f"*{RECORD_SUFFIX}")):
            if not path.is_file():
                continue
            try:
                with open(path, encoding="utf-8", newline="") as f:
                    text = f.read()
            except FileNotFoundError:
                # Removed between listing and reading
                continue
            except UnicodeDecodeError as e:
                logger.warning("Skipping %s: not UTF-8 text (%s)", path.name, e)
                continue

            try:
                card = decode_card(text)
            except FormatError as e:
                logger.warning("Skipping %s: %s", path.name, e)
                continue
            yield path, card

    def _resolve(self, card_id: str) -> tuple[Path, Card]:
        self.ensure_directory()
        found: tuple[Path, Card] | None = None
        for path, card in self._scan():
            if card.id != card_id:
                continue
            if found is None or card.updated_at > found[1].updated_at:
                found = (path, card)
        if found is None:
            raise CardNotFoundError(card_id)
        return found

    def _write(self, card: Card, current: str | None = None) -> Path:
        """Allocate a filename for card and write the record there."""
        name = allocate(self.directory, filename_stem(card.content), current=current)
        path = self.directory / name
        try:
            self._write_atomic(path, encode(card))
        except Exception:
            if name != current:
                path.unlink(missing_ok=True)
            raise
        return path

    def _write_atomic(self, path: Path, text: str) -> None:
        # The temp name does not end in .md, so scans never pick it up.
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            newline="",
            dir=self.directory,
            prefix=".",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_path = Path(tmp.name)
            try:
                tmp.write(text)
                tmp.flush()
                os.fsync(tmp.fileno())
            except Exception:
                tmp.close()
                tmp_path.unlink(missing_ok=True)
                raise
        try:
            os.replace(tmp_path, path)
        except Exception:
            tmp_path.unlink(missing_ok=True)
            raise


# Default instance
_repository: CardRepository | None = None


def get_card_repository() -> CardRepository:
    """Get or create the default card repository."""
    global _repository
    if _repository is None:
        _repository = CardRepository()
    return _repository


def set_card_repository(repository: CardRepository | None) -> None:
    """Set the default card repository (for testing)."""
    global _repository
    _repository = repository
