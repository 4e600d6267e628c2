"""Card tools exposed to AI agents.

Each tool wraps one repository operation and reports the outcome as text,
the way tool-calling protocols expect it. Errors never escape a tool; they
come back as a ToolResult with is_error set.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any

from hexnote.cards.errors import CardNotFoundError
from hexnote.cards.repository import CardRepository, get_card_repository
from hexnote.core.types import Card, ToolResult

# Characters of content shown per card by list_notes
PREVIEW_CHARS = 200

logger = logging.getLogger(__name__)


def _iso(timestamp: int) -> str:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).isoformat()


def _card_json(card: Card) -> str:
    return json.dumps(card.model_dump(), indent=2, ensure_ascii=False)


def _preview(card: Card) -> dict[str, Any]:
    content = card.content
    return {
        "id": card.id,
        "preview": content[:PREVIEW_CHARS]
        + ("..." if len(content) > PREVIEW_CHARS else ""),
        "created_at": _iso(card.created_at),
        "updated_at": _iso(card.updated_at),
    }


class CardTools:
    """Tools for note card operations."""

    def __init__(self, repository: CardRepository):
        """
        Initialize card tools.

        Args:
            repository: Repository the tools operate on
        """
        self.repository = repository

    def create_note(self, content: str) -> ToolResult:
        """Create a new note with the given Markdown content."""
        try:
            card = self.repository.create(content)
        except Exception as e:
            logger.error("Failed to create card: %s", e, exc_info=True)
            return ToolResult(f"Error creating note: {e}", is_error=True)
        logger.debug("Card created via tool: %s", card.id)
        return ToolResult(_card_json(card))

    def list_notes(self) -> ToolResult:
        """List all notes with a preview of their content."""
        try:
            cards = self.repository.list()
        except Exception as e:
            logger.error("Failed to list cards: %s", e, exc_info=True)
            return ToolResult(f"Error listing notes: {e}", is_error=True)
        previews = [_preview(card) for card in cards]
        return ToolResult(json.dumps(previews, indent=2, ensure_ascii=False))

    def read_note(self, id: str) -> ToolResult:
        """Read a note by id."""
        try:
            card = self.repository.read(id)
        except CardNotFoundError:
            return ToolResult(f"Note with ID {id} not found.", is_error=True)
        except Exception as e:
            logger.error("Failed to read card %s: %s", id, e, exc_info=True)
            return ToolResult(f"Error reading note: {e}", is_error=True)
        return ToolResult(_card_json(card))

    def update_note(self, id: str, content: str) -> ToolResult:
        """Replace the content of an existing note."""
        try:
            card = self.repository.update(id, content)
        except CardNotFoundError:
            return ToolResult(f"Note with ID {id} not found.", is_error=True)
        except Exception as e:
            logger.error("Failed to update card %s: %s", id, e, exc_info=True)
            return ToolResult(f"Error updating note: {e}", is_error=True)
        return ToolResult(_card_json(card))

    def delete_note(self, id: str) -> ToolResult:
        """Delete a note permanently."""
        try:
            self.repository.delete(id)
        except CardNotFoundError:
            return ToolResult(f"Note with ID {id} not found.", is_error=True)
        except Exception as e:
            logger.error("Failed to delete card %s: %s", id, e, exc_info=True)
            return ToolResult(f"Error deleting note: {e}", is_error=True)
        return ToolResult(f"Note {id} deleted successfully.")


# Default instance
_card_tools: CardTools | None = None


def get_card_tools(repository: CardRepository | None = None) -> CardTools:
    """Get or create the default card tools instance."""
    global _card_tools
    if _card_tools is None:
        _card_tools = CardTools(repository or get_card_repository())
    return _card_tools


def set_card_tools(tools: CardTools | None) -> None:
    """Set the default card tools instance (for testing)."""
    global _card_tools
    _card_tools = tools
