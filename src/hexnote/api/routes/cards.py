"""Card CRUD endpoints."""

import logging

from fastapi import APIRouter, HTTPException, Response, status
from pydantic import BaseModel, Field

from hexnote.api.deps import RepositoryDep
from hexnote.cards.errors import CardNotFoundError
from hexnote.core.types import Card

router = APIRouter()

logger = logging.getLogger(__name__)


class CardContentRequest(BaseModel):
    """Request body carrying the Markdown content of a card."""

    content: str = Field(..., description="Markdown content of the card")


def _not_found(card_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Card with id {card_id} not found",
    )


def _storage_error(action: str, error: OSError) -> HTTPException:
    logger.error("Failed to %s card: %s", action, error, exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action} card: {error}",
    )


@router.get("/cards", response_model=list[Card])
def list_cards(repository: RepositoryDep) -> list[Card]:
    """List all cards."""
    try:
        return repository.list()
    except OSError as e:
        raise _storage_error("list", e) from e


@router.post("/cards", response_model=Card, status_code=status.HTTP_201_CREATED)
def create_card(request: CardContentRequest, repository: RepositoryDep) -> Card:
    """Create a new card."""
    try:
        return repository.create(request.content)
    except OSError as e:
        raise _storage_error("create", e) from e


@router.get("/cards/{card_id}", response_model=Card)
def get_card(card_id: str, repository: RepositoryDep) -> Card:
    """Get a single card by id."""
    try:
        return repository.read(card_id)
    except CardNotFoundError as e:
        raise _not_found(card_id) from e
    except OSError as e:
        raise _storage_error("read", e) from e


@router.put("/cards/{card_id}", response_model=Card)
def update_card(
    card_id: str, request: CardContentRequest, repository: RepositoryDep
) -> Card:
    """
    Replace the content of a card.

    The card keeps its id and creation time; the file may be renamed when
    the title changes.
    """
    try:
        return repository.update(card_id, request.content)
    except CardNotFoundError as e:
        raise _not_found(card_id) from e
    except OSError as e:
        raise _storage_error("update", e) from e


@router.delete("/cards/{card_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_card(card_id: str, repository: RepositoryDep) -> Response:
    """Delete a card permanently."""
    try:
        repository.delete(card_id)
    except CardNotFoundError as e:
        raise _not_found(card_id) from e
    except OSError as e:
        raise _storage_error("delete", e) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
