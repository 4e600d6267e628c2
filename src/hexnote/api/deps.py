"""FastAPI dependencies for the HexNote API."""

from typing import Annotated

from fastapi import Depends

from hexnote.cards.repository import CardRepository, get_card_repository


async def get_repository() -> CardRepository:
    """
    Get the card repository for request processing.

    Returns:
        CardRepository instance
    """
    return get_card_repository()


RepositoryDep = Annotated[CardRepository, Depends(get_repository)]
