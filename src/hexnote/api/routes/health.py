"""Health check endpoints."""

import os
from typing import Any

from fastapi import APIRouter

from hexnote.api.deps import RepositoryDep

router = APIRouter()


@router.get("/health")
def health_check(repository: RepositoryDep) -> dict[str, Any]:
    """
    Check that the cards directory exists and is writable.

    Returns:
        dict with status, the cards directory and whether it is writable
    """
    try:
        directory = repository.ensure_directory()
        writable = os.access(directory, os.W_OK)
    except OSError:
        writable = False

    return {
        "status": "ok" if writable else "degraded",
        "cards_dir": str(repository.directory),
        "writable": writable,
    }


@router.get("/health/live")
async def liveness_check() -> dict[str, str]:
    """
    Liveness probe.

    Returns:
        Simple OK response if the service is running
    """
    return {"status": "ok"}
