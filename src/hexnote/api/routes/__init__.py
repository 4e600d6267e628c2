"""API route modules."""

from hexnote.api.routes import cards, health

__all__ = ["cards", "health"]
