"""HexNote core - configuration, paths and shared types."""

from hexnote.core.types import Card, CardMetadata, ToolResult

__all__ = [
    "Card",
    "CardMetadata",
    "ToolResult",
]
