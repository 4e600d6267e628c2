"""Shared types and data structures for HexNote."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, field_validator, model_validator


class CardMetadata(BaseModel, frozen=True, extra="forbid", strict=True):
    """The header block stored at the top of every card record."""

    id: str
    created_at: int
    updated_at: int

    @field_validator("id")
    @classmethod
    def _validate_id(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("id must not be empty")
        return value

    @field_validator("created_at", "updated_at")
    @classmethod
    def _validate_timestamp(cls, value: int) -> int:
        if value < 0:
            raise ValueError(f"timestamp must not be negative, got {value}")
        return value

    @model_validator(mode="after")
    def _validate_order(self):
        if self.updated_at < self.created_at:
            raise ValueError("updated_at must not be earlier than created_at")
        return self


class Card(CardMetadata):
    """A note: stable id, Markdown body and second-resolution timestamps."""

    content: str

    @property
    def metadata(self) -> CardMetadata:
        return CardMetadata(
            id=self.id, created_at=self.created_at, updated_at=self.updated_at
        )


@dataclass(frozen=True)
class ToolResult:
    """Text result of a tool call, as handed back to the calling agent."""

    text: str
    is_error: bool = False
