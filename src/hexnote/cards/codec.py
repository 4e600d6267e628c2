"""Reading and writing the on-disk card record.

A record is a YAML front matter block holding exactly ``id``, ``created_at``
and ``updated_at``, followed by the Markdown body::

    ---
    id: 0b6f2c1e-...
    created_at: 1718000000
    updated_at: 1718000420
    ---
    # Shopping list
    ...

Everything after the closing ``---`` line is the body, byte for byte.
"""

import yaml
from pydantic import ValidationError

from hexnote.cards.errors import FormatError
from hexnote.core.types import Card, CardMetadata

HEADER_MARKER = "---"
_BOM = "\ufeff"


def _is_marker(line: str) -> bool:
    return line.rstrip("\r") == HEADER_MARKER


def split_record(text: str) -> tuple[str, str]:
    """
    Split a record into its raw header text and body.

    Args:
        text: Full file content

    Returns:
        (header, body) - YAML text between the markers and the verbatim body

    Raises:
        FormatError: If the opening or closing marker is missing
    """
    if text.startswith(_BOM):
        text = text[len(_BOM) :]

    first_end = text.find("\n")
    if first_end == -1 or not _is_marker(text[:first_end]):
        raise FormatError("Record does not start with a '---' front matter marker")

    header_start = first_end + 1
    start = header_start
    while True:
        newline = text.find("\n", start)
        line = text[start:] if newline == -1 else text[start:newline]
        if _is_marker(line):
            body = "" if newline == -1 else text[newline + 1 :]
            return text[header_start:start], body
        if newline == -1:
            raise FormatError("Could not find closing '---' for front matter")
        start = newline + 1


def decode(text: str) -> tuple[CardMetadata, str]:
    """
    Decode a record into its metadata and body.

    Raises:
        FormatError: If the markers are missing or the header is not exactly
            the three metadata fields
    """
    header, body = split_record(text)

    try:
        data = yaml.safe_load(header)
    except yaml.YAMLError as e:
        raise FormatError(f"Invalid YAML in front matter: {e}") from e

    if not isinstance(data, dict):
        raise FormatError("Front matter must be a mapping")

    try:
        metadata = CardMetadata.model_validate(data)
    except ValidationError as e:
        raise FormatError(f"Invalid card metadata: {e}") from e

    return metadata, body


def decode_card(text: str) -> Card:
    """Decode a record straight into a Card."""
    metadata, body = decode(text)
    return Card(
        id=metadata.id,
        content=body,
        created_at=metadata.created_at,
        updated_at=metadata.updated_at,
    )


def encode(card: Card) -> str:
    """Encode a card as front matter followed by its body."""
    header = yaml.safe_dump(
        card.metadata.model_dump(),
        sort_keys=False,
        allow_unicode=True,
        width=float("inf"),
    )
    return f"{HEADER_MARKER}\n{header}{HEADER_MARKER}\n{card.content}"
