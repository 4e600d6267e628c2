"""Card persistence - one Markdown file per note, addressed by a stable id.

Cards are stored as human-readable Markdown with a small YAML front matter
block. Filenames follow the note title for easy browsing in a file manager;
the id in the front matter is what identifies a card.
"""

from hexnote.cards.codec import decode, decode_card, encode
from hexnote.cards.errors import (
    AllocationExhausted,
    CardError,
    CardNotFoundError,
    FormatError,
    PathResolutionError,
)
from hexnote.cards.naming import allocate
from hexnote.cards.repository import (
    CardRepository,
    get_card_repository,
    set_card_repository,
)
from hexnote.cards.titles import derive_title, sanitize_filename

__all__ = [
    "AllocationExhausted",
    "CardError",
    "CardNotFoundError",
    "CardRepository",
    "FormatError",
    "PathResolutionError",
    "allocate",
    "decode",
    "decode_card",
    "derive_title",
    "encode",
    "get_card_repository",
    "sanitize_filename",
    "set_card_repository",
]
