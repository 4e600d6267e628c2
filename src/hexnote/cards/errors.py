"""Exceptions raised by the card persistence layer."""


class CardError(Exception):
    """Base class for card storage errors."""

    pass


class FormatError(CardError, ValueError):
    """Raised when a file is not a well-formed card record."""

    pass


class CardNotFoundError(CardError, LookupError):
    """Raised when no record in the cards directory carries the requested id."""

    def __init__(self, card_id: str):
        self.card_id = card_id
        super().__init__(f"Card with id {card_id} not found")


class AllocationExhausted(CardError, OSError):
    """Raised when no free filename could be claimed, not even a random one."""

    pass


class PathResolutionError(CardError):
    """Raised when the default cards directory cannot be determined."""

    pass
