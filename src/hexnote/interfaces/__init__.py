"""User-facing interfaces to the card store."""
