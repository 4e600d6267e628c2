"""HexNote - sticky-note cards stored as plain Markdown files."""

__version__ = "0.1.0"
