"""Command-line interface for HexNote."""
