"""REST API for HexNote cards."""
