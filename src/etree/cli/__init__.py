"""Command-line interface for etree."""
