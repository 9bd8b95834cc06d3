"""Directory traversal with filtering, metadata and visit events.

This package provides the pieces of the traversal engine: the platform metadata
providers, the entry model, the filtered and sorted directory listing, and the
walker that turns a directory into an ordered stream of visit events.
"""
