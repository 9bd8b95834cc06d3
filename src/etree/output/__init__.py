"""Consumers of the traversal event stream and the tabular export format."""
