"""Workflows built on top of the endpoint groups."""
