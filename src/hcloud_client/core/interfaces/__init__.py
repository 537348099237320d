"""Contracts the adapters implement."""
