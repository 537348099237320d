"""Adapters: the httpx transport and the endpoint groups built on it."""
