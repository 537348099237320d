"""Typed models of Cloud API resources (pydantic v2).

Entity models are *open*: unknown fields sent by the API are preserved.
Request models are *strict*: unknown keys are rejected before sending.
"""
