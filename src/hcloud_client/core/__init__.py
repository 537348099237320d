"""Core: configuration, errors, validation, domain models and services."""
