"""Shared helpers: character tables, span utilities, errors and logging."""
