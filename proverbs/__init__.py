"""Proverbs API: CRUD over a JSON-file backed collection of proverbs."""

__version__ = "1.0.0"
