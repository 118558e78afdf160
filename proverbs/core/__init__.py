"""
Core utilities shared across the proverbs API.

This package hosts configuration helpers (env vars, data file path) and
cross-cutting concerns such as logging. Routers and services depend on these
primitives instead of reading os.environ directly.
"""
