"""
Persistence adapters.

These modules encapsulate how proverbs are stored/retrieved (today a JSON
snapshot file). Services hold the in-memory collection and call the adapter
only at startup and shutdown.
"""
