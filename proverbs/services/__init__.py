"""
Use cases for the proverbs API.

Routers (FastAPI endpoints) call these services instead of manipulating the
record list directly.
"""
