"""
FastAPI routers grouped by resource.

Each module exposes an APIRouter that is included in the application built by
proverbs.app.create_app.
"""
