"""
FastAPI routers grouped by resource.

Each module exposes an APIRouter that the app factory includes.
"""
