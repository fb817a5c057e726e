"""
FastAPI routers grouped by domain (likes, catalog).

Each module exposes an APIRouter included by app.py.
"""
