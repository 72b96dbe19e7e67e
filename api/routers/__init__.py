"""
FastAPI routers grouped by domain (auth, profiles, comments).

Each file inside this package exposes an APIRouter that is included in the main
application (app.py). Shared request helpers live in ``deps``.
"""
