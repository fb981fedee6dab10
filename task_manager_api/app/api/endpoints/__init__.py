"""
Endpoint modules.

Each module defines an ``APIRouter`` for one domain (tasks, projects,
comments, tags, users).  Routers declare their full paths; they are
aggregated in ``api/router.py``.
"""
