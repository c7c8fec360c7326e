"""
Subscriber API — Application Package Initializer
==================================================

What: Marks the `subscriber_api` directory as a Python package.
Why:  Enables module imports like `from subscriber_api.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The service follows a thin layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP verbs, status codes
    ├─────────────────────────────────────┤
    │     Services (Outcome Mapping)      │  ← existence check, merge, error taxonomy
    ├─────────────────────────────────────┤
    │   Repository (Persistence Service)  │  ← find / create / save / remove
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes never touch the session directly; services never build responses.
"""

__version__ = "1.0.0"
