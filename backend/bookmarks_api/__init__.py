"""
Bookmarks API - Application Package Initializer
===============================================

What: Marks the `bookmarks_api` directory as a Python package.
Who:  Used by uvicorn (`uvicorn bookmarks_api.main:app`) and by pytest.

Architecture Note:
    The backend is layered:

    ┌─────────────────────────────────────┐
    │        Middleware (Auth, Logs)      │  ← Bearer token, request id, access log
    ├─────────────────────────────────────┤
    │           Routes (API Layer)        │  ← Status codes, headers, orchestration
    ├─────────────────────────────────────┤
    │  Services (Validator, Sanitizer,    │  ← Field rules, markup cleaning,
    │            Storage Gateway)         │    single-statement table access
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
