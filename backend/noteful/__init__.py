"""
Noteful Backend: Application Package
=====================================

What: Marks the `noteful` directory as a Python package.
Who:  Imported by uvicorn (`noteful.main:app`), pytest, and every internal module.

Architecture Note:
    ┌─────────────────────────────────────┐
    │        Routes (API Layer)           │  <- HTTP concerns: status, headers, 404/400
    ├─────────────────────────────────────┤
    │     Services (Store Access)         │  <- one SQL statement per call
    ├─────────────────────────────────────┤
    │     Models & Schemas (Data)         │  <- SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │      Database (Persistence)         │  <- async engine, session per request
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
