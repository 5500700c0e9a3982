"""
Portfolio Backend — Application Package Initializer
====================================================

What: Marks the `portfolio` directory as a Python package.
Who:  Used by uvicorn (`portfolio.main:app`), pytest, and `python -m portfolio`.

Architecture Note:
    The backend follows a layered layout:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← One store call, error translation
    ├─────────────────────────────────────┤
    │        Schemas (API Contracts)      │  ← Pydantic request/response models
    ├─────────────────────────────────────┤
    │       Database (Persistence)        │  ← Async MongoDB client context
    └─────────────────────────────────────┘

    Routes delegate to services; services can be tested with an in-memory
    collection double and no HTTP at all.
"""

__version__ = "1.0.0"
