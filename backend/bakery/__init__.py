"""
Bev's Bakery Backend - Application Package
===========================================

What:  The web backend for Bev's Bakery: marketing pages, the order-request
       API and the admin orders dashboard.
Who:   Imported by uvicorn (`bakery.main:app`), Alembic and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │     Routes (API + HTML pages)       │  <- HTTP concerns only
    ├─────────────────────────────────────┤
    │     Services (orders, catalog)      │  <- Business rules, totals
    ├─────────────────────────────────────┤
    │     Order storage (db | memory)     │  <- create / list / get
    ├─────────────────────────────────────┤
    │     Models & Schemas (Data)         │  <- SQLAlchemy ORM + Pydantic
    └─────────────────────────────────────┘

    Routes never touch the ORM directly; they receive an OrderStorage
    through FastAPI dependency injection, so the database and in-memory
    variants are interchangeable.
"""

__version__ = "1.0.0"
