"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly by the app factory (no auto-discovery)
    - Sites responses are JSON on success, plain text on error

Design Decisions:
    - Thin routes delegate to services (ADR: impureim sandwich)
"""
