"""ORM Models — SQLAlchemy declarative models for the site list.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every Site is scoped by its ancestor key (parent_kind, parent_name)

Design Decisions:
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs (ADR: standard SQLAlchemy pattern)
"""

from app.models.site import Site, SiteCategory  # noqa: F401
