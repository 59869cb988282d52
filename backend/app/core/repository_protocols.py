"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell; dependency arrows point inward only
    - Store operations accessed through Protocol types, injected per request

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
"""

from typing import Protocol

from app.core.domain_types import CategoryTag
from app.schemas.site import Site


class SiteRepository(Protocol):
    """Contract for Site persistence under one ancestor scope."""
    async def save(self, site: Site) -> Site: ...
    async def list_all(self) -> list[Site]: ...
    async def list_by_category(self, tag: CategoryTag) -> list[Site]: ...
