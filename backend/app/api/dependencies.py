"""Route Dependencies — per-request wiring of the record store.

Invariants:
    - One SqlSiteStore per request, bound to that request's DB session
    - Ancestor scope taken from settings

Design Decisions:
    - Store built by a dependency, so tests swap it via dependency_overrides
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings, get_settings
from app.infrastructure.database import get_db
from app.infrastructure.site_store import SqlSiteStore


def get_site_store(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> SqlSiteStore:
    return SqlSiteStore(db, settings.site_list_key())
