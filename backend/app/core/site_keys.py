"""Site Keys — derive the store key for a Site about to be saved.

Invariants:
    - id == 0 → incomplete key, created stamped with now (first save only)
    - id != 0 → complete key, created untouched
    - Pure: no IO, clock injectable for tests
"""

from datetime import datetime, timezone

from app.core.domain_types import ParentKey, SiteId, SiteKey
from app.schemas.site import Site


def derive_key(
    site: Site, parent: ParentKey, now: datetime | None = None,
) -> SiteKey:
    """Key for ``site`` under ``parent``; stamps ``site.created`` when new."""
    if site.id == 0:
        site.created = now or datetime.now(timezone.utc)
        return SiteKey(parent=parent)
    return SiteKey(parent=parent, id=SiteId(site.id))
