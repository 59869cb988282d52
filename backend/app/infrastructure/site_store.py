"""Site Store — SQLAlchemy implementation of SiteRepository under one ancestor key.

Invariants:
    - Every read and write is scoped to the injected ParentKey
    - Listings are ordered by created ascending, ties by id (insertion order)
    - Listings never return None: no rows → []
    - save() on an existing record keeps the stored created timestamp
    - Store failures surface as StorageWriteError / StorageQueryError carrying
      the driver's message unchanged; no retries

Design Decisions:
    - Session injected per request (get_db), not derived from request state
    - Put semantics: a complete key with no stored row creates the row at that id
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select, Select
from sqlalchemy.exc import DBAPIError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import CategoryTag, ParentKey, SiteKey
from app.core.errors import ErrorContext, StorageQueryError, StorageWriteError
from app.core.site_keys import derive_key
from app.models.site import Site as SiteModel, SiteCategory
from app.schemas.site import Site

logger = logging.getLogger(__name__)


class SqlSiteStore:
    """Site persistence backed by an AsyncSession."""

    def __init__(self, db: AsyncSession, parent: ParentKey):
        self._db = db
        self._parent = parent

    async def save(self, site: Site) -> Site:
        """Create or overwrite ``site``; writes back the assigned id."""
        key = derive_key(site, self._parent)
        if key.id is not None and key.id < 0:
            raise StorageWriteError(
                "datastore: invalid key", ErrorContext(site_id=key.id),
            )
        try:
            row = await self._put(key, site)
            await self._db.commit()
        except SQLAlchemyError as e:
            await self._db.rollback()
            raise StorageWriteError(
                _describe(e), ErrorContext(site_id=key.id),
            ) from e
        site.id = row.id
        site.created = _as_utc(row.created)
        logger.info("Saved site", extra={"site_id": row.id})
        return site

    async def list_all(self) -> list[Site]:
        return await self._fetch(self._ancestor_query())

    async def list_by_category(self, tag: CategoryTag) -> list[Site]:
        """Sites whose category list contains ``tag`` exactly."""
        return await self._fetch(
            self._ancestor_query().where(
                SiteModel.categories.any(SiteCategory.tag == tag),
            ),
        )

    async def _put(self, key: SiteKey, site: Site) -> SiteModel:
        row = None
        if not key.incomplete:
            result = await self._db.execute(
                self._ancestor_query().where(SiteModel.id == key.id),
            )
            row = result.scalar_one_or_none()
        if row is None:
            row = SiteModel(
                parent_kind=self._parent.kind,
                parent_name=self._parent.name,
                created=_as_utc(site.created or datetime.now(timezone.utc)),
            )
            if not key.incomplete:
                row.id = key.id
            self._db.add(row)
        row.name = site.name
        row.url = site.url
        row.categories = [
            SiteCategory(position=i, tag=tag)
            for i, tag in enumerate(site.category_id)
        ]
        await self._db.flush()
        return row

    def _ancestor_query(self) -> Select:
        return (
            select(SiteModel)
            .where(
                SiteModel.parent_kind == self._parent.kind,
                SiteModel.parent_name == self._parent.name,
            )
            .order_by(SiteModel.created, SiteModel.id)
        )

    async def _fetch(self, stmt: Select) -> list[Site]:
        try:
            result = await self._db.execute(stmt)
            rows = result.scalars().all()
        except SQLAlchemyError as e:
            raise StorageQueryError(_describe(e)) from e
        return [_to_site(row) for row in rows]


def _to_site(row: SiteModel) -> Site:
    return Site(
        id=row.id,
        name=row.name,
        url=row.url,
        category_id=[c.tag for c in row.categories],
        created=_as_utc(row.created),
    )


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo; stored values are always UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _describe(e: SQLAlchemyError) -> str:
    if isinstance(e, DBAPIError) and e.orig is not None:
        return str(e.orig)
    return str(e)
