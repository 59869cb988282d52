"""Site ORM — persists Site records under their ancestor scope.

Invariants:
    - (parent_kind, parent_name) is the ancestor key; every query filters on it
    - created is written on first save and never updated afterwards
    - url is not indexed; category tags are (site_categories.tag)
    - Tag order is preserved through site_categories.position

Design Decisions:
    - Tags in a child table rather than a JSON column: "contains tag" becomes an
      indexed EXISTS query on every backend, SQLite included
    - BigInteger ids (SQLite variant Integer so the rowid alias autoincrements)
    - cascade delete for categories: a site owns its tag rows
"""

from datetime import datetime, timezone

from sqlalchemy import BigInteger, Integer, String, Text, DateTime, ForeignKey, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base

SiteIdType = BigInteger().with_variant(Integer(), "sqlite")


class Site(Base):
    """One record of the site list."""
    __tablename__ = "sites"
    __table_args__ = (
        Index("ix_sites_parent_created", "parent_kind", "parent_name", "created"),
    )

    id: Mapped[int] = mapped_column(
        SiteIdType, primary_key=True, autoincrement=True,
    )
    parent_kind: Mapped[str] = mapped_column(String(100), nullable=False)
    parent_name: Mapped[str] = mapped_column(String(500), nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False, default="")
    url: Mapped[str] = mapped_column(Text, nullable=False, default="")
    created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    categories: Mapped[list["SiteCategory"]] = relationship(
        "SiteCategory", back_populates="site",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="SiteCategory.position",
    )


class SiteCategory(Base):
    """One category tag of a Site, at its position in the tag list."""
    __tablename__ = "site_categories"

    id: Mapped[int] = mapped_column(
        SiteIdType, primary_key=True, autoincrement=True,
    )
    site_id: Mapped[int] = mapped_column(
        SiteIdType, ForeignKey("sites.id", ondelete="CASCADE"), nullable=False,
    )
    position: Mapped[int] = mapped_column(Integer, nullable=False)
    tag: Mapped[str] = mapped_column(String(500), nullable=False, index=True)

    site: Mapped["Site"] = relationship("Site", back_populates="categories")
