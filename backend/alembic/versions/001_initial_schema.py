"""Initial schema — sites and site_categories.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

_ID = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def upgrade() -> None:
    op.create_table(
        "sites",
        sa.Column("id", _ID, primary_key=True, autoincrement=True),
        sa.Column("parent_kind", sa.String(100), nullable=False),
        sa.Column("parent_name", sa.String(500), nullable=False),
        sa.Column("name", sa.Text, nullable=False, server_default=""),
        sa.Column("url", sa.Text, nullable=False, server_default=""),
        sa.Column("created", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index(
        "ix_sites_parent_created", "sites",
        ["parent_kind", "parent_name", "created"],
    )

    op.create_table(
        "site_categories",
        sa.Column("id", _ID, primary_key=True, autoincrement=True),
        sa.Column(
            "site_id", _ID,
            sa.ForeignKey("sites.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("position", sa.Integer, nullable=False),
        sa.Column("tag", sa.String(500), nullable=False),
    )
    op.create_index("ix_site_categories_tag", "site_categories", ["tag"])


def downgrade() -> None:
    op.drop_index("ix_site_categories_tag", table_name="site_categories")
    op.drop_table("site_categories")
    op.drop_index("ix_sites_parent_created", table_name="sites")
    op.drop_table("sites")
