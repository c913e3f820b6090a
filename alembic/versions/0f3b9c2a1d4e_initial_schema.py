"""initial schema

Revision ID: 0f3b9c2a1d4e
Revises:
Create Date: 2026-10-19 10:12:41.118204

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "0f3b9c2a1d4e"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

DEFAULT_CATEGORIES = [
    "Plastic",
    "Paper & Cardboard",
    "Glass",
    "Metal",
    "Batteries & WEEE",
    "Textiles",
]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("username", sa.String(length=100), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("password_hash", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=20), server_default="user", nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    )
    op.create_index(op.f("ix_users_id"), "users", ["id"], unique=False)
    op.create_index(op.f("ix_users_username"), "users", ["username"], unique=True)
    op.create_index(op.f("ix_users_email"), "users", ["email"], unique=True)

    categories = op.create_table(
        "categories",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=100), nullable=False),
    )
    op.create_index(op.f("ix_categories_id"), "categories", ["id"], unique=False)

    op.create_table(
        "recycle_points",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=False),
        sa.Column("latitude", sa.Float(), nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=True),
        sa.Column("status", sa.String(length=20), server_default="pending", nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    )
    op.create_index(op.f("ix_recycle_points_id"), "recycle_points", ["id"], unique=False)
    op.create_index(op.f("ix_recycle_points_user_id"), "recycle_points", ["user_id"], unique=False)
    op.create_index(op.f("ix_recycle_points_status"), "recycle_points", ["status"], unique=False)

    op.create_table(
        "point_categories",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("point_id", sa.Integer(), sa.ForeignKey("recycle_points.id"), nullable=False),
        sa.Column("category_id", sa.Integer(), sa.ForeignKey("categories.id"), nullable=False),
    )
    op.create_index(op.f("ix_point_categories_id"), "point_categories", ["id"], unique=False)
    op.create_index(
        op.f("ix_point_categories_point_id"), "point_categories", ["point_id"], unique=False
    )
    op.create_index(
        op.f("ix_point_categories_category_id"), "point_categories", ["category_id"], unique=False
    )

    op.create_table(
        "recycling_events",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=True),
        sa.Column("point_id", sa.Integer(), sa.ForeignKey("recycle_points.id"), nullable=False),
        sa.Column("category_id", sa.Integer(), sa.ForeignKey("categories.id"), nullable=False),
        sa.Column("quantity", sa.Integer(), server_default="1", nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.CheckConstraint("quantity > 0", name="ck_recycling_events_quantity"),
    )
    op.create_index(op.f("ix_recycling_events_id"), "recycling_events", ["id"], unique=False)
    op.create_index(
        op.f("ix_recycling_events_user_id"), "recycling_events", ["user_id"], unique=False
    )
    op.create_index(
        op.f("ix_recycling_events_point_id"), "recycling_events", ["point_id"], unique=False
    )
    op.create_index(
        op.f("ix_recycling_events_category_id"), "recycling_events", ["category_id"], unique=False
    )

    op.bulk_insert(categories, [{"name": name} for name in DEFAULT_CATEGORIES])


def downgrade() -> None:
    op.drop_table("recycling_events")
    op.drop_table("point_categories")
    op.drop_table("recycle_points")
    op.drop_table("categories")
    op.drop_table("users")
