"""create rental tables

Revision ID: 3f2a9c7d1e04
Revises:
Create Date: 2026-10-18 12:00:00.000000
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "3f2a9c7d1e04"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

ID = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


def _id() -> sa.Column:
    return sa.Column("id", ID, primary_key=True, autoincrement=True)


def _ref(name: str, target: str) -> sa.Column:
    # 모든 참조는 약한 참조: 대상 삭제 시 NULL
    return sa.Column(name, sa.BigInteger(), sa.ForeignKey(f"{target}.id", ondelete="SET NULL"), nullable=True)


def upgrade() -> None:
    """Upgrade schema: apartments, users and the tables that reference them."""
    op.create_table(
        "apartments",
        _id(),
        sa.Column("location", sa.Text(), nullable=False),
        sa.Column("price", sa.Float(), nullable=False),
        sa.Column("size", sa.Integer(), nullable=False),
        sa.Column("features", sa.Text(), nullable=True),
        sa.Column("photo_url", sa.String(2048), nullable=True),
        sa.Column("available", sa.Boolean(), nullable=True),
    )
    op.create_table(
        "users",
        _id(),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password", sa.String(255), nullable=False),
        sa.Column("role", sa.String(50), nullable=False),
    )
    op.create_table(
        "bookings",
        _id(),
        _ref("user_id", "users"),
        _ref("apartment_id", "apartments"),
        sa.Column("booking_date", sa.DateTime(), nullable=True),
        sa.Column("status", sa.String(50), nullable=True),
    )
    op.create_table(
        "payments",
        _id(),
        _ref("booking_id", "bookings"),
        sa.Column("amount", sa.Float(), nullable=True),
        sa.Column("payment_date", sa.DateTime(), nullable=True),
        sa.Column("status", sa.String(50), nullable=True),
    )
    op.create_table(
        "installment_plans",
        _id(),
        _ref("payment_id", "payments"),
        sa.Column("installments", sa.Integer(), nullable=False),
        sa.Column("monthly_amount", sa.Float(), nullable=False),
        sa.Column("schedule", sa.Text(), nullable=True),
    )
    op.create_table(
        "inventories",
        _id(),
        _ref("apartment_id", "apartments"),
        sa.Column("stock", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(50), nullable=True),
        sa.Column("photo_url", sa.String(2048), nullable=True),
    )
    op.create_table(
        "feedbacks",
        _id(),
        _ref("user_id", "users"),
        _ref("apartment_id", "apartments"),
        sa.Column("rating", sa.Integer(), nullable=True),
        sa.Column("comment", sa.Text(), nullable=True),
    )
    for table, column in (
        ("bookings", "user_id"),
        ("bookings", "apartment_id"),
        ("payments", "booking_id"),
        ("installment_plans", "payment_id"),
        ("feedbacks", "user_id"),
        ("feedbacks", "apartment_id"),
    ):
        op.create_index(f"ix_{table}_{column}", table, [column])
    op.create_index("ix_inventories_apartment_id", "inventories", ["apartment_id"], unique=True)


def downgrade() -> None:
    """Downgrade schema: drop in reverse dependency order."""
    for table in ("feedbacks", "inventories", "installment_plans", "payments", "bookings", "users", "apartments"):
        op.drop_table(table)
