"""initial schema

Revision ID: 20261019_01
Revises: 
Create Date: 2026-10-19 09:00:00

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "20261019_01"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "beers",
        sa.Column("beer_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("desc", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("beer_id"),
        sqlite_autoincrement=True,
    )

    op.create_table(
        "batches",
        sa.Column("batch_id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("beer_id", sa.BigInteger(), nullable=False),
        sa.Column("user", sa.Text(), nullable=False),
        sa.Column("date", sa.BigInteger(), nullable=False),
        sa.Column("count03", sa.Integer(), nullable=False),
        sa.Column("count05", sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint("batch_id"),
        sqlite_autoincrement=True,
    )
    op.create_index(op.f("ix_batches_user"), "batches", ["user"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_batches_user"), table_name="batches")
    op.drop_table("batches")
    op.drop_table("beers")
