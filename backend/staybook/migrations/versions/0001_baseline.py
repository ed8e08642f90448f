"""baseline: accommodations and bookings

Revision ID: 0001_baseline
Revises:
Create Date: 2026-01-07 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_baseline'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "accommodations",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column("kind", sa.String(20), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("location", sa.String(255), nullable=False),
        sa.Column("room_count", sa.Integer(), nullable=True),
        sa.Column("star_rating", sa.Integer(), nullable=True),
        sa.Column("number_of_rooms", sa.Integer(), nullable=True),
        sa.Column("has_parking", sa.Boolean(), nullable=True),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_accommodations_kind", "accommodations", ["kind"])

    op.create_table(
        "bookings",
        sa.Column("id", sa.Uuid(), primary_key=True),
        sa.Column(
            "accommodation_id",
            sa.Uuid(),
            sa.ForeignKey("accommodations.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
        sa.Column("guest_name", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint("start_date < end_date", name="ck_bookings_date_order"),
    )
    # Serves both the overlap query and the "ends after" availability scan.
    op.create_index(
        "ix_bookings_accommodation_dates",
        "bookings",
        ["accommodation_id", "start_date", "end_date"],
    )


def downgrade() -> None:
    op.drop_index("ix_bookings_accommodation_dates", table_name="bookings")
    op.drop_table("bookings")
    op.drop_index("ix_accommodations_kind", table_name="accommodations")
    op.drop_table("accommodations")
