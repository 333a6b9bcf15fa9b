"""initial_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19

Creates the events table and the single-row id_counter table.
"""
from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # --- events ---
    op.create_table(
        "events",
        sa.Column("id", sa.BigInteger, primary_key=True, autoincrement=False),
        sa.Column("owner", sa.String(255), nullable=False),
        sa.Column("event_title", sa.Text, nullable=False, server_default=""),
        sa.Column("event_description", sa.Text, nullable=False, server_default=""),
        sa.Column("event_card_imgurl", sa.Text, nullable=False, server_default=""),
        sa.Column("event_location", sa.Text, nullable=False, server_default=""),
        sa.Column("attendees", sa.JSON, nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
    )

    # --- id_counter ---
    counter = op.create_table(
        "id_counter",
        sa.Column("counter_id", sa.Integer, primary_key=True),
        sa.Column("next_value", sa.BigInteger, nullable=False, server_default="0"),
    )
    op.bulk_insert(counter, [{"counter_id": 1, "next_value": 0}])


def downgrade() -> None:
    op.drop_table("id_counter")
    op.drop_table("events")
