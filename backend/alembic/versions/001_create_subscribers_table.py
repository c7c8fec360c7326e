"""Create subscribers table

Revision ID: 001
Revises: None
Create Date: 2024-01-15 00:00:00.000000+00:00

What:  Creates the `subscribers` table.
How:   Portable column types only (text id, VARCHAR fields) so the same
       migration runs on PostgreSQL and SQLite.

Rollback: downgrade() drops the table entirely (destructive — all data lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the subscribers table. Column docs live in subscriber_api/models/subscriber.py."""
    op.create_table(
        "subscribers",
        sa.Column(
            "id",
            sa.String(36),
            nullable=False,
            comment="Opaque identifier assigned at creation; immutable",
        ),
        sa.Column(
            "name",
            sa.String(255),
            nullable=False,
            comment="Subscriber display name",
        ),
        sa.Column(
            "email",
            sa.String(320),
            nullable=True,
            comment="Contact address",
        ),
        sa.Column(
            "subscribed_to_channel",
            sa.String(255),
            nullable=True,
            comment="Channel the subscriber follows",
        ),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    """Drop the subscribers table. Destructive: all subscriber data is lost."""
    op.drop_table("subscribers")
