"""Create submissions, rsvp and settings tables.

Revision ID: 3f1c2a9d8b7e
Revises:
Create Date: 2026-10-01 12:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
import sqlalchemy_utils
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c2a9d8b7e"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "submissions",
        sa.Column("id", sqlalchemy_utils.types.uuid.UUIDType(binary=False), primary_key=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.current_timestamp(),
            nullable=False,
        ),
        sa.Column("guest_name", sa.String(255), nullable=True),
        sa.Column("message", sa.String(500), nullable=False),
        sa.Column("photo_url", sa.Text(), nullable=False),
        sa.Column("table_number", sa.Integer(), nullable=True),
        sa.CheckConstraint("char_length(message) > 0", name="submissions_message_not_empty"),
        sa.CheckConstraint(
            "table_number IS NULL OR table_number >= 1", name="submissions_table_positive"
        ),
    )
    op.create_index("ix_submissions_created_at", "submissions", ["created_at"])
    op.create_index("ix_submissions_table_number", "submissions", ["table_number"])

    op.create_table(
        "rsvp",
        sa.Column("id", sqlalchemy_utils.types.uuid.UUIDType(binary=False), primary_key=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.current_timestamp(),
            nullable=False,
        ),
        sa.Column("guest_name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column(
            "attendance",
            sa.Enum("attending", "not_attending", "maybe", name="attendance_enum"),
            nullable=False,
        ),
        sa.Column("guest_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("dietary_restrictions", sa.Text(), nullable=True),
        sa.Column("message", sa.Text(), nullable=True),
        sa.CheckConstraint(
            "(attendance = 'attending' AND guest_count >= 1)"
            " OR (attendance <> 'attending' AND guest_count = 0)",
            name="rsvp_guest_count_matches_attendance",
        ),
    )
    op.create_index("ix_rsvp_created_at", "rsvp", ["created_at"])
    op.create_index("ix_rsvp_guest_name", "rsvp", ["guest_name"])

    op.create_table(
        "settings",
        sa.Column("key", sa.String(100), primary_key=True),
        sa.Column("value", sa.JSON(), nullable=False),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.current_timestamp(),
            nullable=False,
        ),
    )


def downgrade() -> None:
    op.drop_table("settings")
    op.drop_index("ix_rsvp_guest_name", table_name="rsvp")
    op.drop_index("ix_rsvp_created_at", table_name="rsvp")
    op.drop_table("rsvp")
    sa.Enum(name="attendance_enum").drop(op.get_bind(), checkfirst=True)
    op.drop_index("ix_submissions_table_number", table_name="submissions")
    op.drop_index("ix_submissions_created_at", table_name="submissions")
    op.drop_table("submissions")
