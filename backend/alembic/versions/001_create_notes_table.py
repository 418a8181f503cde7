"""Create notes table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `notes` table backing the QuirkNotes API.
Rollback: downgrade() drops the table entirely (all notes lost).
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
    """Create the notes table and its created_at index."""
    op.create_table(
        "notes",

        # Generated by the application (uuid4); see models/note.py
        sa.Column(
            "id",
            sa.Uuid(as_uuid=True),
            nullable=False,
            comment="Unique identifier",
        ),

        sa.Column(
            "title",
            sa.Text(),
            nullable=False,
            comment="Note title",
        ),

        sa.Column(
            "content",
            sa.Text(),
            nullable=False,
            comment="Note body",
        ),

        # NULL when the client never chose a color
        sa.Column(
            "color",
            sa.String(32),
            nullable=True,
            comment="Optional CSS hex color, e.g. #FF0000",
        ),

        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this note was created (UTC)",
        ),

        sa.PrimaryKeyConstraint("id"),
    )

    # Listing returns notes in insertion order
    op.create_index(
        "idx_notes_created_at",
        "notes",
        ["created_at"],
    )


def downgrade() -> None:
    op.drop_index("idx_notes_created_at", table_name="notes")
    op.drop_table("notes")
