"""Create lecture_summary table

Revision ID: 002
Revises: 001
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

revision: str = "002"
down_revision: str | None = "001"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "lecture_summary",
        sa.Column("id", sa.String(length=32), nullable=False),
        sa.Column("title", sa.String(length=256), nullable=False),
        sa.Column("subject", sa.String(length=128), nullable=False),
        sa.Column("teacher_id", sa.Integer(), sa.ForeignKey("user.id"), nullable=False),
        sa.Column("audio_url", sa.String(length=512), nullable=False),
        sa.Column("audio_filename", sa.String(length=512), nullable=False),
        sa.Column("transcription", sa.Text(), nullable=True),
        sa.Column("summary_overview", sa.Text(), nullable=True),
        sa.Column("summary_key_points", sa.JSON(), nullable=True),
        sa.Column("summary_detailed_explanation", sa.Text(), nullable=True),
        sa.Column("status", sa.String(length=32), nullable=False, server_default="pending"),
        sa.Column("published_at", sa.DateTime(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("audio_filename"),
    )
    op.create_index(op.f("ix_lecture_summary_teacher_id"), "lecture_summary", ["teacher_id"])
    op.create_index(op.f("ix_lecture_summary_status"), "lecture_summary", ["status"])


def downgrade() -> None:
    op.drop_index(op.f("ix_lecture_summary_status"), table_name="lecture_summary")
    op.drop_index(op.f("ix_lecture_summary_teacher_id"), table_name="lecture_summary")
    op.drop_table("lecture_summary")
