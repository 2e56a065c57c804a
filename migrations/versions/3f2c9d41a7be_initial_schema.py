"""initial_schema

Create the Q&A schema:
- Tags (unique names)
- Comments
- Answers (vote sets and comment IDs as arrays)
- Questions (tag and answer IDs as arrays)
- Users (authored content IDs as arrays)

Revision ID: 3f2c9d41a7be
Revises:
Create Date: 2026-10-19 09:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f2c9d41a7be"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _uuid_array(name: str) -> sa.Column:
    return sa.Column(
        name,
        postgresql.ARRAY(sa.UUID()),
        nullable=False,
        server_default=sa.text("'{}'"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # TAGS table
    # ========================================================================
    op.create_table(
        "tags",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("name", sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_tags_name", "tags", ["name"], unique=True)

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("commented_by", sa.String(255), nullable=False),
        sa.Column("comment_date_time", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # ANSWERS table
    # ========================================================================
    op.create_table(
        "answers",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("question_id", sa.UUID(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("ans_by", sa.String(255), nullable=False),
        sa.Column("ans_date_time", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column(
            "up_votes",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        sa.Column(
            "down_votes",
            postgresql.ARRAY(sa.Text()),
            nullable=False,
            server_default=sa.text("'{}'"),
        ),
        _uuid_array("comments"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_answers_question_id", "answers", ["question_id"])
    op.create_index(
        "idx_answers_ans_date_time", "answers", [sa.text("ans_date_time DESC")]
    )

    # ========================================================================
    # QUESTIONS table
    # ========================================================================
    op.create_table(
        "questions",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        _uuid_array("tags"),
        sa.Column("asked_by", sa.String(255), nullable=False),
        sa.Column("ask_date_time", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        _uuid_array("answers"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("views >= 0", name="views_non_negative"),
    )
    op.create_index(
        "idx_questions_ask_date_time", "questions", [sa.text("ask_date_time DESC")]
    )

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("username", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("password_hash", sa.String(255), nullable=False),
        _uuid_array("questions"),
        _uuid_array("answers"),
        _uuid_array("comments"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_users_username", "users", ["username"])
    op.create_index("idx_users_email", "users", ["email"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("users")
    op.drop_table("questions")
    op.drop_table("answers")
    op.drop_table("comments")
    op.drop_table("tags")
