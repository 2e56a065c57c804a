"""SQLAlchemy table definitions for the Q&A backend.

They match the schema defined in Alembic migrations. References between
entities are id arrays, never foreign keys.
"""

from sqlalchemy import Column, Index, Integer, MetaData, String, Table, Text
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# TAGS TABLE
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", Text, nullable=False),
)

Index("idx_tags_name", tags_table.c.name, unique=True)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("text", Text, nullable=False),
    Column("commented_by", String(255), nullable=False),
    Column("comment_date_time", TIMESTAMP(timezone=True), nullable=False),
)

# ============================================================================
# ANSWERS TABLE
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("question_id", UUID(as_uuid=True), nullable=False),
    Column("text", Text, nullable=False),
    Column("ans_by", String(255), nullable=False),
    Column("ans_date_time", TIMESTAMP(timezone=True), nullable=False),
    Column("up_votes", ARRAY(Text), nullable=False, server_default="{}"),
    Column("down_votes", ARRAY(Text), nullable=False, server_default="{}"),
    Column("comments", ARRAY(UUID(as_uuid=True)), nullable=False, server_default="{}"),
)

Index("idx_answers_question_id", answers_table.c.question_id)
Index("idx_answers_ans_date_time", answers_table.c.ans_date_time.desc())

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("title", Text, nullable=False),
    Column("text", Text, nullable=False),
    Column("tags", ARRAY(UUID(as_uuid=True)), nullable=False, server_default="{}"),
    Column("asked_by", String(255), nullable=False),
    Column("ask_date_time", TIMESTAMP(timezone=True), nullable=False),
    Column("views", Integer, nullable=False, server_default="0"),
    Column("answers", ARRAY(UUID(as_uuid=True)), nullable=False, server_default="{}"),
)

Index("idx_questions_ask_date_time", questions_table.c.ask_date_time.desc())

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("username", String(255), nullable=False),
    Column("email", String(255), nullable=False),
    Column("password_hash", String(255), nullable=False),
    Column("questions", ARRAY(UUID(as_uuid=True)), nullable=False, server_default="{}"),
    Column("answers", ARRAY(UUID(as_uuid=True)), nullable=False, server_default="{}"),
    Column("comments", ARRAY(UUID(as_uuid=True)), nullable=False, server_default="{}"),
)

Index("idx_users_username", users_table.c.username)
Index("idx_users_email", users_table.c.email)
