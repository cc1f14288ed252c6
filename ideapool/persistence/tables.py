"""SQLAlchemy table definitions for Idea Pool.

These tables are used with SQLAlchemy Core and mirror the schema
defined in the Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Column,
    Float,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(255), nullable=False),
    Column("name", String(255), nullable=False),
    Column("password", Text, nullable=False),  # Password hash
    Column("avatar_url", Text, nullable=True),
    Column("access_token", Text, nullable=True),
    Column("refresh_token", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_email", users_table.c.email, unique=True)

# ============================================================================
# IDEAS TABLE (partitioned by owner)
# ============================================================================
ideas_table = Table(
    "ideas",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("content", String(255), nullable=True),
    Column("impact", Float, nullable=True),
    Column("ease", Float, nullable=True),
    Column("confidence", Float, nullable=True),
    # Denormalized from the metrics so listings can sort and page on it
    Column("average_score", Float, nullable=False),
    Column("created_at", BigInteger, nullable=False),  # Epoch seconds
)

Index(
    "idx_ideas_user_id_average_score",
    ideas_table.c.user_id,
    ideas_table.c.average_score.desc(),
)
