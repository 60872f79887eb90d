"""SQLAlchemy Core schema shared by the PostgreSQL, MySQL and SQLite backends."""

from sqlalchemy import Boolean, Column, DateTime, MetaData, String, Table, Text, true

metadata = MetaData()

users = Table(
    "users",
    metadata,
    Column("id", String(36), primary_key=True),
    Column("username", String(50), nullable=False, unique=True, index=True),
    Column("email", String(255), nullable=False, unique=True, index=True),
    Column("password_hash", Text, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
    Column("is_active", Boolean, nullable=False, server_default=true()),
)
