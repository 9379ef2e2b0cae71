"""
Table definitions.

The schema is declared with SQLAlchemy Core. Records in
models/records.py are plain dataclasses, and the repositories
translate between the two explicitly.
"""

from datetime import datetime

from sqlalchemy import (
    Column, Table, Integer, String, Date, DateTime,
    Numeric, ForeignKey,
)

from finance_tracker.models.base import metadata


users = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("name", String(100), nullable=False),
    Column("email", String(255), unique=True, nullable=False),
    Column("created_at", DateTime, nullable=False, default=datetime.utcnow),
)


# kind and status hold the names from models/enums.py lookup tables
entries = Table(
    "entries",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("description", String(255), nullable=False),
    Column("month", Integer, nullable=False),
    Column("year", Integer, nullable=False),
    Column(
        "user_id", Integer, ForeignKey("users.id"),
        nullable=False, index=True,
    ),
    Column("amount", Numeric(16, 2), nullable=False),
    Column("registered_on", Date, nullable=False),
    Column("kind", String(20), nullable=False),
    Column("status", String(20), nullable=False),
)
