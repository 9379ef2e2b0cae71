"""
Database engine, session management, and table metadata.

This module is the foundation for all database operations.
Every table is registered on `metadata`. Every request gets
a session from get_db().
"""

from sqlalchemy import MetaData, create_engine
from sqlalchemy.orm import sessionmaker

from finance_tracker.config import get_settings

settings = get_settings()

# --- Engine ---
# pool_pre_ping=True tests connections before using them,
# which handles a restarted database or a stale connection.
# SQLite connections are shared with FastAPI's threadpool,
# so the same-thread check is turned off for that driver.
connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    connect_args["check_same_thread"] = False

engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    connect_args=connect_args,
)

# --- Session Factory ---
# autocommit=False means the caller decides when changes are
# saved, so a save or update is all-or-nothing.
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)

# --- Table Metadata ---
# Every table in models/tables.py is attached to this object.
# Alembic and the test fixtures create the schema from it.
metadata = MetaData()


# --- Dependency for FastAPI ---
def get_db():
    """
    Provide a database session for a single request.

    The try/finally guarantees the session is closed when the
    request finishes, even if an error occurs, so connections
    are returned to the pool.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
