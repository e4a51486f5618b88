"""Database schema bootstrap helpers.

Production databases are managed by Alembic migrations. For SQLite-based
development we provide a best-effort helper to ensure tables exist at startup.
"""

from __future__ import annotations

from sqlalchemy import Engine

from velaapi.infrastructure.database.base import Base
from velaapi.infrastructure.database.engine import sync_engine


def ensure_sqlite_schema(engine: Engine | None = None) -> None:
    """Best-effort schema creation for SQLite.

    Notes:
    - Only runs for SQLite URLs.
    - For other databases, migrations (Alembic) should be used.
    """

    # Ensure ORM models are imported so they are registered on Base.metadata
    from velaapi.infrastructure.database import models as _models  # noqa: F401

    engine = engine or sync_engine
    if str(engine.url).startswith("sqlite"):
        Base.metadata.create_all(bind=engine)
