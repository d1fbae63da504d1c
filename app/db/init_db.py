"""
Database initialization.

Creates all tables and, when configured, the TimescaleDB extension.
Production schemas are managed by Alembic; this is for local runs.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel, text

from app.core.config import settings
from app.db.session import engine

log = logging.getLogger(__name__)


def init_db(bind=None) -> None:
    """
    Initialize database schema.

    - Creates all SQLModel tables
    - Enables TimescaleDB extension (if configured)
    """
    bind = bind or engine

    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    log.info("Creating database tables...")
    SQLModel.metadata.create_all(bind)
    log.info("Tables created")

    if settings.TIMESCALEDB_ENABLED and bind.dialect.name == "postgresql":
        log.info("Enabling TimescaleDB extension...")
        try:
            with bind.connect() as conn:
                conn.execute(text("CREATE EXTENSION IF NOT EXISTS timescaledb CASCADE;"))
                conn.commit()
            log.info("TimescaleDB extension enabled")
        except SQLAlchemyError as e:
            log.warning("TimescaleDB setup failed, continuing without it: %s", e)

    log.info("Database initialization complete")


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    init_db()
