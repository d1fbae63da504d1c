"""
Database session management.

Provides SQLModel engine and session creation.
"""

from typing import Generator

from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from app.core.config import settings

DATABASE_URL: str = settings.DATABASE_URL


def build_engine(url: str, echo: bool = False):
    """Create an engine for *url*.

    SQLite (local runs, tests) gets a thread-shareable connection; every
    other backend uses a pooled engine.
    """
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(url, echo=echo, **kwargs)

    return create_engine(
        url,
        echo=echo,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=5,  # Connection pool size
        max_overflow=10,  # Max connections beyond pool_size
    )


engine = build_engine(DATABASE_URL, echo=settings.DEBUG)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get database session.

    Yields:
        SQLModel Session instance
    """
    with Session(engine) as session:
        yield session
