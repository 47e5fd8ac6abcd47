"""
Database session and base configuration.
"""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import NullPool, StaticPool

from yavin.core.config import settings


def build_engine(database_url: str) -> Engine:
    """Create the engine for the configured backend."""
    if database_url.startswith("sqlite"):
        # Local runs and tests: one shared connection so in-memory data survives
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    if settings.ENV == "production":
        # Production: no client-side pooling, rely on the external pooler
        return create_engine(
            database_url,
            poolclass=NullPool,
            pool_pre_ping=True,
            connect_args={
                "options": "-c statement_timeout=30000"  # 30s timeout
            }
        )
    # Development: Use small pool
    return create_engine(
        database_url,
        pool_size=10,
        max_overflow=0,
        pool_pre_ping=True,
        pool_recycle=3600
    )


engine = build_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """Get database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
