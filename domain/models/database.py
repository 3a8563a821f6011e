"""
Database configuration and session management for the command queue.
"""

import logging
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from app.config import settings

logger = logging.getLogger("patterns.database")

# Create SQLAlchemy Base
Base = declarative_base()


def make_engine(url: str) -> Engine:
    """Create an engine; SQLite connections may be shared with worker threads"""
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(
        url, echo=settings.database_echo, future=True, connect_args=connect_args
    )


# Create engine
engine = make_engine(settings.queue_database_url)

# Create session factory
SessionLocal = sessionmaker(bind=engine, future=True)


def init_database(bind: Engine = None):
    """Create the queue tables if they do not exist yet"""
    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    logger.info("Database tables ensured on %s", bind.url)


def get_db_session():
    """Get database session (for FastAPI dependency injection)"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
