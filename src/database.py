"""Database engine, connection pool and session management."""

import logging
from collections.abc import Generator
from typing import Any

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import URL, Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from src.config import Settings

logger = logging.getLogger(__name__)

Base: Any = declarative_base()


def build_database_url(settings: Settings) -> str | URL:
    """Return the configured database URL, assembling a MySQL one from DB_* values."""
    if settings.database_url:
        return settings.database_url
    return URL.create(
        "mysql+pymysql",
        username=settings.db_user,
        password=settings.db_pass,
        host=settings.db_host,
        port=settings.db_port,
        database=settings.db_name,
        query={"charset": "utf8mb4"},
    )


def create_db_engine(settings: Settings) -> Engine:
    """Create the engine backing the connection pool.

    At most ``db_pool_size`` physical connections are opened; further
    checkouts wait on the pool queue.
    """
    url = build_database_url(settings)
    if str(url).startswith("sqlite"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            pool_pre_ping=True,
        )
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_size=settings.db_pool_size,
        max_overflow=0,
        pool_timeout=settings.db_pool_timeout,
    )


def create_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Create a session factory bound to the engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def check_database_connection(engine: Engine) -> bool:
    """Probe the database once, logging the outcome.

    A failed probe is reported but never raised, so the process keeps serving.
    """
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Database connection check failed: {e}")
        return False
    logger.info("Database connection established")
    return True


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency that provides a database session from the application pool."""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def init_db(engine: Engine) -> None:
    """Initialize the database by creating all tables."""
    # Import all models here so they are registered with Base.metadata
    from src import models  # noqa: F401

    Base.metadata.create_all(bind=engine)
