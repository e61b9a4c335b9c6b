"""SQLAlchemy engine factory and schema bootstrap."""

import logging
from pathlib import Path

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool

from texel.config import CONSTANTS, DatabaseSettings
from texel.models.db import Base, Project

logger = logging.getLogger(__name__)


def create_db_engine(settings: DatabaseSettings | None = None) -> Engine:
    """Create a SQLAlchemy engine from database settings.

    SQLite gets the adjustments it needs to serve a threaded web app:
    - ``check_same_thread`` disabled (route handlers run in a threadpool)
    - a single shared connection (StaticPool) for in-memory databases
    - foreign key enforcement switched on for every connection
    - the parent directory of a database file created if missing

    Args:
        settings: Database connection settings. If None, uses default settings.

    Returns:
        Configured SQLAlchemy Engine instance
    """
    if settings is None:
        settings = DatabaseSettings()

    url = make_url(settings.url)

    if url.get_backend_name() != "sqlite":
        engine = create_engine(
            url,
            pool_size=settings.pool_size,
            pool_pre_ping=True,
            echo=settings.echo,
        )
        logger.info(f"Created engine for {url.get_backend_name()} database")
        return engine

    in_memory = url.database in (None, "", ":memory:")
    if in_memory:
        engine = create_engine(
            url,
            poolclass=StaticPool,
            connect_args={"check_same_thread": False},
            echo=settings.echo,
        )
    else:
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)
        engine = create_engine(
            url,
            connect_args={"check_same_thread": False},
            pool_pre_ping=True,
            echo=settings.echo,
        )

    @event.listens_for(engine, "connect")
    def enable_foreign_keys(dbapi_connection, _connection_record):
        """Turn on foreign key checks, which SQLite leaves off by default."""
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    logger.info(f"Created SQLite engine ({'in-memory' if in_memory else url.database})")
    return engine


def init_schema(engine: Engine, *, reset: bool = False) -> None:
    """Create all tables and the seed project.

    Args:
        engine: Engine to create the schema on
        reset: Drop every table first, discarding stored documents
    """
    if reset:
        logger.warning("Dropping all tables before schema creation")
        Base.metadata.drop_all(engine)

    Base.metadata.create_all(engine)

    with Session(engine) as session:
        if session.get(Project, CONSTANTS.SEED_PROJECT_ID) is None:
            session.add(Project(id=CONSTANTS.SEED_PROJECT_ID))
            session.commit()

    logger.info("Schema is loaded successfully")
