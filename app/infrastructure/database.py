"""Database configuration and session management."""

from __future__ import annotations

from functools import lru_cache

import logging

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from app.config import get_settings


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""


logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    """Return the process wide engine built from ``DATABASE_URL``."""

    database_url = get_settings().database_url
    connect_args: dict[str, object] = {}
    if database_url.startswith("sqlite"):
        # Sessions are opened from worker threads by the async directory.
        connect_args["check_same_thread"] = False
    return create_engine(database_url, pool_pre_ping=True, connect_args=connect_args)


@lru_cache(maxsize=1)
def get_session_factory() -> sessionmaker[Session]:
    return sessionmaker(autocommit=False, autoflush=False, bind=get_engine())


def initialize_database() -> None:
    """Ensure all ORM models have corresponding database tables."""

    from app.infrastructure import models  # noqa: F401  # ensure models are imported

    Base.metadata.create_all(bind=get_engine(), checkfirst=True)
    logger.info("Database schema verified")


def dispose_engine() -> None:
    """Release pooled connections and forget the cached engine."""

    if get_engine.cache_info().currsize:
        get_engine().dispose()
    get_session_factory.cache_clear()
    get_engine.cache_clear()
