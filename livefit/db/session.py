import logging
from collections.abc import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from livefit.core.config import get_settings

logger = logging.getLogger(__name__)


def build_engine(database_url: str) -> Engine:
    is_sqlite = database_url.startswith("sqlite")
    logger.debug(f"Database connection: {'SQLite' if is_sqlite else 'PostgreSQL'}")
    if is_sqlite:
        return create_engine(database_url, connect_args={"check_same_thread": False})
    return create_engine(database_url, pool_pre_ping=True)


engine = build_engine(get_settings().database_url)

SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


def get_db() -> Iterator[Session]:
    """Request-scoped session; routes receive it through ``Depends(get_db)``."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
