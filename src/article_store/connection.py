"""SQLite engine and session handling for the article store."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from article_store.schema import ALL_TABLES

logger = logging.getLogger(__name__)

_engines: dict[str, Engine] = {}


def _enable_foreign_keys(dbapi_connection, _record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.close()


def get_engine(db_path: str | Path) -> Engine:
    """Return the (cached) engine for a SQLite database file."""
    key = str(Path(db_path).expanduser().resolve())
    engine = _engines.get(key)
    if engine is None:
        engine = create_engine(f"sqlite:///{key}")
        event.listen(engine, "connect", _enable_foreign_keys)
        _engines[key] = engine
    return engine


def dispose_engines() -> None:
    """Close every cached engine."""
    for engine in _engines.values():
        engine.dispose()
    _engines.clear()


@contextmanager
def get_session(db_path: str | Path) -> Iterator[Session]:
    """Session context manager with automatic commit/rollback.

    Stages commit after each unit of work; the final commit here only covers
    whatever is left pending.
    """
    session = sessionmaker(bind=get_engine(db_path))()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def ensure_schema(session: Session) -> None:
    """Create the article, chunk and similarity tables if they don't exist."""
    for statement in ALL_TABLES:
        session.execute(text(statement))
    session.commit()
    logger.debug("Article store schema ready")
