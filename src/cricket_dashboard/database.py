"""Database connection and session management."""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Optional

from sqlalchemy import Engine, create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker

from .config import settings

logger = logging.getLogger(__name__)

# Global engine instance
_engine: Optional[Engine] = None
_SessionLocal: Optional[sessionmaker] = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _build_engine(url: str, echo: bool = False) -> Engine:
    parsed = make_url(url)
    connect_args = {}
    if parsed.get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
        if parsed.database and parsed.database != ":memory:":
            Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(
        url,
        pool_pre_ping=True,
        pool_recycle=3600,
        echo=echo,
        connect_args=connect_args,
    )
    if parsed.get_backend_name() == "sqlite":
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def init_engine(url: Optional[str] = None, echo: Optional[bool] = None) -> Engine:
    """Bind the global engine and session factory to ``url``.

    Any previously created engine is disposed. Without arguments the engine is
    built from the configured database settings.
    """
    global _engine, _SessionLocal
    if _engine is not None:
        _engine.dispose()
    target = url or settings.database.url
    _engine = _build_engine(target, settings.database.echo if echo is None else echo)
    _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=_engine)
    logger.debug(f"Database engine bound to {_engine.url.render_as_string(hide_password=True)}")
    return _engine


def get_database_engine() -> Engine:
    """Get or create the database engine."""
    if _engine is None:
        init_engine()
    return _engine


def get_session_local() -> sessionmaker:
    """Get or create the session factory."""
    if _SessionLocal is None:
        init_engine()
    return _SessionLocal


@contextmanager
def get_session() -> Generator[Session, None, None]:
    """Get a database session with automatic cleanup."""
    session_local = get_session_local()
    session = session_local()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def backend_name() -> str:
    """Return the dialect name of the bound engine (``sqlite``, ``mysql``...)."""
    return get_database_engine().dialect.name


def create_tables() -> None:
    """Create all database tables."""
    from .models import Base
    Base.metadata.create_all(bind=get_database_engine())


def drop_tables() -> None:
    """Drop all database tables."""
    from .models import Base
    Base.metadata.drop_all(bind=get_database_engine())
