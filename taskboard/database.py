import logging
import os
import sqlite3

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, declarative_base, Session

from taskboard.config import settings

logger = logging.getLogger(__name__)

# Default to a local SQLite database if no DATABASE_URL is provided or usable
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.abspath(os.path.join(BASE_DIR, ".."))
DEFAULT_DB_PATH = os.path.join(PROJECT_ROOT, "taskboard.db")


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


@event.listens_for(Engine, "connect")
def _set_sqlite_pragmas(dbapi_connection, _connection_record) -> None:
    """Enforce foreign keys and case-sensitive LIKE on every SQLite connection.

    The built-in ``lower()`` only folds ASCII, so it is replaced with
    ``str.lower`` to keep case-insensitive search consistent for "Äpfel".
    """
    if not isinstance(dbapi_connection, sqlite3.Connection):
        return
    dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    # Deprecated since SQLite 3.44 and absent from SQLITE_OMIT_DEPRECATED builds;
    # case-sensitive API search on SQLite depends on it.
    cursor.execute("PRAGMA case_sensitive_like = ON")
    cursor.close()


def _build_engine():
    """Create the SQLAlchemy engine, preferring the configured DATABASE_URL."""
    database_url = settings.DATABASE_URL or None

    if database_url:
        try:
            engine = create_engine(database_url)
            # Ensure the target database is reachable; otherwise fall back to SQLite
            with engine.connect():
                pass
            return engine
        except ModuleNotFoundError as exc:
            logger.warning("Database driver for %s is not installed (%s), using SQLite", database_url, exc)
        except Exception as exc:
            logger.warning("Database %s is unreachable (%s), using SQLite", database_url, exc)

    sqlite_url = f"sqlite:///{DEFAULT_DB_PATH}"
    return create_engine(sqlite_url, connect_args={"check_same_thread": False})


engine = _build_engine()

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for the models
Base = declarative_base()


def get_db():
    """Yield one session per request; the session is the unit of work."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def seed_boards(db: Session, names) -> int:
    """Create any of ``names`` that does not exist yet. Returns how many were added."""
    from taskboard.models import Board

    existing = {name for (name,) in db.query(Board.name).all()}
    added = 0
    for name in names:
        if name in existing:
            continue
        db.add(Board(name=name))
        existing.add(name)
        added += 1
    if added:
        db.commit()
        logger.info("Seeded %d board(s)", added)
    return added


def init_db(bind=None) -> None:
    """Create tables and seed the default boards."""
    import taskboard.models  # noqa: F401  register mappers on Base.metadata

    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    db = Session(bind=bind)
    try:
        seed_boards(db, settings.default_boards_list)
    finally:
        db.close()
