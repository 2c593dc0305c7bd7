import sqlite3
from pathlib import Path
from sqlalchemy import create_engine, event
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from jobboard.config import settings


class Base(DeclarativeBase):
    pass


def _set_sqlite_pragmas(dbapi_conn, connection_record):
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(db_path: Path | None = None):
    path = db_path or settings.db_path
    engine = create_engine(
        f"sqlite:///{path}",
        connect_args={"check_same_thread": False},
    )
    event.listen(engine, "connect", _set_sqlite_pragmas)
    return engine


# Process-wide store handle: created on first use, shared by every request,
# never disposed while the process lives.
_engine = None
_session_factory = None


def get_engine():
    global _engine
    if _engine is None:
        try:
            init_db()
        except (OSError, sqlite3.Error) as exc:
            raise OperationalError("init_db", None, exc) from exc
        _engine = create_db_engine()
    return _engine


class StoreSession(Session):
    """Resolves the engine on first statement, so an unreachable store fails inside the caller."""

    def get_bind(self, mapper=None, **kw):
        return get_engine()


def get_session_factory() -> sessionmaker:
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(class_=StoreSession, autoflush=False, autocommit=False)
    return _session_factory


def get_db():
    db = get_session_factory()()
    try:
        yield db
    finally:
        db.close()


SCHEMA_SQL = """\
-- ============================================================
-- JOB POSTINGS
-- ============================================================
CREATE TABLE IF NOT EXISTS jobs (
    id               TEXT PRIMARY KEY,
    title            TEXT NOT NULL,
    location         TEXT NOT NULL,
    type             TEXT NOT NULL
                     CHECK(type IN ('Full-time','Part-time','Contract')),
    salary           TEXT NOT NULL,
    category         TEXT NOT NULL,
    requirements     TEXT NOT NULL,
    deadline         TEXT NOT NULL,
    vacancy          INTEGER NOT NULL DEFAULT 1 CHECK(vacancy >= 1),
    preferred_gender TEXT NOT NULL DEFAULT 'Any'
                     CHECK(preferred_gender IN ('Male','Female','Any')),
    created_at       TEXT NOT NULL DEFAULT (strftime('%Y-%m-%dT%H:%M:%SZ','now'))
);

CREATE INDEX IF NOT EXISTS idx_jobs_created ON jobs(created_at);
CREATE INDEX IF NOT EXISTS idx_jobs_deadline ON jobs(deadline);
CREATE INDEX IF NOT EXISTS idx_jobs_category ON jobs(category);
"""


def init_db(db_path: Path | None = None):
    path = db_path or settings.db_path
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path))
    conn.executescript(SCHEMA_SQL)
    conn.close()
