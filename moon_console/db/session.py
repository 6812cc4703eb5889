from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, Engine, make_url
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool, StaticPool

# JDBC-style scheme -> SQLAlchemy driver name
_JDBC_DRIVERS = {
    "mysql": "mysql+pymysql",
    "mariadb": "mysql+pymysql",
}


@dataclass(frozen=True)
class DBRuntime:
    engine: Engine
    SessionLocal: sessionmaker


def build_database_url(raw_url: str, *, username: Optional[str] = None, password: Optional[str] = None) -> URL:
    """Turn the configured connection string into a SQLAlchemy URL.

    Accepts plain SQLAlchemy URLs as well as the `jdbc:<scheme>://...` form used
    by JDBC tooling (query parameters of a JDBC URL are driver specific and are
    dropped). Credentials are injected for server databases; SQLite ignores them.
    """
    raw = raw_url.strip()
    from_jdbc = raw.startswith("jdbc:")
    if from_jdbc:
        raw = raw[len("jdbc:"):]

    url = make_url(raw)
    if from_jdbc:
        url = url.set(drivername=_JDBC_DRIVERS.get(url.drivername, url.drivername), query={})

    if url.get_backend_name() != "sqlite":
        url = url.set(username=username or url.username, password=password or url.password)
    return url


def create_engine_and_sessionmaker(
    database_url: str | URL,
    *,
    echo: bool = False,
) -> DBRuntime:
    """Create SQLAlchemy engine + sessionmaker.

    Notes:
      - Server databases get a pool of exactly one connection: the console runs
        a single sequential session for the whole process.
      - Server connections run in AUTOCOMMIT, the store's default per-statement
        behaviour; Session.commit() is then a no-op boundary.
      - In-memory SQLite uses StaticPool so every checkout sees the same database.
    """
    url = make_url(database_url) if isinstance(database_url, str) else database_url
    is_sqlite = url.get_backend_name() == "sqlite"

    engine_kwargs: dict = dict(echo=echo, future=True)
    if is_sqlite:
        engine_kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs["poolclass"] = NullPool
    else:
        # Each statement commits on its own; reads never sit in a snapshot opened earlier.
        engine_kwargs.update(
            pool_size=1,
            max_overflow=0,
            pool_pre_ping=True,
            execution_options={"isolation_level": "AUTOCOMMIT"},
        )

    engine = create_engine(url, **engine_kwargs)

    if is_sqlite:
        @event.listens_for(engine, "connect")
        def _set_sqlite_pragma(dbapi_connection, connection_record):  # pragma: no cover
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    return DBRuntime(engine=engine, SessionLocal=SessionLocal)
