# app/database.py
"""
Database connection, session management, and table creation.
Uses SQLAlchemy with PostgreSQL by default; any SQLAlchemy URL works.
SQLite connections get foreign key enforcement switched on, otherwise
the RESTRICT rule on movements.vehicle_id would be ignored.
"""

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool
from app.config import settings


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool   # one shared in-memory DB
        return kwargs
    return {
        "pool_pre_ping": True,          # Auto-reconnect if DB connection drops
        "pool_size": 10,
        "max_overflow": 20,
    }


def build_engine(url: str, echo: bool = False) -> Engine:
    return create_engine(url, echo=echo, **_engine_kwargs(url))


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = build_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """FastAPI dependency — yields a DB session and closes it after request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables(bind: Engine = None):
    """
    Creates all DB tables on startup. Safe to call multiple times.
    Import all models here so SQLAlchemy knows about them.
    """
    from app.models.vehicle import Vehicle                 # noqa
    from app.models.movement import Movement               # noqa

    Base.metadata.create_all(bind=bind or engine)


def dispose_engine():
    """Release every pooled connection. Called from the shutdown hook."""
    engine.dispose()
