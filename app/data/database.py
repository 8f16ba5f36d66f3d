# app/data/database.py
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from app.utils.settings import DATABASE_URL
from app.utils.logging import get_logger

logger = get_logger(__name__)

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # sqlite domyslnie ignoruje FK, a wiec i ON DELETE CASCADE
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_db_engine(url: str | None) -> Engine:
    """
    Jeden pool polaczen na caly proces.
    Bez DATABASE_URL proces nie startuje.
    """
    if not url:
        raise RuntimeError("DATABASE_URL is required")

    parsed = make_url(url)

    if parsed.get_backend_name() != "sqlite":
        return create_engine(url, pool_pre_ping=True)

    kwargs = {"connect_args": {"check_same_thread": False}}
    if parsed.database in (None, "", ":memory:"):
        # baza in-memory zyje tylko w jednym polaczeniu
        kwargs["poolclass"] = StaticPool

    engine = create_engine(url, **kwargs)
    event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


engine = create_db_engine(DATABASE_URL)
logger.info(f"Database connected ({engine.url.get_backend_name()})")

SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db() -> None:
    # import wszystkich modeli, zeby trafily do Base.metadata
    import app.data.models  # noqa: F401

    logger.info(f"Models registered in Base.metadata: {list(Base.metadata.tables.keys())}")
    Base.metadata.create_all(bind=engine)
