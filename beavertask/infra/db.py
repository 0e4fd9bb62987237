from __future__ import annotations

from sqlalchemy import create_engine, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

SessionLocal = sessionmaker(autoflush=False, autocommit=False)
Base = declarative_base()


def configure_engine(database_url: str) -> Engine:
    options: dict = {"pool_pre_ping": True}
    if database_url.startswith("sqlite"):
        options["connect_args"] = {"check_same_thread": False}
        if ":memory:" in database_url or database_url in ("sqlite://", "sqlite:///"):
            options["poolclass"] = StaticPool
    engine = create_engine(database_url, **options)
    SessionLocal.configure(bind=engine)
    return engine


def init_db(engine: Engine) -> list[str]:
    """Check the database answers and return the mapped tables it lacks."""
    with engine.connect() as connection:
        connection.execute(text("SELECT 1"))
    inspector = inspect(engine)
    return [name for name in Base.metadata.tables if not inspector.has_table(name)]
