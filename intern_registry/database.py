# FILE: intern_registry/database.py
# Scop:
#   - Creează engine SQLAlchemy + session factory dintr-un URL de DB.
#   - Asigură că directorul unui DB SQLite pe disc există.
#
# Debug:
#   - "sqlite://" (fără cale) e DB în memorie; are nevoie de StaticPool ca toate
#     sesiunile să vadă aceeași conexiune (testele se bazează pe asta).

from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

Base = declarative_base()


def make_engine(database_url: str) -> Engine:
    url = make_url(database_url)

    if url.get_backend_name() != "sqlite":
        return create_engine(database_url, pool_pre_ping=True)

    if not url.database or url.database == ":memory:":
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(
        database_url,
        connect_args={"check_same_thread": False},
        pool_pre_ping=True,
    )


def make_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
