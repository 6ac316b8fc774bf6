"""
SQLAlchemy engine and session setup for the sql receipt store.
"""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

Base = declarative_base()

_IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def create_db_engine(url: str, echo: bool = False) -> Engine:
    # SQLite needs check_same_thread=False for use across threads
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args = {"check_same_thread": False}

    kwargs = {}
    if url in _IN_MEMORY_URLS:
        # StaticPool ensures all connections share the same in-memory database
        kwargs["poolclass"] = StaticPool

    return create_engine(url, connect_args=connect_args, echo=echo, **kwargs)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)
