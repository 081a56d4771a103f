"""Database engine, session dependency and transaction helpers."""

from __future__ import annotations

from collections.abc import Generator, Iterator
from contextlib import contextmanager

from fastapi import Request
from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine


def build_engine(database_url: str, *, echo: bool = False) -> Engine:
    """Create the SQLAlchemy engine for ``database_url``."""

    connect_args = {"check_same_thread": False} if database_url.startswith("sqlite") else {}
    return create_engine(
        database_url,
        connect_args=connect_args,
        echo=echo,
        pool_pre_ping=not database_url.startswith("sqlite"),
    )


def get_session(request: Request) -> Generator[Session, None, None]:
    """Yield a database session bound to the application's engine."""

    with Session(request.app.state.engine) as session:
        yield session


@contextmanager
def transaction(session: Session) -> Iterator[Session]:
    """Commit the work done inside the block, or roll it back on error."""

    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
