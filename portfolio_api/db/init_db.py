"""Schema application run at startup."""

from __future__ import annotations

import logging

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import SQLModel

import portfolio_api.models  # noqa: F401  (registers table metadata)

logger = logging.getLogger(__name__)


def create_db_and_tables(engine: Engine) -> None:
    """Create all tables from SQLModel metadata."""

    SQLModel.metadata.create_all(engine)


def run_migrations(engine: Engine) -> bool:
    """Apply the schema, logging and swallowing any storage failure.

    Startup continues against a possibly unmigrated schema when this fails.
    Returns whether the schema was applied.
    """

    try:
        create_db_and_tables(engine)
    except SQLAlchemyError:
        logger.exception("Migration error; continuing to serve with the existing schema")
        return False
    logger.info("Database schema is up to date")
    return True
