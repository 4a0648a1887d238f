"""
Database initialization helpers.

Models are imported here so their tables get registered on Base.metadata
before create_all() runs.
"""

import logging

from sqlalchemy.engine import Engine

from app.models.base import Base
from app.models import user  # noqa: F401

logger = logging.getLogger(__name__)


def init_db(engine: Engine) -> None:
    """
    Create all tables based on SQLAlchemy models.

    Safe to call on every startup: existing tables (and their rows) are
    left untouched.
    """
    Base.metadata.create_all(bind=engine, checkfirst=True)
    logger.info(f"Database schema ready: {', '.join(Base.metadata.tables)}")
