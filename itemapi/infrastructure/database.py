"""
SQLAlchemy engine and schema for the external item store.

The store itself is an external collaborator; this module only
describes the table this service reads and writes and builds an
engine from the configured URL.
"""

import logging

from sqlalchemy import (
    Column,
    DateTime,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    create_engine,
)
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

metadata = MetaData()

items_table = Table(
    "items",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(100), nullable=False),
    Column("description", Text, nullable=True),
    Column("category", String(50), nullable=True, index=True),
    Column("created_by", String(255), nullable=True),
    Column("updated_by", String(255), nullable=True),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)


def build_engine(database_url: str) -> Engine:
    """Build a SQLAlchemy engine for the configured store.

    An in-memory SQLite URL gets a single shared connection so that
    every request sees the same database.
    """
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(url, pool_pre_ping=True)


def create_schema(engine: Engine) -> None:
    """Create the items table if it does not exist."""
    metadata.create_all(engine)
    logger.info("Item schema ready on %s", engine.url.render_as_string(hide_password=True))
