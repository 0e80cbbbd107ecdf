"""
Adapter: Item persistence.

Implements ItemRepository port on top of a SQLAlchemy engine.
Every call runs in its own transaction.
"""

import logging
from datetime import datetime, timezone
from typing import Mapping, Optional

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.engine import Engine, Row

from itemapi.domain.items.entities import Item, ItemDraft, ItemPage
from itemapi.domain.items.ports import ItemRepository
from itemapi.infrastructure.database import items_table

logger = logging.getLogger(__name__)


def _row_to_item(row: Row) -> Item:
    """Map a DB row to an Item entity."""
    return Item(
        id=row.id,
        name=row.name,
        description=row.description,
        category=row.category,
        created_by=row.created_by,
        updated_by=row.updated_by,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class SqlItemRepository(ItemRepository):
    """SQL adapter for the items table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def list_page(
        self, page: int, limit: int, filters: Mapping[str, str]
    ) -> ItemPage:
        """Return one page of items ordered by ID."""
        conditions = [items_table.c[key] == value for key, value in filters.items()]

        count_query = select(func.count()).select_from(items_table).where(*conditions)
        page_query = (
            select(items_table)
            .where(*conditions)
            .order_by(items_table.c.id)
            .limit(limit)
            .offset((page - 1) * limit)
        )
        with self._engine.connect() as conn:
            total = conn.execute(count_query).scalar_one()
            rows = conn.execute(page_query).fetchall()

        return ItemPage(items=[_row_to_item(r) for r in rows], total=total)

    def get_by_id(self, item_id: int) -> Optional[Item]:
        query = select(items_table).where(items_table.c.id == item_id)
        with self._engine.connect() as conn:
            row = conn.execute(query).fetchone()
        return _row_to_item(row) if row else None

    def create(self, draft: ItemDraft) -> Item:
        """Insert a new item and return the stored row."""
        now = datetime.now(timezone.utc)
        query = (
            insert(items_table)
            .values(
                name=draft.name,
                description=draft.description,
                category=draft.category,
                created_by=draft.actor_id,
                updated_by=None,
                created_at=now,
                updated_at=now,
            )
            .returning(*items_table.c)
        )
        with self._engine.begin() as conn:
            row = conn.execute(query).fetchone()
        logger.debug("Inserted item: id=%s", row.id)
        return _row_to_item(row)

    def update(self, item_id: int, draft: ItemDraft) -> Optional[Item]:
        """Replace the mutable fields of an item."""
        query = (
            update(items_table)
            .where(items_table.c.id == item_id)
            .values(
                name=draft.name,
                description=draft.description,
                category=draft.category,
                updated_by=draft.actor_id,
                updated_at=datetime.now(timezone.utc),
            )
            .returning(*items_table.c)
        )
        with self._engine.begin() as conn:
            row = conn.execute(query).fetchone()
        return _row_to_item(row) if row else None

    def delete(self, item_id: int) -> bool:
        query = delete(items_table).where(items_table.c.id == item_id)
        with self._engine.begin() as conn:
            result = conn.execute(query)
        return result.rowcount > 0
