"""
Tests for the SQL item repository adapter.

Each test gets its own in-memory SQLite database.
"""

import pytest
from sqlalchemy import inspect

from itemapi.domain.items.entities import ItemDraft
from itemapi.infrastructure.database import build_engine, create_schema
from itemapi.infrastructure.items.item_repository import SqlItemRepository


@pytest.fixture
def engine():
    engine = build_engine("sqlite://")
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def repo(engine) -> SqlItemRepository:
    return SqlItemRepository(engine)


class TestSchema:
    def test_items_table_created(self, engine) -> None:
        assert "items" in inspect(engine).get_table_names()

    def test_create_schema_is_idempotent(self, engine) -> None:
        create_schema(engine)

    def test_file_database_uses_regular_pool(self, tmp_path) -> None:
        engine = build_engine(f"sqlite:///{tmp_path / 'items.db'}")
        try:
            assert engine.pool.__class__.__name__ != "StaticPool"
        finally:
            engine.dispose()


class TestSqlItemRepository:
    """Tests for SqlItemRepository against SQLite."""

    def test_create_assigns_id_and_timestamps(self, repo: SqlItemRepository) -> None:
        item = repo.create(ItemDraft(name="Widget", category="tools", actor_id="u-1"))
        assert item.id >= 1
        assert item.name == "Widget"
        assert item.created_by == "u-1"
        assert item.updated_by is None
        assert item.created_at == item.updated_at

    def test_ids_are_unique(self, repo: SqlItemRepository) -> None:
        first = repo.create(ItemDraft(name="A"))
        second = repo.create(ItemDraft(name="B"))
        assert first.id != second.id

    def test_get_by_id(self, repo: SqlItemRepository) -> None:
        created = repo.create(ItemDraft(name="Widget", description="Blue"))
        assert repo.get_by_id(created.id) == created
        assert repo.get_by_id(created.id + 100) is None

    def test_update_replaces_fields(self, repo: SqlItemRepository) -> None:
        created = repo.create(ItemDraft(name="Widget", category="tools"))
        updated = repo.update(created.id, ItemDraft(name="Gadget", actor_id="u-2"))
        assert updated.id == created.id
        assert updated.name == "Gadget"
        assert updated.category is None
        assert updated.updated_by == "u-2"
        assert updated.created_at == created.created_at
        assert updated.updated_at >= created.updated_at

    def test_update_missing_item(self, repo: SqlItemRepository) -> None:
        assert repo.update(42, ItemDraft(name="Ghost")) is None

    def test_delete(self, repo: SqlItemRepository) -> None:
        created = repo.create(ItemDraft(name="Widget"))
        assert repo.delete(created.id) is True
        assert repo.delete(created.id) is False
        assert repo.get_by_id(created.id) is None

    def test_list_page(self, repo: SqlItemRepository) -> None:
        for name in ("A", "B", "C", "D", "E"):
            repo.create(ItemDraft(name=name))
        page = repo.list_page(page=2, limit=2, filters={})
        assert page.total == 5
        assert [i.name for i in page.items] == ["C", "D"]

    def test_list_page_past_the_end(self, repo: SqlItemRepository) -> None:
        repo.create(ItemDraft(name="A"))
        page = repo.list_page(page=3, limit=10, filters={})
        assert page.items == []
        assert page.total == 1

    def test_list_page_filters(self, repo: SqlItemRepository) -> None:
        repo.create(ItemDraft(name="Hammer", category="tools"))
        repo.create(ItemDraft(name="Apple", category="food"))
        repo.create(ItemDraft(name="Saw", category="tools"))
        page = repo.list_page(page=1, limit=10, filters={"category": "tools", "name": "Saw"})
        assert page.total == 1
        assert page.items[0].name == "Saw"
