"""
Use case: Retrieve a single item.

Input: GetItemQuery (raw item_id)
Output: Result[Item]
Side effects: None.
Failure cases: InvalidIdentifierError, ItemNotFoundError.
"""

import logging

from itemapi.application.items.dtos import GetItemQuery
from itemapi.application.result import Result
from itemapi.domain.errors import InvalidIdentifierError, ItemNotFoundError
from itemapi.domain.items.entities import Item
from itemapi.domain.items.ports import ItemRepository
from itemapi.domain.items.rules import parse_item_id

logger = logging.getLogger(__name__)


class GetItemUseCase:
    """Orchestrates fetching one item by ID."""

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def execute(self, query: GetItemQuery) -> Result[Item]:
        item_id = parse_item_id(query.item_id)
        if item_id is None:
            return Result.fail(InvalidIdentifierError(query.item_id))

        item = self._item_repo.get_by_id(item_id)
        if item is None:
            logger.info("Item not found: id=%d", item_id)
            return Result.fail(ItemNotFoundError(item_id))
        return Result.ok(item)
