"""
Use case: Delete an item.

Input: DeleteItemCommand (raw item_id)
Output: Result[int] carrying the deleted ID
Side effects: Removes the stored item.
Failure cases: InvalidIdentifierError, ItemNotFoundError.
"""

import logging

from itemapi.application.items.dtos import DeleteItemCommand
from itemapi.application.result import Result
from itemapi.domain.errors import InvalidIdentifierError, ItemNotFoundError
from itemapi.domain.items.ports import ItemRepository
from itemapi.domain.items.rules import parse_item_id

logger = logging.getLogger(__name__)


class DeleteItemUseCase:
    """Orchestrates deleting one item."""

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def execute(self, command: DeleteItemCommand) -> Result[int]:
        item_id = parse_item_id(command.item_id)
        if item_id is None:
            return Result.fail(InvalidIdentifierError(command.item_id))

        if not self._item_repo.delete(item_id):
            return Result.fail(ItemNotFoundError(item_id))

        logger.info("Deleted item: id=%d", item_id)
        return Result.ok(item_id)
