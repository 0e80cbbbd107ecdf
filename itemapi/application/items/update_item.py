"""
Use case: Replace an item's fields.

Input: UpdateItemCommand (raw item_id, payload, actor_id)
Output: Result[Item]
Side effects: Updates the stored item.
Failure cases: InvalidIdentifierError, InputValidationError, ItemNotFoundError.
"""

import logging

from itemapi.application.items.dtos import UpdateItemCommand
from itemapi.application.result import Result
from itemapi.domain.errors import (
    InputValidationError,
    InvalidIdentifierError,
    ItemNotFoundError,
)
from itemapi.domain.items.entities import Item, ItemDraft
from itemapi.domain.items.ports import ItemRepository
from itemapi.domain.items.rules import ITEM_RULES, parse_item_id
from itemapi.domain.validation import evaluate

logger = logging.getLogger(__name__)


class UpdateItemUseCase:
    """Orchestrates a full update of one item."""

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def execute(self, command: UpdateItemCommand) -> Result[Item]:
        """Run the update item use case.

        The ID is checked first, then the payload, then existence.
        """
        item_id = parse_item_id(command.item_id)
        if item_id is None:
            return Result.fail(InvalidIdentifierError(command.item_id))

        failures = evaluate(ITEM_RULES, command.payload)
        if failures:
            return Result.fail(InputValidationError(failures))

        item = self._item_repo.update(
            item_id,
            ItemDraft(
                name=command.payload["name"],
                description=command.payload.get("description"),
                category=command.payload.get("category"),
                actor_id=command.actor_id,
            ),
        )
        if item is None:
            return Result.fail(ItemNotFoundError(item_id))

        logger.info("Updated item: id=%d", item_id)
        return Result.ok(item)
