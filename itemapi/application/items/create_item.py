"""
Use case: Create an item.

Input: CreateItemCommand (payload, actor_id)
Output: Result[Item]
Side effects: Persists a new item.
Failure cases: InputValidationError.
"""

import logging

from itemapi.application.items.dtos import CreateItemCommand
from itemapi.application.result import Result
from itemapi.domain.errors import InputValidationError
from itemapi.domain.items.entities import Item, ItemDraft
from itemapi.domain.items.ports import ItemRepository
from itemapi.domain.items.rules import ITEM_RULES
from itemapi.domain.validation import evaluate

logger = logging.getLogger(__name__)


class CreateItemUseCase:
    """Orchestrates item creation.

    Every rule is evaluated before the repository is touched, so an
    invalid payload reports all of its problems and writes nothing.
    """

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def execute(self, command: CreateItemCommand) -> Result[Item]:
        """Run the create item use case.

        Args:
            command: Decoded request body and acting user.

        Returns:
            The stored item, or a validation failure.
        """
        failures = evaluate(ITEM_RULES, command.payload)
        if failures:
            logger.info("Rejected item payload: %d rule(s) violated", len(failures))
            return Result.fail(InputValidationError(failures))

        item = self._item_repo.create(
            ItemDraft(
                name=command.payload["name"],
                description=command.payload.get("description"),
                category=command.payload.get("category"),
                actor_id=command.actor_id,
            )
        )
        logger.info("Created item: id=%d", item.id)
        return Result.ok(item)
