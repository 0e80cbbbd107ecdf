"""
Use case: List items with pagination and exact-match filters.

Input: ListItemsQuery (raw page, raw limit, filters)
Output: Result[ItemListResult]
Side effects: None (read-only query).
Failure cases: InputValidationError for bad page/limit.
"""

import logging
import math

from itemapi.application.items.dtos import ItemListResult, ListItemsQuery, Pagination
from itemapi.application.result import Result
from itemapi.domain.errors import InputValidationError
from itemapi.domain.items.ports import ItemRepository
from itemapi.domain.items.rules import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    FILTERABLE_FIELDS,
    PAGINATION_RULES,
)
from itemapi.domain.validation import evaluate

logger = logging.getLogger(__name__)


class ListItemsUseCase:
    """Orchestrates listing items page by page.

    Unknown filter keys are dropped before reaching the repository.
    """

    def __init__(self, item_repo: ItemRepository) -> None:
        self._item_repo = item_repo

    def execute(self, query: ListItemsQuery) -> Result[ItemListResult]:
        """Run the list items use case.

        Args:
            query: Raw pagination values and filters.

        Returns:
            The requested page with pagination metadata, or a
            validation failure.
        """
        failures = evaluate(
            PAGINATION_RULES, {"page": query.page, "limit": query.limit}
        )
        if failures:
            return Result.fail(InputValidationError(failures))

        page = DEFAULT_PAGE if query.page is None else int(query.page)
        limit = DEFAULT_LIMIT if query.limit is None else int(query.limit)
        filters = {
            key: value
            for key, value in query.filters.items()
            if key in FILTERABLE_FIELDS
        }

        logger.info("Listing items: page=%d, limit=%d, filters=%s", page, limit, filters)
        result = self._item_repo.list_page(page=page, limit=limit, filters=filters)

        total_pages = math.ceil(result.total / limit) if result.total else 0
        return Result.ok(
            ItemListResult(
                items=result.items,
                pagination=Pagination(
                    page=page,
                    limit=limit,
                    total=result.total,
                    total_pages=total_pages,
                    has_next=page < total_pages,
                    has_prev=page > 1,
                ),
            )
        )
