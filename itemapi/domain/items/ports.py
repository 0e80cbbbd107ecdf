"""
Port interfaces (ABCs) for the items bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Mapping, Optional

from itemapi.domain.items.entities import Item, ItemDraft, ItemPage


class ItemRepository(ABC):
    """Port for the external item store."""

    @abstractmethod
    def list_page(
        self, page: int, limit: int, filters: Mapping[str, str]
    ) -> ItemPage:
        """Return one page of items matching the filters.

        Args:
            page: 1-based page number.
            limit: Page size.
            filters: Exact-match filters keyed by field name.

        Returns:
            The requested page and the total number of matches.
        """
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, item_id: int) -> Optional[Item]:
        """Return an item by its ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def create(self, draft: ItemDraft) -> Item:
        """Persist a new item and return it with its assigned ID."""
        raise NotImplementedError

    @abstractmethod
    def update(self, item_id: int, draft: ItemDraft) -> Optional[Item]:
        """Replace an item's fields. Returns None if the item does not exist."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, item_id: int) -> bool:
        """Delete an item. Returns False if the item does not exist."""
        raise NotImplementedError
