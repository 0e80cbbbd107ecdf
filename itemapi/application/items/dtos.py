"""
Data Transfer Objects for the items application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from itemapi.domain.items.entities import Item


@dataclass(frozen=True)
class ListItemsQuery:
    """Input DTO for listing items.

    Attributes:
        page: Raw page number as received (validated by the use case).
        limit: Raw page size as received.
        filters: Remaining query parameters.
    """

    page: Any = None
    limit: Any = None
    filters: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Pagination:
    """Pagination metadata for a list response."""

    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


@dataclass(frozen=True)
class ItemListResult:
    """Output DTO for a list query."""

    items: list[Item]
    pagination: Pagination


@dataclass(frozen=True)
class GetItemQuery:
    """Input DTO for fetching one item by raw path ID."""

    item_id: Any


@dataclass(frozen=True)
class CreateItemCommand:
    """Input DTO for creating an item.

    Attributes:
        payload: Decoded request body.
        actor_id: Authenticated user, if any.
    """

    payload: Mapping[str, Any]
    actor_id: Optional[str] = None


@dataclass(frozen=True)
class UpdateItemCommand:
    """Input DTO for replacing an item's fields."""

    item_id: Any
    payload: Mapping[str, Any]
    actor_id: Optional[str] = None


@dataclass(frozen=True)
class DeleteItemCommand:
    """Input DTO for deleting an item."""

    item_id: Any
