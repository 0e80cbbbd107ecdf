"""
Domain entities for the items bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Item:
    """A stored item.

    Attributes:
        id: Positive integer identifier assigned by the store.
        name: Display name.
        description: Optional free-form text.
        category: Optional grouping label.
        created_by: Identifier of the user that created the item.
        updated_by: Identifier of the user that last updated the item.
        created_at: Creation time (UTC).
        updated_at: Last modification time (UTC).
    """

    id: int
    name: str
    description: Optional[str]
    category: Optional[str]
    created_by: Optional[str]
    updated_by: Optional[str]
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class ItemDraft:
    """Values supplied for a create or a full update.

    Attributes:
        name: Display name.
        description: Optional free-form text.
        category: Optional grouping label.
        actor_id: Authenticated user performing the write, if any.
    """

    name: str
    description: Optional[str] = None
    category: Optional[str] = None
    actor_id: Optional[str] = None


@dataclass(frozen=True)
class ItemPage:
    """One page of items plus the total number of matches."""

    items: list[Item]
    total: int
