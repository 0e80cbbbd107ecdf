"""
Pydantic schemas for the items API responses.

Every success response is a SuccessEnvelope: ``success``, ``data``,
``message`` and, for lists, ``pagination``. Wire names are camelCase.
Request bodies are validated by the domain rule evaluator, not here.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from itemapi.application.items.dtos import Pagination
from itemapi.domain.items.entities import Item


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ItemSchema(_CamelModel):
    """A single item in a response."""

    id: int
    name: str
    description: Optional[str] = None
    category: Optional[str] = None
    created_by: Optional[str] = None
    updated_by: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, item: Item) -> "ItemSchema":
        return cls(
            id=item.id,
            name=item.name,
            description=item.description,
            category=item.category,
            created_by=item.created_by,
            updated_by=item.updated_by,
            created_at=item.created_at,
            updated_at=item.updated_at,
        )


class PaginationSchema(_CamelModel):
    """Pagination metadata of a list response."""

    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def from_dto(cls, pagination: Pagination) -> "PaginationSchema":
        return cls(
            page=pagination.page,
            limit=pagination.limit,
            total=pagination.total,
            total_pages=pagination.total_pages,
            has_next=pagination.has_next,
            has_prev=pagination.has_prev,
        )


class ItemEnvelope(_CamelModel):
    """Success envelope carrying one item."""

    success: bool = True
    data: ItemSchema
    message: str


class ItemListEnvelope(_CamelModel):
    """Success envelope carrying one page of items."""

    success: bool = True
    data: list[ItemSchema]
    message: str
    pagination: PaginationSchema


class DeletedEnvelope(_CamelModel):
    """Success envelope for a deletion; ``data`` is always null."""

    success: bool = True
    data: None = None
    message: str
