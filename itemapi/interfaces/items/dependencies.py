"""
Dependency injection for the items bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
The engine is created once by the application factory and kept on
``app.state``.
"""

from typing import Optional

from fastapi import Depends, Request

from itemapi.application.items.create_item import CreateItemUseCase
from itemapi.application.items.delete_item import DeleteItemUseCase
from itemapi.application.items.get_item import GetItemUseCase
from itemapi.application.items.list_items import ListItemsUseCase
from itemapi.application.items.update_item import UpdateItemUseCase
from itemapi.domain.items.ports import ItemRepository
from itemapi.infrastructure.items.item_repository import SqlItemRepository


def get_item_repository(request: Request) -> ItemRepository:
    """Build the item repository on the application's engine."""
    return SqlItemRepository(engine=request.app.state.engine)


def get_current_user_id(request: Request) -> Optional[str]:
    """Return the user ID an upstream auth layer put on the request, if any."""
    user_id = getattr(request.state, "user_id", None)
    return str(user_id) if user_id is not None else None


def get_list_items_use_case(
    repo: ItemRepository = Depends(get_item_repository),
) -> ListItemsUseCase:
    """Build ListItemsUseCase with its infrastructure dependencies."""
    return ListItemsUseCase(item_repo=repo)


def get_get_item_use_case(
    repo: ItemRepository = Depends(get_item_repository),
) -> GetItemUseCase:
    """Build GetItemUseCase with its infrastructure dependencies."""
    return GetItemUseCase(item_repo=repo)


def get_create_item_use_case(
    repo: ItemRepository = Depends(get_item_repository),
) -> CreateItemUseCase:
    """Build CreateItemUseCase with its infrastructure dependencies."""
    return CreateItemUseCase(item_repo=repo)


def get_update_item_use_case(
    repo: ItemRepository = Depends(get_item_repository),
) -> UpdateItemUseCase:
    """Build UpdateItemUseCase with its infrastructure dependencies."""
    return UpdateItemUseCase(item_repo=repo)


def get_delete_item_use_case(
    repo: ItemRepository = Depends(get_item_repository),
) -> DeleteItemUseCase:
    """Build DeleteItemUseCase with its infrastructure dependencies."""
    return DeleteItemUseCase(item_repo=repo)
