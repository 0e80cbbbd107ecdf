"""
FastAPI router for the items bounded context.

All routes delegate to use cases. No business logic here.
Input validation is done by the use cases' rule sets.
Failed results are unwrapped into the centralized error handlers.
"""

from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Request

from itemapi.application.items.create_item import CreateItemUseCase
from itemapi.application.items.delete_item import DeleteItemUseCase
from itemapi.application.items.dtos import (
    CreateItemCommand,
    DeleteItemCommand,
    GetItemQuery,
    ListItemsQuery,
    UpdateItemCommand,
)
from itemapi.application.items.get_item import GetItemUseCase
from itemapi.application.items.list_items import ListItemsUseCase
from itemapi.application.items.update_item import UpdateItemUseCase
from itemapi.interfaces.items.dependencies import (
    get_create_item_use_case,
    get_current_user_id,
    get_delete_item_use_case,
    get_get_item_use_case,
    get_list_items_use_case,
    get_update_item_use_case,
)
from itemapi.interfaces.items.schemas import (
    DeletedEnvelope,
    ItemEnvelope,
    ItemListEnvelope,
    ItemSchema,
    PaginationSchema,
)
from itemapi.shared.errors.schemas import ErrorEnvelope

PAGINATION_PARAMS = ("page", "limit")

router = APIRouter(prefix="/items", tags=["items"])


@router.get(
    "",
    response_model=ItemListEnvelope,
    responses={400: {"model": ErrorEnvelope}},
    summary="List items",
    description="Return one page of items, optionally filtered by name or category.",
)
def list_items(
    request: Request,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    use_case: ListItemsUseCase = Depends(get_list_items_use_case),
) -> ItemListEnvelope:
    """List items with pagination and filters."""
    filters = {
        key: value
        for key, value in request.query_params.items()
        if key not in PAGINATION_PARAMS
    }
    result = use_case.execute(
        ListItemsQuery(page=page, limit=limit, filters=filters)
    ).unwrap()
    return ItemListEnvelope(
        data=[ItemSchema.from_entity(item) for item in result.items],
        pagination=PaginationSchema.from_dto(result.pagination),
        message="Items retrieved successfully",
    )


@router.get(
    "/{item_id}",
    response_model=ItemEnvelope,
    responses={400: {"model": ErrorEnvelope}, 404: {"model": ErrorEnvelope}},
    summary="Get an item",
)
def get_item(
    item_id: str,
    use_case: GetItemUseCase = Depends(get_get_item_use_case),
) -> ItemEnvelope:
    """Return a single item by ID."""
    item = use_case.execute(GetItemQuery(item_id=item_id)).unwrap()
    return ItemEnvelope(
        data=ItemSchema.from_entity(item), message="Item retrieved successfully"
    )


@router.post(
    "",
    response_model=ItemEnvelope,
    status_code=201,
    responses={400: {"model": ErrorEnvelope}},
    summary="Create an item",
)
def create_item(
    payload: Optional[dict[str, Any]] = Body(default=None),
    user_id: Optional[str] = Depends(get_current_user_id),
    use_case: CreateItemUseCase = Depends(get_create_item_use_case),
) -> ItemEnvelope:
    """Create an item from the JSON body."""
    command = CreateItemCommand(payload=payload or {}, actor_id=user_id)
    item = use_case.execute(command).unwrap()
    return ItemEnvelope(
        data=ItemSchema.from_entity(item), message="Item created successfully"
    )


@router.put(
    "/{item_id}",
    response_model=ItemEnvelope,
    responses={400: {"model": ErrorEnvelope}, 404: {"model": ErrorEnvelope}},
    summary="Update an item",
)
def update_item(
    item_id: str,
    payload: Optional[dict[str, Any]] = Body(default=None),
    user_id: Optional[str] = Depends(get_current_user_id),
    use_case: UpdateItemUseCase = Depends(get_update_item_use_case),
) -> ItemEnvelope:
    """Replace an item's fields."""
    command = UpdateItemCommand(item_id=item_id, payload=payload or {}, actor_id=user_id)
    item = use_case.execute(command).unwrap()
    return ItemEnvelope(
        data=ItemSchema.from_entity(item), message="Item updated successfully"
    )


@router.delete(
    "/{item_id}",
    response_model=DeletedEnvelope,
    responses={400: {"model": ErrorEnvelope}, 404: {"model": ErrorEnvelope}},
    summary="Delete an item",
)
def delete_item(
    item_id: str,
    use_case: DeleteItemUseCase = Depends(get_delete_item_use_case),
) -> DeletedEnvelope:
    """Delete an item by ID."""
    use_case.execute(DeleteItemCommand(item_id=item_id)).unwrap()
    return DeletedEnvelope(message="Item deleted successfully")
