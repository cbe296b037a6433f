"""Inventory management endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import (
    get_add_unit_use_case,
    get_availability,
    get_create_item_use_case,
    get_inv_store,
    get_move_item_use_case,
    get_overview_use_case,
    get_update_stock_use_case,
)
from src.application.dto.requests import (
    AddUnitRequest,
    CreateGroupRequest,
    CreateItemRequest,
    MoveItemRequest,
    ReorderGroupsRequest,
    UpdateGroupRequest,
    UpdateItemRequest,
    UpdateStockRequest,
    UpdateUnitStatusRequest,
)
from src.application.dto.responses import (
    ErrorResponse,
    InventoryGroupResponse,
    InventoryItemResponse,
    InventoryOverviewResponse,
    InventoryStockResponse,
    InventoryUnitResponse,
    ItemAvailabilityResponse,
    MoveItemResponse,
    ReorderGroupsResponse,
)
from src.application.use_cases.add_inventory_unit import (
    AddInventoryUnitUseCase,
    unit_to_response,
)
from src.application.use_cases.create_inventory_item import (
    CreateInventoryItemUseCase,
    item_to_response,
)
from src.application.use_cases.get_inventory_overview import GetInventoryOverviewUseCase
from src.application.use_cases.get_quote_detail import breakdown_to_response
from src.application.use_cases.move_inventory_item import MoveInventoryItemUseCase
from src.application.use_cases.update_item_stock import (
    UpdateItemStockUseCase,
    stock_to_response,
)
from src.core.entities.inventory import InventoryGroup, InventoryItem, InventoryStock
from src.core.exceptions import TrackingModeError
from src.core.services import AvailabilityService
from src.infrastructure.storage.sqlite import SQLiteInventoryStore

router = APIRouter(prefix="/api/inventory", tags=["inventory"])


def _group_to_response(group: InventoryGroup) -> InventoryGroupResponse:
    """Convert entity to response DTO."""
    return InventoryGroupResponse(
        id=group.id,  # type: ignore[arg-type]
        name=group.name,
        display_order=group.display_order,
    )


async def _require_item(store: SQLiteInventoryStore, item_id: str) -> InventoryItem:
    item = await store.get_item(item_id)
    if item is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Inventory item not found: {item_id}",
        )
    return item


# --- Overview ---


@router.get(
    "",
    response_model=InventoryOverviewResponse,
)
async def get_inventory_overview(
    use_case: GetInventoryOverviewUseCase = Depends(get_overview_use_case),
) -> InventoryOverviewResponse:
    """Active items grouped by inventory group, with available and total counts."""
    groups = await use_case.execute()
    return use_case.to_response(groups)


# --- Groups ---


@router.post(
    "/groups",
    response_model=InventoryGroupResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
)
async def create_group(
    request: CreateGroupRequest,
    store: SQLiteInventoryStore = Depends(get_inv_store),
) -> InventoryGroupResponse:
    """Create a group after the existing ones."""
    group = await store.create_group(InventoryGroup(name=request.name))
    return _group_to_response(group)


@router.post(
    "/groups/reorder",
    response_model=ReorderGroupsResponse,
)
async def reorder_groups(
    request: ReorderGroupsRequest,
    store: SQLiteInventoryStore = Depends(get_inv_store),
) -> ReorderGroupsResponse:
    """Apply a new display order to groups."""
    updated = await store.reorder_groups(request.group_orders)
    return ReorderGroupsResponse(updated=updated)


@router.patch(
    "/groups/{group_id}",
    response_model=InventoryGroupResponse,
    responses={404: {"model": ErrorResponse}},
)
async def rename_group(
    group_id: str,
    request: UpdateGroupRequest,
    store: SQLiteInventoryStore = Depends(get_inv_store),
) -> InventoryGroupResponse:
    """Rename a group."""
    group = await store.get_group(group_id)
    if group is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Inventory group not found: {group_id}",
        )
    group.name = request.name
    updated = await store.update_group(group)
    return _group_to_response(updated)


@router.delete(
    "/groups/{group_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_group(
    group_id: str,
    store: SQLiteInventoryStore = Depends(get_inv_store),
) -> None:
    """Delete a group. Its items become ungrouped."""
    if not await store.delete_group(group_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Inventory group not found: {group_id}",
        )


# --- Items ---


@router.post(
    "/items",
    response_model=InventoryItemResponse,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def create_item(
    request: CreateItemRequest,
    use_case: CreateInventoryItemUseCase = Depends(get_create_item_use_case),
) -> InventoryItemResponse:
    """Create an item at the end of its group."""
    result = await use_case.execute(request)
    return use_case.to_response(result)


@router.get(
    "/items/{item_id}",
    response_model=InventoryItemResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_item(
    item_id: str,
    store: SQLiteInventoryStore = Depends(get_inv_store),
) -> InventoryItemResponse:
    """Get an item by ID."""
    return item_to_response(await _require_item(store, item_id))


@router.patch(
    "/items/{item_id}",
    response_model=InventoryItemResponse,
    responses={404: {"model": ErrorResponse}},
)
async def update_item(
    item_id: str,
    request: UpdateItemRequest,
    store: SQLiteInventoryStore = Depends(get_inv_store),
) -> InventoryItemResponse:
    """Update item fields. Sending group_id as null moves the item out of its group."""
    item = await _require_item(store, item_id)

    if request.name is not None:
        item.name = request.name
    if request.price is not None:
        item.price = request.price
    if request.category is not None:
        item.category = request.category
    if request.active is not None:
        item.active = request.active
    if "group_id" in request.model_fields_set:
        if request.group_id is not None and await store.get_group(request.group_id) is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Inventory group not found: {request.group_id}",
            )
        item.group_id = request.group_id

    updated = await store.update_item(item)
    return item_to_response(updated)


@router.delete(
    "/items/{item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_item(
    item_id: str,
    store: SQLiteInventoryStore = Depends(get_inv_store),
) -> None:
    """Delete an item with its units, stock record and quote lines."""
    if not await store.delete_item(item_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Inventory item not found: {item_id}",
        )


@router.post(
    "/items/{item_id}/move",
    response_model=MoveItemResponse,
    responses={404: {"model": ErrorResponse}},
)
async def move_item(
    item_id: str,
    request: MoveItemRequest,
    use_case: MoveInventoryItemUseCase = Depends(get_move_item_use_case),
) -> MoveItemResponse:
    """Move an item one position up or down within its group."""
    result = await use_case.execute(item_id, request)
    return use_case.to_response(result)


@router.get(
    "/items/{item_id}/availability",
    response_model=ItemAvailabilityResponse,
)
async def get_item_availability(
    item_id: str,
    service: AvailabilityService = Depends(get_availability),
) -> ItemAvailabilityResponse:
    """Availability breakdown of an item. Unknown items report all zeros."""
    breakdown = await service.get_item_availability_breakdown(item_id)
    return ItemAvailabilityResponse(
        item_id=item_id,
        breakdown=breakdown_to_response(breakdown),
    )


# --- Stock (bulk items) ---


@router.get(
    "/items/{item_id}/stock",
    response_model=InventoryStockResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def get_item_stock(
    item_id: str,
    store: SQLiteInventoryStore = Depends(get_inv_store),
) -> InventoryStockResponse:
    """Stock counters of a bulk item; zeros when no record exists yet."""
    item = await _require_item(store, item_id)
    if item.is_serialized:
        raise TrackingModeError(item_id, expected="bulk")

    stock = await store.get_stock(item_id)
    return stock_to_response(stock or InventoryStock(item_id=item_id))


@router.put(
    "/items/{item_id}/stock",
    response_model=InventoryStockResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_item_stock(
    item_id: str,
    request: UpdateStockRequest,
    use_case: UpdateItemStockUseCase = Depends(get_update_stock_use_case),
) -> InventoryStockResponse:
    """Set the stock counters of a bulk item."""
    stock = await use_case.execute(item_id, request)
    return use_case.to_response(stock)


# --- Units (serialized items) ---


@router.get(
    "/items/{item_id}/units",
    response_model=list[InventoryUnitResponse],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def list_item_units(
    item_id: str,
    store: SQLiteInventoryStore = Depends(get_inv_store),
) -> list[InventoryUnitResponse]:
    """Units of a serialized item."""
    item = await _require_item(store, item_id)
    if not item.is_serialized:
        raise TrackingModeError(item_id, expected="serialized")

    units = await store.list_units(item_id)
    return [unit_to_response(u) for u in units]


@router.post(
    "/items/{item_id}/units",
    response_model=InventoryUnitResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def add_item_unit(
    item_id: str,
    request: AddUnitRequest,
    use_case: AddInventoryUnitUseCase = Depends(get_add_unit_use_case),
) -> InventoryUnitResponse:
    """Add a unit to a serialized item."""
    unit = await use_case.execute(item_id, request)
    return use_case.to_response(unit)


@router.patch(
    "/units/{unit_id}",
    response_model=InventoryUnitResponse,
    responses={404: {"model": ErrorResponse}},
)
async def update_unit_status(
    unit_id: str,
    request: UpdateUnitStatusRequest,
    store: SQLiteInventoryStore = Depends(get_inv_store),
) -> InventoryUnitResponse:
    """Change a unit's status."""
    unit = await store.update_unit_status(unit_id, request.status)
    if unit is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Inventory unit not found: {unit_id}",
        )
    return unit_to_response(unit)


@router.delete(
    "/units/{unit_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_unit(
    unit_id: str,
    store: SQLiteInventoryStore = Depends(get_inv_store),
) -> None:
    """Delete a unit."""
    if not await store.delete_unit(unit_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Inventory unit not found: {unit_id}",
        )
