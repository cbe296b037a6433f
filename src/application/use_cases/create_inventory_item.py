"""
Create Inventory Item Use Case.

Creates inventory items.
"""

from dataclasses import dataclass

from src.application.dto.requests import CreateItemRequest
from src.application.dto.responses import InventoryItemResponse
from src.config import get_logger
from src.core.entities.inventory import InventoryItem, InventoryStock
from src.core.exceptions import GroupNotFoundError
from src.core.interfaces.inventory_store import IInventoryStore

logger = get_logger(__name__)


def item_to_response(item: InventoryItem) -> InventoryItemResponse:
    """Convert item entity to response DTO."""
    return InventoryItemResponse(
        id=item.id,  # type: ignore[arg-type]
        name=item.name,
        price=item.price,
        category=item.category,
        group_id=item.group_id,
        is_serialized=item.is_serialized,
        active=item.active,
        display_order=item.display_order,
        created_at=item.created_at,
        updated_at=item.updated_at,
    )


@dataclass
class CreateItemResult:
    """Result of creating an item."""

    item: InventoryItem
    stock: InventoryStock | None = None


class CreateInventoryItemUseCase:
    """
    Create an inventory item at the end of its group.

    Bulk items start with an empty stock record so that their availability
    reads as zero rather than missing.
    """

    def __init__(self, inventory_store: IInventoryStore | None = None):
        self._inventory_store = inventory_store

    async def _get_inventory_store(self) -> IInventoryStore:
        if self._inventory_store is None:
            from src.infrastructure.storage.sqlite import get_inventory_store

            self._inventory_store = await get_inventory_store()
        return self._inventory_store

    async def execute(self, request: CreateItemRequest) -> CreateItemResult:
        """Execute create item use case."""
        store = await self._get_inventory_store()

        if request.group_id is not None:
            group = await store.get_group(request.group_id)
            if group is None:
                raise GroupNotFoundError(request.group_id)

        item = await store.create_item(
            InventoryItem(
                name=request.name,
                price=request.price,
                category=request.category,
                group_id=request.group_id,
                is_serialized=request.is_serialized,
            )
        )

        stock = None
        if not item.is_serialized:
            stock = await store.upsert_stock(
                InventoryStock(item_id=item.id)  # type: ignore[arg-type]
            )

        logger.info(
            "inventory_item_create_complete",
            item_id=item.id,
            is_serialized=item.is_serialized,
        )
        return CreateItemResult(item=item, stock=stock)

    def to_response(self, result: CreateItemResult) -> InventoryItemResponse:
        """Convert result to API response."""
        return item_to_response(result.item)
