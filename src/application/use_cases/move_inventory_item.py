"""
Move Inventory Item Use Case.

Reorders items within their group.
"""

from dataclasses import dataclass

from src.application.dto.requests import MoveItemRequest
from src.application.dto.responses import MoveItemResponse
from src.application.use_cases.create_inventory_item import item_to_response
from src.config import get_logger
from src.core.entities.inventory import InventoryItem
from src.core.exceptions import ItemNotFoundError
from src.core.interfaces.inventory_store import IInventoryStore

logger = get_logger(__name__)


@dataclass
class MoveItemResult:
    """Result of moving an item."""

    item: InventoryItem
    moved: bool


class MoveInventoryItemUseCase:
    """Move an item one position up or down within its group."""

    def __init__(self, inventory_store: IInventoryStore | None = None):
        self._inventory_store = inventory_store

    async def _get_inventory_store(self) -> IInventoryStore:
        if self._inventory_store is None:
            from src.infrastructure.storage.sqlite import get_inventory_store

            self._inventory_store = await get_inventory_store()
        return self._inventory_store

    async def execute(self, item_id: str, request: MoveItemRequest) -> MoveItemResult:
        """Execute move item use case. At the edge of the group this is a no-op."""
        store = await self._get_inventory_store()

        item = await store.get_item(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)

        neighbour = await store.get_adjacent_item(item, request.direction)
        if neighbour is None:
            logger.info("inventory_item_move_noop", item_id=item_id, direction=request.direction)
            return MoveItemResult(item=item, moved=False)

        await store.swap_item_order(item, neighbour)
        logger.info(
            "inventory_item_moved",
            item_id=item_id,
            direction=request.direction,
            display_order=item.display_order,
        )
        return MoveItemResult(item=item, moved=True)

    def to_response(self, result: MoveItemResult) -> MoveItemResponse:
        """Convert result to API response."""
        return MoveItemResponse(moved=result.moved, item=item_to_response(result.item))
