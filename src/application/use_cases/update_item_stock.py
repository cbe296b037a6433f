"""
Update Item Stock Use Case.

Sets the stock counters of bulk items.
"""

from src.application.dto.requests import UpdateStockRequest
from src.application.dto.responses import InventoryStockResponse
from src.config import get_logger
from src.core.entities.inventory import InventoryStock
from src.core.exceptions import InvalidStockError, ItemNotFoundError, TrackingModeError
from src.core.interfaces.inventory_store import IInventoryStore

logger = get_logger(__name__)


def stock_to_response(stock: InventoryStock) -> InventoryStockResponse:
    """Convert stock entity to response DTO."""
    return InventoryStockResponse(
        item_id=stock.item_id,
        total_quantity=stock.total_quantity,
        out_of_service_quantity=stock.out_of_service_quantity,
        available_quantity=stock.available_quantity,
    )


class UpdateItemStockUseCase:
    """Set total and out-of-service quantities of a bulk item."""

    def __init__(self, inventory_store: IInventoryStore | None = None):
        self._inventory_store = inventory_store

    async def _get_inventory_store(self) -> IInventoryStore:
        if self._inventory_store is None:
            from src.infrastructure.storage.sqlite import get_inventory_store

            self._inventory_store = await get_inventory_store()
        return self._inventory_store

    async def execute(self, item_id: str, request: UpdateStockRequest) -> InventoryStock:
        """Execute update stock use case."""
        logger.info(
            "update_stock_started",
            item_id=item_id,
            total_quantity=request.total_quantity,
            out_of_service_quantity=request.out_of_service_quantity,
        )

        # 1. Check counters: 0 <= out_of_service <= total
        if not 0 <= request.out_of_service_quantity <= request.total_quantity:
            raise InvalidStockError(
                request.total_quantity, request.out_of_service_quantity
            )

        # 2. Only bulk items carry a stock record
        store = await self._get_inventory_store()
        item = await store.get_item(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        if item.is_serialized:
            raise TrackingModeError(item_id, expected="bulk")

        stock = await store.upsert_stock(
            InventoryStock(
                item_id=item_id,
                total_quantity=request.total_quantity,
                out_of_service_quantity=request.out_of_service_quantity,
            )
        )

        logger.info(
            "update_stock_complete",
            item_id=item_id,
            available_quantity=stock.available_quantity,
        )
        return stock

    def to_response(self, stock: InventoryStock) -> InventoryStockResponse:
        """Convert result to API response."""
        return stock_to_response(stock)
