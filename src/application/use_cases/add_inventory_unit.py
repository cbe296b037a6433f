"""
Add Inventory Unit Use Case.

Registers units of serialized items.
"""

from src.application.dto.requests import AddUnitRequest
from src.application.dto.responses import InventoryUnitResponse
from src.config import get_logger
from src.core.entities.inventory import InventoryUnit
from src.core.exceptions import ItemNotFoundError, TrackingModeError
from src.core.interfaces.inventory_store import IInventoryStore

logger = get_logger(__name__)


def unit_to_response(unit: InventoryUnit) -> InventoryUnitResponse:
    """Convert unit entity to response DTO."""
    return InventoryUnitResponse(
        id=unit.id,  # type: ignore[arg-type]
        item_id=unit.item_id,
        serial_number=unit.serial_number,
        status=unit.status.value,
    )


class AddInventoryUnitUseCase:
    """Register a physical unit of a serialized item."""

    def __init__(self, inventory_store: IInventoryStore | None = None):
        self._inventory_store = inventory_store

    async def _get_inventory_store(self) -> IInventoryStore:
        if self._inventory_store is None:
            from src.infrastructure.storage.sqlite import get_inventory_store

            self._inventory_store = await get_inventory_store()
        return self._inventory_store

    async def execute(self, item_id: str, request: AddUnitRequest) -> InventoryUnit:
        """Execute add unit use case."""
        store = await self._get_inventory_store()

        item = await store.get_item(item_id)
        if item is None:
            raise ItemNotFoundError(item_id)
        if not item.is_serialized:
            raise TrackingModeError(item_id, expected="serialized")

        unit = await store.add_unit(
            InventoryUnit(
                item_id=item_id,
                serial_number=request.serial_number,
                status=request.status,
            )
        )
        logger.info("inventory_unit_add_complete", item_id=item_id, unit_id=unit.id)
        return unit

    def to_response(self, unit: InventoryUnit) -> InventoryUnitResponse:
        """Convert result to API response."""
        return unit_to_response(unit)
