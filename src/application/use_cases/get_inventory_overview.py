"""
Get Inventory Overview Use Case.

Builds the grouped inventory listing.
"""

from dataclasses import dataclass, field

from src.application.dto.responses import (
    InventoryOverviewResponse,
    OverviewGroupResponse,
    OverviewItemResponse,
)
from src.config import get_logger
from src.core.entities.availability import AvailabilityBreakdown
from src.core.entities.inventory import (
    BulkTracking,
    InventoryItem,
    InventoryStock,
    InventoryUnit,
    SerializedTracking,
)
from src.core.interfaces.inventory_store import IInventoryStore
from src.core.services.availability import compute_breakdown

logger = get_logger(__name__)

UNGROUPED_NAME = "Ungrouped"


@dataclass
class OverviewItem:
    """An item with its available and total counts."""

    item: InventoryItem
    available: int
    total: int


@dataclass
class OverviewGroup:
    """A display bucket: an inventory group, or the ungrouped bucket."""

    id: str | None
    name: str
    items: list[OverviewItem] = field(default_factory=list)


class GetInventoryOverviewUseCase:
    """
    Build the inventory overview.

    Units and stock records are loaded in two batch queries. Counts follow
    the availability rules of each tracking mode; an item whose counts
    cannot be computed shows zeros without affecting the others.
    """

    def __init__(self, inventory_store: IInventoryStore | None = None):
        self._inventory_store = inventory_store

    async def _get_inventory_store(self) -> IInventoryStore:
        if self._inventory_store is None:
            from src.infrastructure.storage.sqlite import get_inventory_store

            self._inventory_store = await get_inventory_store()
        return self._inventory_store

    async def execute(self) -> list[OverviewGroup]:
        """Execute overview use case."""
        store = await self._get_inventory_store()

        groups = await store.list_groups()
        items = await store.list_items(active_only=True)

        serialized_ids = [i.id for i in items if i.is_serialized and i.id]
        bulk_ids = [i.id for i in items if not i.is_serialized and i.id]

        units_by_item: dict[str, list[InventoryUnit]] = {}
        stock_by_item: dict[str, InventoryStock] = {}
        try:
            units_by_item = await store.list_units_for_items(serialized_ids)
        except Exception as e:
            logger.warning("overview_units_lookup_failed", error=str(e))
        try:
            stock_by_item = await store.list_stock_for_items(bulk_ids)
        except Exception as e:
            logger.warning("overview_stock_lookup_failed", error=str(e))

        buckets: dict[str | None, OverviewGroup] = {
            group.id: OverviewGroup(id=group.id, name=group.name) for group in groups
        }
        ungrouped = OverviewGroup(id=None, name=UNGROUPED_NAME)

        for item in items:
            breakdown = self._breakdown_for(item, units_by_item, stock_by_item)
            bucket = buckets.get(item.group_id, ungrouped)
            bucket.items.append(
                OverviewItem(item=item, available=breakdown.available, total=breakdown.total)
            )

        result = list(buckets.values())
        if ungrouped.items:
            result.append(ungrouped)

        logger.info("inventory_overview_built", groups=len(result), items=len(items))
        return result

    @staticmethod
    def _breakdown_for(
        item: InventoryItem,
        units_by_item: dict[str, list[InventoryUnit]],
        stock_by_item: dict[str, InventoryStock],
    ) -> AvailabilityBreakdown:
        try:
            if item.is_serialized:
                tracking = SerializedTracking(units=units_by_item.get(item.id, []))  # type: ignore[arg-type]
            else:
                tracking = BulkTracking(stock=stock_by_item.get(item.id))  # type: ignore[arg-type]
            return compute_breakdown(tracking)
        except Exception as e:
            logger.warning("overview_item_degraded_to_zero", item_id=item.id, error=str(e))
            return AvailabilityBreakdown.zero()

    def to_response(self, groups: list[OverviewGroup]) -> InventoryOverviewResponse:
        """Convert result to API response."""
        return InventoryOverviewResponse(
            groups=[
                OverviewGroupResponse(
                    id=group.id,
                    name=group.name,
                    items=[
                        OverviewItemResponse(
                            id=entry.item.id,  # type: ignore[arg-type]
                            name=entry.item.name,
                            price=entry.item.price,
                            is_serialized=entry.item.is_serialized,
                            available=entry.available,
                            total=entry.total,
                            group_id=entry.item.group_id,
                        )
                        for entry in group.items
                    ],
                )
                for group in groups
            ]
        )
