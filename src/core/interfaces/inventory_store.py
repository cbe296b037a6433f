"""Abstract interface for inventory storage."""

from abc import ABC, abstractmethod

from src.core.entities.inventory import (
    InventoryGroup,
    InventoryItem,
    InventoryStock,
    InventoryUnit,
    UnitStatus,
)


class IInventoryStore(ABC):
    """Interface for groups, items, units and stock persistence."""

    # Groups

    @abstractmethod
    async def create_group(self, group: InventoryGroup) -> InventoryGroup:
        """Create a group at the end of the group order."""
        pass

    @abstractmethod
    async def get_group(self, group_id: str) -> InventoryGroup | None:
        """Get group by ID."""
        pass

    @abstractmethod
    async def list_groups(self) -> list[InventoryGroup]:
        """List groups ordered by display_order."""
        pass

    @abstractmethod
    async def update_group(self, group: InventoryGroup) -> InventoryGroup:
        """Update group name."""
        pass

    @abstractmethod
    async def delete_group(self, group_id: str) -> bool:
        """Delete a group. Its items become ungrouped."""
        pass

    @abstractmethod
    async def reorder_groups(self, group_orders: dict[str, int]) -> int:
        """Set display_order per group ID. Returns number of rows updated."""
        pass

    # Items

    @abstractmethod
    async def create_item(self, item: InventoryItem) -> InventoryItem:
        """Create an item at the end of its group."""
        pass

    @abstractmethod
    async def get_item(self, item_id: str) -> InventoryItem | None:
        """Get item by ID."""
        pass

    @abstractmethod
    async def list_items(self, active_only: bool = True) -> list[InventoryItem]:
        """List items ordered by display_order."""
        pass

    @abstractmethod
    async def update_item(self, item: InventoryItem) -> InventoryItem:
        """Update item fields."""
        pass

    @abstractmethod
    async def delete_item(self, item_id: str) -> bool:
        """Delete an item with its units and stock."""
        pass

    @abstractmethod
    async def get_adjacent_item(
        self, item: InventoryItem, direction: str
    ) -> InventoryItem | None:
        """Nearest item in the same group above ("up") or below ("down")."""
        pass

    @abstractmethod
    async def swap_item_order(
        self, first: InventoryItem, second: InventoryItem
    ) -> None:
        """Exchange the display_order of two items."""
        pass

    # Units

    @abstractmethod
    async def add_unit(self, unit: InventoryUnit) -> InventoryUnit:
        """Add a unit to a serialized item."""
        pass

    @abstractmethod
    async def get_unit(self, unit_id: str) -> InventoryUnit | None:
        """Get unit by ID."""
        pass

    @abstractmethod
    async def list_units(self, item_id: str) -> list[InventoryUnit]:
        """List units of an item."""
        pass

    @abstractmethod
    async def list_units_for_items(
        self, item_ids: list[str]
    ) -> dict[str, list[InventoryUnit]]:
        """List units of several items, keyed by item ID."""
        pass

    @abstractmethod
    async def update_unit_status(
        self, unit_id: str, status: UnitStatus
    ) -> InventoryUnit | None:
        """Change a unit's status."""
        pass

    @abstractmethod
    async def delete_unit(self, unit_id: str) -> bool:
        """Delete a unit."""
        pass

    # Stock

    @abstractmethod
    async def get_stock(self, item_id: str) -> InventoryStock | None:
        """Get the stock record of a bulk item."""
        pass

    @abstractmethod
    async def list_stock_for_items(
        self, item_ids: list[str]
    ) -> dict[str, InventoryStock]:
        """Get stock records of several items, keyed by item ID."""
        pass

    @abstractmethod
    async def upsert_stock(self, stock: InventoryStock) -> InventoryStock:
        """Create or replace the stock record of an item."""
        pass
