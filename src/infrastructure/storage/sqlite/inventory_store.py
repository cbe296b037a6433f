"""SQLite implementation of inventory storage."""

from datetime import UTC, datetime

import aiosqlite

from src.config import get_logger
from src.core.entities.inventory import (
    InventoryGroup,
    InventoryItem,
    InventoryStock,
    InventoryUnit,
    UnitStatus,
)
from src.core.interfaces.inventory_store import IInventoryStore
from src.infrastructure.storage.sqlite.connection import get_connection, get_transaction
from src.infrastructure.storage.sqlite.rows import generate_id, parse_datetime, placeholders

logger = get_logger(__name__)


class SQLiteInventoryStore(IInventoryStore):
    """SQLite implementation of group, item, unit and stock storage."""

    # Groups

    async def create_group(self, group: InventoryGroup) -> InventoryGroup:
        """Create a group after the last one."""
        if not group.id:
            group.id = generate_id()
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "SELECT COALESCE(MAX(display_order), 0) FROM inventory_groups"
            )
            row = await cursor.fetchone()
            group.display_order = row[0] + 1
            await conn.execute(
                """
                INSERT INTO inventory_groups (id, name, display_order, created_at)
                VALUES (?, ?, ?, ?)
                """,
                (group.id, group.name, group.display_order, group.created_at.isoformat()),
            )
            logger.info("inventory_group_created", group_id=group.id, name=group.name)
            return group

    async def get_group(self, group_id: str) -> InventoryGroup | None:
        """Get group by ID."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM inventory_groups WHERE id = ?", (group_id,)
            )
            row = await cursor.fetchone()
            return self._row_to_group(row) if row else None

    async def list_groups(self) -> list[InventoryGroup]:
        """List groups ordered by display_order."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM inventory_groups ORDER BY display_order, created_at"
            )
            rows = await cursor.fetchall()
            return [self._row_to_group(row) for row in rows]

    async def update_group(self, group: InventoryGroup) -> InventoryGroup:
        """Update group name."""
        async with get_transaction() as conn:
            await conn.execute(
                "UPDATE inventory_groups SET name = ? WHERE id = ?",
                (group.name, group.id),
            )
            logger.info("inventory_group_updated", group_id=group.id)
            return group

    async def delete_group(self, group_id: str) -> bool:
        """Delete a group; its items keep existing without a group."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM inventory_groups WHERE id = ?", (group_id,)
            )
            deleted = cursor.rowcount > 0
            if deleted:
                logger.info("inventory_group_deleted", group_id=group_id)
            return deleted

    async def reorder_groups(self, group_orders: dict[str, int]) -> int:
        """Set display_order per group ID."""
        updated = 0
        async with get_transaction() as conn:
            for group_id, order in group_orders.items():
                cursor = await conn.execute(
                    "UPDATE inventory_groups SET display_order = ? WHERE id = ?",
                    (order, group_id),
                )
                updated += cursor.rowcount
        logger.info("inventory_groups_reordered", requested=len(group_orders), updated=updated)
        return updated

    # Items

    async def create_item(self, item: InventoryItem) -> InventoryItem:
        """Create an item after the last one in its group."""
        if not item.id:
            item.id = generate_id()
        now = datetime.now(UTC)
        item.created_at = now
        item.updated_at = now
        async with get_transaction() as conn:
            cursor = await conn.execute(
                """
                SELECT COALESCE(MAX(display_order), 0) FROM inventory_items
                WHERE group_id IS ?
                """,
                (item.group_id,),
            )
            row = await cursor.fetchone()
            item.display_order = row[0] + 1
            await conn.execute(
                """
                INSERT INTO inventory_items (
                    id, name, price, category, group_id, is_serialized,
                    active, display_order, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    item.id,
                    item.name,
                    item.price,
                    item.category,
                    item.group_id,
                    int(item.is_serialized),
                    int(item.active),
                    item.display_order,
                    item.created_at.isoformat(),
                    item.updated_at.isoformat(),
                ),
            )
            logger.info(
                "inventory_item_created",
                item_id=item.id,
                group_id=item.group_id,
                is_serialized=item.is_serialized,
            )
            return item

    async def get_item(self, item_id: str) -> InventoryItem | None:
        """Get item by ID."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM inventory_items WHERE id = ?", (item_id,)
            )
            row = await cursor.fetchone()
            return self._row_to_item(row) if row else None

    async def list_items(self, active_only: bool = True) -> list[InventoryItem]:
        """List items ordered by display_order."""
        query = "SELECT * FROM inventory_items"
        if active_only:
            query += " WHERE active = 1"
        query += " ORDER BY display_order, created_at"
        async with get_connection() as conn:
            cursor = await conn.execute(query)
            rows = await cursor.fetchall()
            return [self._row_to_item(row) for row in rows]

    async def update_item(self, item: InventoryItem) -> InventoryItem:
        """Update item fields. The tracking mode is not updatable.

        An item that changes group is appended after the last item of its new group.
        """
        item.updated_at = datetime.now(UTC)
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "SELECT group_id FROM inventory_items WHERE id = ?", (item.id,)
            )
            current = await cursor.fetchone()
            if current is not None and current["group_id"] != item.group_id:
                cursor = await conn.execute(
                    """
                    SELECT COALESCE(MAX(display_order), 0) FROM inventory_items
                    WHERE group_id IS ? AND id != ?
                    """,
                    (item.group_id, item.id),
                )
                row = await cursor.fetchone()
                item.display_order = row[0] + 1
            await conn.execute(
                """
                UPDATE inventory_items SET
                    name = ?,
                    price = ?,
                    category = ?,
                    group_id = ?,
                    active = ?,
                    display_order = ?,
                    updated_at = ?
                WHERE id = ?
                """,
                (
                    item.name,
                    item.price,
                    item.category,
                    item.group_id,
                    int(item.active),
                    item.display_order,
                    item.updated_at.isoformat(),
                    item.id,
                ),
            )
            logger.info("inventory_item_updated", item_id=item.id)
            return item

    async def delete_item(self, item_id: str) -> bool:
        """Delete an item; units, stock and quote lines cascade."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM inventory_items WHERE id = ?", (item_id,)
            )
            deleted = cursor.rowcount > 0
            if deleted:
                logger.info("inventory_item_deleted", item_id=item_id)
            return deleted

    async def get_adjacent_item(
        self, item: InventoryItem, direction: str
    ) -> InventoryItem | None:
        """Nearest item in the same group above ("up") or below ("down")."""
        if direction == "up":
            query = """
                SELECT * FROM inventory_items
                WHERE group_id IS ? AND display_order < ?
                ORDER BY display_order DESC LIMIT 1
            """
        else:
            query = """
                SELECT * FROM inventory_items
                WHERE group_id IS ? AND display_order > ?
                ORDER BY display_order ASC LIMIT 1
            """
        async with get_connection() as conn:
            cursor = await conn.execute(query, (item.group_id, item.display_order))
            row = await cursor.fetchone()
            return self._row_to_item(row) if row else None

    async def swap_item_order(
        self, first: InventoryItem, second: InventoryItem
    ) -> None:
        """Exchange the display_order of two items."""
        async with get_transaction() as conn:
            await conn.execute(
                "UPDATE inventory_items SET display_order = ? WHERE id = ?",
                (second.display_order, first.id),
            )
            await conn.execute(
                "UPDATE inventory_items SET display_order = ? WHERE id = ?",
                (first.display_order, second.id),
            )
        first.display_order, second.display_order = (
            second.display_order,
            first.display_order,
        )
        logger.info("inventory_items_swapped", first_id=first.id, second_id=second.id)

    # Units

    async def add_unit(self, unit: InventoryUnit) -> InventoryUnit:
        """Add a unit to a serialized item."""
        if not unit.id:
            unit.id = generate_id()
        async with get_transaction() as conn:
            await conn.execute(
                """
                INSERT INTO inventory_units (id, item_id, serial_number, status, created_at)
                VALUES (?, ?, ?, ?, ?)
                """,
                (
                    unit.id,
                    unit.item_id,
                    unit.serial_number,
                    unit.status.value,
                    unit.created_at.isoformat(),
                ),
            )
            logger.info("inventory_unit_added", unit_id=unit.id, item_id=unit.item_id)
            return unit

    async def get_unit(self, unit_id: str) -> InventoryUnit | None:
        """Get unit by ID."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM inventory_units WHERE id = ?", (unit_id,)
            )
            row = await cursor.fetchone()
            return self._row_to_unit(row) if row else None

    async def list_units(self, item_id: str) -> list[InventoryUnit]:
        """List units of an item."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM inventory_units WHERE item_id = ? ORDER BY created_at",
                (item_id,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_unit(row) for row in rows]

    async def list_units_for_items(
        self, item_ids: list[str]
    ) -> dict[str, list[InventoryUnit]]:
        """List units of several items, keyed by item ID."""
        units: dict[str, list[InventoryUnit]] = {}
        if not item_ids:
            return units
        async with get_connection() as conn:
            cursor = await conn.execute(
                f"""
                SELECT * FROM inventory_units
                WHERE item_id IN ({placeholders(len(item_ids))})
                ORDER BY created_at
                """,
                tuple(item_ids),
            )
            for row in await cursor.fetchall():
                unit = self._row_to_unit(row)
                units.setdefault(unit.item_id, []).append(unit)
        return units

    async def update_unit_status(
        self, unit_id: str, status: UnitStatus
    ) -> InventoryUnit | None:
        """Change a unit's status."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "UPDATE inventory_units SET status = ? WHERE id = ?",
                (status.value, unit_id),
            )
            if cursor.rowcount == 0:
                return None
            cursor = await conn.execute(
                "SELECT * FROM inventory_units WHERE id = ?", (unit_id,)
            )
            row = await cursor.fetchone()
            logger.info("inventory_unit_status_changed", unit_id=unit_id, status=status.value)
            return self._row_to_unit(row)

    async def delete_unit(self, unit_id: str) -> bool:
        """Delete a unit."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM inventory_units WHERE id = ?", (unit_id,)
            )
            deleted = cursor.rowcount > 0
            if deleted:
                logger.info("inventory_unit_deleted", unit_id=unit_id)
            return deleted

    # Stock

    async def get_stock(self, item_id: str) -> InventoryStock | None:
        """Get the stock record of a bulk item."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT * FROM inventory_stock WHERE item_id = ?", (item_id,)
            )
            row = await cursor.fetchone()
            return self._row_to_stock(row) if row else None

    async def list_stock_for_items(
        self, item_ids: list[str]
    ) -> dict[str, InventoryStock]:
        """Get stock records of several items, keyed by item ID."""
        if not item_ids:
            return {}
        async with get_connection() as conn:
            cursor = await conn.execute(
                f"""
                SELECT * FROM inventory_stock
                WHERE item_id IN ({placeholders(len(item_ids))})
                """,
                tuple(item_ids),
            )
            rows = await cursor.fetchall()
            return {row["item_id"]: self._row_to_stock(row) for row in rows}

    async def upsert_stock(self, stock: InventoryStock) -> InventoryStock:
        """Create or replace the stock record of an item."""
        stock.updated_at = datetime.now(UTC)
        async with get_transaction() as conn:
            await conn.execute(
                """
                INSERT INTO inventory_stock (
                    item_id, total_quantity, out_of_service_quantity, updated_at
                ) VALUES (?, ?, ?, ?)
                ON CONFLICT(item_id) DO UPDATE SET
                    total_quantity = excluded.total_quantity,
                    out_of_service_quantity = excluded.out_of_service_quantity,
                    updated_at = excluded.updated_at
                """,
                (
                    stock.item_id,
                    stock.total_quantity,
                    stock.out_of_service_quantity,
                    stock.updated_at.isoformat(),
                ),
            )
            logger.info(
                "inventory_stock_saved",
                item_id=stock.item_id,
                total=stock.total_quantity,
                out_of_service=stock.out_of_service_quantity,
            )
            return stock

    # Row mapping

    @staticmethod
    def _row_to_group(row: aiosqlite.Row) -> InventoryGroup:
        return InventoryGroup(
            id=row["id"],
            name=row["name"],
            display_order=row["display_order"],
            created_at=parse_datetime(row["created_at"]),
        )

    @staticmethod
    def _row_to_item(row: aiosqlite.Row) -> InventoryItem:
        return InventoryItem(
            id=row["id"],
            name=row["name"],
            price=float(row["price"]),
            category=row["category"],
            group_id=row["group_id"],
            is_serialized=bool(row["is_serialized"]),
            active=bool(row["active"]),
            display_order=row["display_order"],
            created_at=parse_datetime(row["created_at"]),
            updated_at=parse_datetime(row["updated_at"]),
        )

    @staticmethod
    def _row_to_unit(row: aiosqlite.Row) -> InventoryUnit:
        return InventoryUnit(
            id=row["id"],
            item_id=row["item_id"],
            serial_number=row["serial_number"],
            status=UnitStatus(row["status"]),
            created_at=parse_datetime(row["created_at"]),
        )

    @staticmethod
    def _row_to_stock(row: aiosqlite.Row) -> InventoryStock:
        return InventoryStock(
            item_id=row["item_id"],
            total_quantity=int(row["total_quantity"]),
            out_of_service_quantity=int(row["out_of_service_quantity"] or 0),
            updated_at=parse_datetime(row["updated_at"]),
        )
