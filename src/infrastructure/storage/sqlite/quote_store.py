"""
SQLite implementation of quote storage.

Quote lines are read joined with their inventory item so callers get the
item name, current price and tracking mode alongside the price snapshot.
"""

from datetime import date

import aiosqlite

from src.config import get_logger
from src.core.entities.quote import Quote, QuoteItem, QuoteStatus, QuoteWithItems
from src.core.interfaces.quote_store import IQuoteStore
from src.infrastructure.storage.sqlite.connection import get_connection, get_transaction
from src.infrastructure.storage.sqlite.rows import generate_id, parse_datetime

logger = get_logger(__name__)

_QUOTE_ITEM_SELECT = """
    SELECT
        qi.id, qi.quote_id, qi.item_id, qi.quantity, qi.unit_price_snapshot,
        qi.created_at,
        ii.name AS item_name,
        ii.price AS item_price,
        ii.is_serialized AS item_is_serialized
    FROM quote_items qi
    LEFT JOIN inventory_items ii ON ii.id = qi.item_id
"""


class SQLiteQuoteStore(IQuoteStore):
    """SQLite implementation of quote and quote line storage."""

    async def create_quote(self, quote: Quote) -> Quote:
        """Create a new quote."""
        if not quote.id:
            quote.id = generate_id()
        async with get_transaction() as conn:
            await conn.execute(
                """
                INSERT INTO quotes (id, name, start_date, end_date, status, created_at)
                VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    quote.id,
                    quote.name,
                    quote.start_date.isoformat(),
                    quote.end_date.isoformat(),
                    quote.status.value,
                    quote.created_at.isoformat(),
                ),
            )
            logger.info("quote_created", quote_id=quote.id, name=quote.name)
            return quote

    async def get_quote(self, quote_id: str) -> Quote | None:
        """Get quote by ID."""
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM quotes WHERE id = ?", (quote_id,))
            row = await cursor.fetchone()
            return self._row_to_quote(row) if row else None

    async def get_quote_with_items(self, quote_id: str) -> QuoteWithItems | None:
        """Get quote with its lines in the order they were added."""
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT * FROM quotes WHERE id = ?", (quote_id,))
            row = await cursor.fetchone()
            if row is None:
                return None
            quote = self._row_to_quote(row)

            cursor = await conn.execute(
                _QUOTE_ITEM_SELECT
                + " WHERE qi.quote_id = ? ORDER BY qi.created_at, qi.rowid",
                (quote_id,),
            )
            items = [self._row_to_quote_item(r) for r in await cursor.fetchall()]

        return QuoteWithItems(**quote.model_dump(), items=items)

    async def list_quotes(self, limit: int = 100, offset: int = 0) -> list[Quote]:
        """List quotes, newest first."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                """
                SELECT * FROM quotes
                ORDER BY created_at DESC
                LIMIT ? OFFSET ?
                """,
                (limit, offset),
            )
            rows = await cursor.fetchall()
            return [self._row_to_quote(row) for row in rows]

    async def count_quotes(self) -> int:
        """Count all quotes."""
        async with get_connection() as conn:
            cursor = await conn.execute("SELECT COUNT(*) FROM quotes")
            row = await cursor.fetchone()
            return row[0]

    async def update_quote(self, quote: Quote) -> Quote:
        """Update quote name, dates and status."""
        async with get_transaction() as conn:
            await conn.execute(
                """
                UPDATE quotes SET name = ?, start_date = ?, end_date = ?, status = ?
                WHERE id = ?
                """,
                (
                    quote.name,
                    quote.start_date.isoformat(),
                    quote.end_date.isoformat(),
                    quote.status.value,
                    quote.id,
                ),
            )
            logger.info("quote_updated", quote_id=quote.id, status=quote.status.value)
            return quote

    async def delete_quote(self, quote_id: str) -> bool:
        """Delete a quote; its lines cascade."""
        async with get_transaction() as conn:
            cursor = await conn.execute("DELETE FROM quotes WHERE id = ?", (quote_id,))
            deleted = cursor.rowcount > 0
            if deleted:
                logger.info("quote_deleted", quote_id=quote_id)
            return deleted

    async def add_item(self, item: QuoteItem) -> QuoteItem:
        """Add a line to a quote."""
        if not item.id:
            item.id = generate_id()
        async with get_transaction() as conn:
            await conn.execute(
                """
                INSERT INTO quote_items (
                    id, quote_id, item_id, quantity, unit_price_snapshot, created_at
                ) VALUES (?, ?, ?, ?, ?, ?)
                """,
                (
                    item.id,
                    item.quote_id,
                    item.item_id,
                    item.quantity,
                    item.unit_price_snapshot,
                    item.created_at.isoformat(),
                ),
            )
            logger.info(
                "quote_item_added",
                quote_id=item.quote_id,
                item_id=item.item_id,
                quantity=item.quantity,
            )
            return item

    async def get_item(self, quote_item_id: str) -> QuoteItem | None:
        """Get a quote line by ID."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                _QUOTE_ITEM_SELECT + " WHERE qi.id = ?", (quote_item_id,)
            )
            row = await cursor.fetchone()
            return self._row_to_quote_item(row) if row else None

    async def find_item(self, quote_id: str, item_id: str) -> QuoteItem | None:
        """Get the line of a quote that references an inventory item."""
        async with get_connection() as conn:
            cursor = await conn.execute(
                _QUOTE_ITEM_SELECT
                + " WHERE qi.quote_id = ? AND qi.item_id = ? ORDER BY qi.created_at LIMIT 1",
                (quote_id, item_id),
            )
            row = await cursor.fetchone()
            return self._row_to_quote_item(row) if row else None

    async def update_item_quantity(
        self, quote_item_id: str, quantity: int
    ) -> QuoteItem | None:
        """Set the quantity of a quote line."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "UPDATE quote_items SET quantity = ? WHERE id = ?",
                (quantity, quote_item_id),
            )
            if cursor.rowcount == 0:
                return None
            cursor = await conn.execute(
                _QUOTE_ITEM_SELECT + " WHERE qi.id = ?", (quote_item_id,)
            )
            row = await cursor.fetchone()
            logger.info("quote_item_updated", quote_item_id=quote_item_id, quantity=quantity)
            return self._row_to_quote_item(row)

    async def delete_item(self, quote_item_id: str) -> bool:
        """Delete a quote line."""
        async with get_transaction() as conn:
            cursor = await conn.execute(
                "DELETE FROM quote_items WHERE id = ?", (quote_item_id,)
            )
            deleted = cursor.rowcount > 0
            if deleted:
                logger.info("quote_item_deleted", quote_item_id=quote_item_id)
            return deleted

    async def sum_reserved_quantity(self, item_id: str) -> int:
        """
        Sum quantity over every quote line for an item.

        Counts lines of all quotes regardless of status or date range.
        """
        async with get_connection() as conn:
            cursor = await conn.execute(
                "SELECT COALESCE(SUM(quantity), 0) FROM quote_items WHERE item_id = ?",
                (item_id,),
            )
            row = await cursor.fetchone()
            return int(row[0])

    @staticmethod
    def _row_to_quote(row: aiosqlite.Row) -> Quote:
        return Quote(
            id=row["id"],
            name=row["name"],
            start_date=date.fromisoformat(row["start_date"]),
            end_date=date.fromisoformat(row["end_date"]),
            status=QuoteStatus(row["status"]),
            created_at=parse_datetime(row["created_at"]),
        )

    @staticmethod
    def _row_to_quote_item(row: aiosqlite.Row) -> QuoteItem:
        return QuoteItem(
            id=row["id"],
            quote_id=row["quote_id"],
            item_id=row["item_id"],
            quantity=int(row["quantity"]),
            unit_price_snapshot=float(row["unit_price_snapshot"]),
            created_at=parse_datetime(row["created_at"]),
            item_name=row["item_name"],
            item_price=float(row["item_price"]) if row["item_price"] is not None else None,
            item_is_serialized=bool(row["item_is_serialized"]),
        )
