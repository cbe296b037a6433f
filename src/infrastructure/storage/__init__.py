"""Storage infrastructure implementations."""

from src.infrastructure.storage.sqlite import (
    SQLiteInventoryStore,
    SQLiteQuoteStore,
    close_pool,
    get_connection,
    get_inventory_store,
    get_pool,
    get_quote_store,
    get_transaction,
)

__all__ = [
    # SQLite stores
    "SQLiteInventoryStore",
    "SQLiteQuoteStore",
    "get_inventory_store",
    "get_quote_store",
    # Connection pool
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
]
