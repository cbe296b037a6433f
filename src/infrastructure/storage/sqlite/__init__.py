"""SQLite storage implementations."""

from src.infrastructure.storage.sqlite.connection import (
    ConnectionPool,
    close_pool,
    get_connection,
    get_pool,
    get_transaction,
)
from src.infrastructure.storage.sqlite.inventory_store import SQLiteInventoryStore
from src.infrastructure.storage.sqlite.quote_store import SQLiteQuoteStore

# Aliases used by the app lifespan and health checks
get_connection_pool = get_pool
close_connection_pool = close_pool

# Singleton instances
_inventory_store: SQLiteInventoryStore | None = None
_quote_store: SQLiteQuoteStore | None = None


async def get_inventory_store() -> SQLiteInventoryStore:
    """Get singleton inventory store instance."""
    global _inventory_store
    if _inventory_store is None:
        _inventory_store = SQLiteInventoryStore()
    return _inventory_store


async def get_quote_store() -> SQLiteQuoteStore:
    """Get singleton quote store instance."""
    global _quote_store
    if _quote_store is None:
        _quote_store = SQLiteQuoteStore()
    return _quote_store


__all__ = [
    # Connection
    "ConnectionPool",
    "get_pool",
    "close_pool",
    "get_connection",
    "get_transaction",
    "get_connection_pool",
    "close_connection_pool",
    # Store classes
    "SQLiteInventoryStore",
    "SQLiteQuoteStore",
    # Factory functions
    "get_inventory_store",
    "get_quote_store",
]
