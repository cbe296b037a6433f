"""Core interfaces (ports) for dependency injection."""

from src.core.interfaces.inventory_store import IInventoryStore
from src.core.interfaces.quote_store import IQuoteStore

__all__ = [
    "IInventoryStore",
    "IQuoteStore",
]
