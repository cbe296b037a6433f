"""Abstract interface for quote storage."""

from abc import ABC, abstractmethod

from src.core.entities.quote import Quote, QuoteItem, QuoteWithItems


class IQuoteStore(ABC):
    """Interface for quote and quote line persistence."""

    @abstractmethod
    async def create_quote(self, quote: Quote) -> Quote:
        """Create a new quote."""
        pass

    @abstractmethod
    async def get_quote(self, quote_id: str) -> Quote | None:
        """Get quote by ID."""
        pass

    @abstractmethod
    async def get_quote_with_items(self, quote_id: str) -> QuoteWithItems | None:
        """Get quote with its lines (joined with item details)."""
        pass

    @abstractmethod
    async def list_quotes(self, limit: int = 100, offset: int = 0) -> list[Quote]:
        """List quotes, newest first."""
        pass

    @abstractmethod
    async def count_quotes(self) -> int:
        """Count all quotes."""
        pass

    @abstractmethod
    async def update_quote(self, quote: Quote) -> Quote:
        """Update quote name, dates and status."""
        pass

    @abstractmethod
    async def delete_quote(self, quote_id: str) -> bool:
        """Delete a quote and its lines."""
        pass

    @abstractmethod
    async def add_item(self, item: QuoteItem) -> QuoteItem:
        """Add a line to a quote."""
        pass

    @abstractmethod
    async def get_item(self, quote_item_id: str) -> QuoteItem | None:
        """Get a quote line by ID."""
        pass

    @abstractmethod
    async def find_item(self, quote_id: str, item_id: str) -> QuoteItem | None:
        """Get the line of a quote that references an inventory item."""
        pass

    @abstractmethod
    async def update_item_quantity(
        self, quote_item_id: str, quantity: int
    ) -> QuoteItem | None:
        """Set the quantity of a quote line."""
        pass

    @abstractmethod
    async def delete_item(self, quote_item_id: str) -> bool:
        """Delete a quote line."""
        pass

    @abstractmethod
    async def sum_reserved_quantity(self, item_id: str) -> int:
        """Sum quantity over all quote lines for an item, across all quotes."""
        pass
