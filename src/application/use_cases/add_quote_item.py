"""
Add Quote Item Use Case.

Adds inventory items to quotes, merging repeated items into one line.
"""

from dataclasses import dataclass

from src.application.dto.requests import AddQuoteItemRequest
from src.application.dto.responses import QuoteItemResponse
from src.config import get_logger
from src.core.entities.quote import QuoteItem
from src.core.exceptions import ItemNotFoundError, QuoteNotFoundError
from src.core.interfaces.inventory_store import IInventoryStore
from src.core.interfaces.quote_store import IQuoteStore

logger = get_logger(__name__)


def quote_item_to_response(item: QuoteItem) -> QuoteItemResponse:
    """Convert quote line entity to response DTO."""
    return QuoteItemResponse(
        id=item.id,  # type: ignore[arg-type]
        quote_id=item.quote_id,
        item_id=item.item_id,
        quantity=item.quantity,
        unit_price_snapshot=item.unit_price_snapshot,
        line_total=item.line_total,
        item_name=item.item_name,
        item_price=item.item_price,
        item_is_serialized=item.item_is_serialized,
    )


@dataclass
class AddQuoteItemResult:
    """Result of adding an item to a quote."""

    quote_item: QuoteItem
    merged: bool = False  # True if an existing line was increased


class AddQuoteItemUseCase:
    """
    Add an inventory item to a quote.

    The line keeps the item's price at the time it is added. Adding an item
    that is already on the quote increases that line's quantity instead of
    creating a second line; the original snapshot is kept.
    """

    def __init__(
        self,
        quote_store: IQuoteStore | None = None,
        inventory_store: IInventoryStore | None = None,
    ):
        self._quote_store = quote_store
        self._inventory_store = inventory_store

    async def _get_quote_store(self) -> IQuoteStore:
        if self._quote_store is None:
            from src.infrastructure.storage.sqlite import get_quote_store

            self._quote_store = await get_quote_store()
        return self._quote_store

    async def _get_inventory_store(self) -> IInventoryStore:
        if self._inventory_store is None:
            from src.infrastructure.storage.sqlite import get_inventory_store

            self._inventory_store = await get_inventory_store()
        return self._inventory_store

    async def execute(
        self, quote_id: str, request: AddQuoteItemRequest
    ) -> AddQuoteItemResult:
        """Execute add quote item use case."""
        logger.info(
            "add_quote_item_started",
            quote_id=quote_id,
            item_id=request.item_id,
            quantity=request.quantity,
        )

        quote_store = await self._get_quote_store()
        inv_store = await self._get_inventory_store()

        # 1. Both sides must exist
        quote = await quote_store.get_quote(quote_id)
        if quote is None:
            raise QuoteNotFoundError(quote_id)

        item = await inv_store.get_item(request.item_id)
        if item is None:
            raise ItemNotFoundError(request.item_id)

        # 2. Merge into an existing line for the same item
        existing = await quote_store.find_item(quote_id, request.item_id)
        if existing is not None:
            updated = await quote_store.update_item_quantity(
                existing.id,  # type: ignore[arg-type]
                existing.quantity + request.quantity,
            )
            if updated is not None:
                logger.info(
                    "add_quote_item_merged",
                    quote_item_id=updated.id,
                    quantity=updated.quantity,
                )
                return AddQuoteItemResult(quote_item=updated, merged=True)

        # 3. New line with the current price as snapshot
        line = await quote_store.add_item(
            QuoteItem(
                quote_id=quote_id,
                item_id=request.item_id,
                quantity=request.quantity,
                unit_price_snapshot=item.price,
                item_name=item.name,
                item_price=item.price,
                item_is_serialized=item.is_serialized,
            )
        )

        logger.info("add_quote_item_complete", quote_item_id=line.id)
        return AddQuoteItemResult(quote_item=line)

    def to_response(self, result: AddQuoteItemResult) -> QuoteItemResponse:
        """Convert result to API response."""
        return quote_item_to_response(result.quote_item)
