"""Pytest configuration and fixtures."""

import os
import tempfile
from collections.abc import AsyncGenerator
from datetime import date

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Keep the default data directory out of the working tree
os.environ.setdefault("STORAGE_DATA_DIR", tempfile.mkdtemp(prefix="rentquote-test-"))

from src.api.main import app  # noqa: E402
from src.core.entities import (  # noqa: E402
    InventoryItem,
    InventoryStock,
    InventoryUnit,
    Quote,
    QuoteItem,
    UnitStatus,
)


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def serialized_item() -> InventoryItem:
    """Serialized item (counted through units)."""
    return InventoryItem(
        id="item-projector",
        name="Projector",
        price=120.0,
        category="AV",
        is_serialized=True,
    )


@pytest.fixture
def bulk_item() -> InventoryItem:
    """Bulk item (counted through a stock record)."""
    return InventoryItem(
        id="item-chair",
        name="Folding Chair",
        price=2.5,
        category="Furniture",
        is_serialized=False,
    )


@pytest.fixture
def make_units():
    """Build units for an item from a list of statuses."""

    def _make(item_id: str, *statuses: UnitStatus) -> list[InventoryUnit]:
        return [
            InventoryUnit(id=f"{item_id}-u{i}", item_id=item_id, status=s)
            for i, s in enumerate(statuses)
        ]

    return _make


@pytest.fixture
def chair_stock(bulk_item: InventoryItem) -> InventoryStock:
    """Stock of 100 chairs, 10 of them broken."""
    return InventoryStock(
        item_id=bulk_item.id,
        total_quantity=100,
        out_of_service_quantity=10,
    )


@pytest.fixture
def sample_quote() -> Quote:
    """A draft quote for a weekend event."""
    return Quote(
        id="quote-wedding",
        name="Garden Wedding",
        start_date=date(2025, 6, 14),
        end_date=date(2025, 6, 15),
    )


@pytest.fixture
def make_line():
    """Build a quote line."""

    def _make(
        item: InventoryItem, quantity: int, quote_id: str = "quote-wedding", **kwargs
    ) -> QuoteItem:
        return QuoteItem(
            id=kwargs.pop("id", f"line-{item.id}"),
            quote_id=quote_id,
            item_id=item.id,
            quantity=quantity,
            unit_price_snapshot=kwargs.pop("unit_price_snapshot", item.price),
            item_name=item.name,
            item_price=item.price,
            item_is_serialized=item.is_serialized,
            **kwargs,
        )

    return _make
