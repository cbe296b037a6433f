"""Fixtures for service tests."""

from unittest.mock import AsyncMock

import pytest

from src.core.interfaces import IInventoryStore, IQuoteStore
from src.core.services.availability import AvailabilityService


@pytest.fixture
def mock_inventory_store() -> AsyncMock:
    """Inventory store with nothing in it."""
    store = AsyncMock(spec=IInventoryStore)
    store.get_item.return_value = None
    store.list_units.return_value = []
    store.get_stock.return_value = None
    return store


@pytest.fixture
def mock_quote_store() -> AsyncMock:
    """Quote store with no reservations."""
    store = AsyncMock(spec=IQuoteStore)
    store.sum_reserved_quantity.return_value = 0
    return store


@pytest.fixture
def availability_service(mock_inventory_store, mock_quote_store) -> AvailabilityService:
    return AvailabilityService(
        inventory_store=mock_inventory_store,
        quote_store=mock_quote_store,
    )
