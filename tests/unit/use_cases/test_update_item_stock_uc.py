"""Unit tests for UpdateItemStockUseCase."""

from unittest.mock import AsyncMock

import pytest

from src.application.dto.requests import UpdateStockRequest
from src.application.use_cases.update_item_stock import UpdateItemStockUseCase
from src.core.entities.inventory import InventoryStock
from src.core.exceptions import InvalidStockError, ItemNotFoundError, TrackingModeError


@pytest.fixture
def mock_inventory_store():
    store = AsyncMock()

    async def upsert_stock(stock: InventoryStock) -> InventoryStock:
        return stock

    store.upsert_stock = AsyncMock(side_effect=upsert_stock)
    return store


class TestUpdateItemStock:
    """Tests for UpdateItemStockUseCase."""

    async def test_sets_counters(self, mock_inventory_store, bulk_item):
        mock_inventory_store.get_item.return_value = bulk_item
        uc = UpdateItemStockUseCase(inventory_store=mock_inventory_store)

        stock = await uc.execute(
            bulk_item.id, UpdateStockRequest(total_quantity=80, out_of_service_quantity=5)
        )

        assert stock.total_quantity == 80
        assert stock.out_of_service_quantity == 5
        assert stock.available_quantity == 75

    async def test_all_out_of_service(self, mock_inventory_store, bulk_item):
        mock_inventory_store.get_item.return_value = bulk_item
        uc = UpdateItemStockUseCase(inventory_store=mock_inventory_store)

        stock = await uc.execute(
            bulk_item.id, UpdateStockRequest(total_quantity=4, out_of_service_quantity=4)
        )

        assert stock.available_quantity == 0

    async def test_out_of_service_above_total(self, mock_inventory_store, bulk_item):
        mock_inventory_store.get_item.return_value = bulk_item
        uc = UpdateItemStockUseCase(inventory_store=mock_inventory_store)

        with pytest.raises(InvalidStockError) as exc_info:
            await uc.execute(
                bulk_item.id, UpdateStockRequest(total_quantity=3, out_of_service_quantity=4)
            )

        assert exc_info.value.code == "INVALID_STOCK"
        mock_inventory_store.upsert_stock.assert_not_awaited()

    async def test_serialized_item_rejected(self, mock_inventory_store, serialized_item):
        mock_inventory_store.get_item.return_value = serialized_item
        uc = UpdateItemStockUseCase(inventory_store=mock_inventory_store)

        with pytest.raises(TrackingModeError):
            await uc.execute(serialized_item.id, UpdateStockRequest(total_quantity=1))

        mock_inventory_store.upsert_stock.assert_not_awaited()

    async def test_unknown_item(self, mock_inventory_store):
        mock_inventory_store.get_item.return_value = None
        uc = UpdateItemStockUseCase(inventory_store=mock_inventory_store)

        with pytest.raises(ItemNotFoundError):
            await uc.execute("item-x", UpdateStockRequest(total_quantity=1))

    async def test_to_response(self, mock_inventory_store, bulk_item):
        mock_inventory_store.get_item.return_value = bulk_item
        uc = UpdateItemStockUseCase(inventory_store=mock_inventory_store)

        stock = await uc.execute(
            bulk_item.id, UpdateStockRequest(total_quantity=10, out_of_service_quantity=2)
        )
        response = uc.to_response(stock)

        assert response.item_id == bulk_item.id
        assert response.available_quantity == 8
