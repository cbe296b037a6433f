"""Tests for AvailabilityService lookups and degradation."""

from src.core.entities.availability import (
    AvailabilityBreakdown,
    FetchFailed,
    Found,
    NotFound,
)
from src.core.entities.inventory import BulkTracking, SerializedTracking, UnitStatus


class TestFetchTracking:
    """Tests for fetch_tracking()."""

    async def test_unknown_item(self, availability_service):
        assert await availability_service.fetch_tracking("nope") == NotFound()

    async def test_serialized_item_loads_units(
        self, availability_service, mock_inventory_store, serialized_item, make_units
    ):
        units = make_units(serialized_item.id, UnitStatus.AVAILABLE)
        mock_inventory_store.get_item.return_value = serialized_item
        mock_inventory_store.list_units.return_value = units

        result = await availability_service.fetch_tracking(serialized_item.id)

        assert result == Found(SerializedTracking(units=units))
        mock_inventory_store.get_stock.assert_not_called()

    async def test_bulk_item_loads_stock(
        self, availability_service, mock_inventory_store, bulk_item, chair_stock
    ):
        mock_inventory_store.get_item.return_value = bulk_item
        mock_inventory_store.get_stock.return_value = chair_stock

        result = await availability_service.fetch_tracking(bulk_item.id)

        assert result == Found(BulkTracking(stock=chair_stock))
        mock_inventory_store.list_units.assert_not_called()

    async def test_store_failure(self, availability_service, mock_inventory_store):
        mock_inventory_store.get_item.side_effect = RuntimeError("database is locked")

        result = await availability_service.fetch_tracking("x")

        assert isinstance(result, FetchFailed)
        assert "locked" in result.error


class TestGetItemAvailabilityBreakdown:
    """Tests for get_item_availability_breakdown()."""

    async def test_serialized(
        self,
        availability_service,
        mock_inventory_store,
        mock_quote_store,
        serialized_item,
        make_units,
    ):
        mock_inventory_store.get_item.return_value = serialized_item
        mock_inventory_store.list_units.return_value = make_units(
            serialized_item.id,
            UnitStatus.AVAILABLE,
            UnitStatus.AVAILABLE,
            UnitStatus.AVAILABLE,
            UnitStatus.CHECKED_OUT,
            UnitStatus.MAINTENANCE,
        )
        mock_quote_store.sum_reserved_quantity.return_value = 2

        breakdown = await availability_service.get_item_availability_breakdown(
            serialized_item.id
        )

        assert breakdown == AvailabilityBreakdown(
            available=3, reserved=2, in_transit=1, out_of_service=1, total=5
        )

    async def test_bulk(
        self, availability_service, mock_inventory_store, mock_quote_store, bulk_item, chair_stock
    ):
        mock_inventory_store.get_item.return_value = bulk_item
        mock_inventory_store.get_stock.return_value = chair_stock
        mock_quote_store.sum_reserved_quantity.return_value = 150

        breakdown = await availability_service.get_item_availability_breakdown(bulk_item.id)

        # Reservations do not reduce availability
        assert breakdown.available == 90
        assert breakdown.reserved == 150
        assert breakdown.total == 100

    async def test_bulk_without_stock_record(
        self, availability_service, mock_inventory_store, bulk_item
    ):
        mock_inventory_store.get_item.return_value = bulk_item

        breakdown = await availability_service.get_item_availability_breakdown(bulk_item.id)

        assert breakdown == AvailabilityBreakdown.zero()

    async def test_unknown_item_is_zero(self, availability_service):
        breakdown = await availability_service.get_item_availability_breakdown("missing")
        assert breakdown == AvailabilityBreakdown.zero()

    async def test_item_lookup_failure_is_zero(self, availability_service, mock_inventory_store):
        mock_inventory_store.get_item.side_effect = ConnectionError("backend down")

        breakdown = await availability_service.get_item_availability_breakdown("x")

        assert breakdown == AvailabilityBreakdown.zero()

    async def test_reserved_lookup_failure_is_zero(
        self, availability_service, mock_inventory_store, mock_quote_store, bulk_item, chair_stock
    ):
        mock_inventory_store.get_item.return_value = bulk_item
        mock_inventory_store.get_stock.return_value = chair_stock
        mock_quote_store.sum_reserved_quantity.side_effect = RuntimeError("boom")

        breakdown = await availability_service.get_item_availability_breakdown(bulk_item.id)

        assert breakdown == AvailabilityBreakdown.zero()


class TestResolveBreakdown:
    """Tests for resolve_breakdown()."""

    async def test_not_found_passes_through(self, availability_service):
        assert await availability_service.resolve_breakdown("missing") == NotFound()

    async def test_failure_passes_through(self, availability_service, mock_inventory_store):
        mock_inventory_store.get_item.side_effect = RuntimeError("boom")
        result = await availability_service.resolve_breakdown("x")
        assert result == FetchFailed("boom")

    async def test_found(self, availability_service, mock_inventory_store, bulk_item, chair_stock):
        mock_inventory_store.get_item.return_value = bulk_item
        mock_inventory_store.get_stock.return_value = chair_stock

        result = await availability_service.resolve_breakdown(bulk_item.id)

        assert isinstance(result, Found)
        assert result.value.available == 90


class TestGetBreakdowns:
    """Tests for get_breakdowns()."""

    async def test_one_failure_does_not_affect_others(
        self, availability_service, mock_inventory_store, bulk_item, chair_stock
    ):
        async def get_item(item_id):
            if item_id == "broken":
                raise RuntimeError("malformed row")
            return bulk_item

        mock_inventory_store.get_item.side_effect = get_item
        mock_inventory_store.get_stock.return_value = chair_stock

        breakdowns = await availability_service.get_breakdowns([bulk_item.id, "broken"])

        assert set(breakdowns) == {bulk_item.id}
        assert breakdowns[bulk_item.id].available == 90

    async def test_unknown_items_are_absent(self, availability_service):
        assert await availability_service.get_breakdowns(["a", "b"]) == {}

    async def test_duplicate_ids_resolved_once(
        self, availability_service, mock_inventory_store, bulk_item, chair_stock
    ):
        mock_inventory_store.get_item.return_value = bulk_item
        mock_inventory_store.get_stock.return_value = chair_stock

        await availability_service.get_breakdowns([bulk_item.id, bulk_item.id, bulk_item.id])

        assert mock_inventory_store.get_item.await_count == 1

    async def test_empty(self, availability_service):
        assert await availability_service.get_breakdowns([]) == {}
