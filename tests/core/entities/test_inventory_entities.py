"""Unit tests for inventory entities."""

import pytest
from pydantic import ValidationError

from src.core.entities.inventory import (
    BulkTracking,
    InventoryGroup,
    InventoryItem,
    InventoryStock,
    InventoryUnit,
    SerializedTracking,
    UnitStatus,
)


class TestUnitStatus:
    """Tests for UnitStatus enum."""

    def test_values(self):
        assert UnitStatus.AVAILABLE.value == "available"
        assert UnitStatus.CHECKED_OUT.value == "checked_out"
        assert UnitStatus.MAINTENANCE.value == "maintenance"

    def test_from_string(self):
        assert UnitStatus("checked_out") is UnitStatus.CHECKED_OUT

    def test_unknown_status_rejected(self):
        with pytest.raises(ValueError):
            UnitStatus("lost")


class TestInventoryItem:
    """Tests for InventoryItem entity."""

    def test_defaults(self):
        item = InventoryItem(name="Table")
        assert item.id is None
        assert item.price == 0.0
        assert item.category == "General"
        assert item.group_id is None
        assert item.is_serialized is False
        assert item.active is True
        assert item.display_order == 0

    def test_timestamps_are_timezone_aware(self):
        item = InventoryItem(name="Table")
        assert item.created_at.tzinfo is not None
        assert item.updated_at.tzinfo is not None


class TestInventoryGroup:
    """Tests for InventoryGroup entity."""

    def test_defaults(self):
        group = InventoryGroup(name="Lighting")
        assert group.id is None
        assert group.display_order == 0


class TestInventoryUnit:
    """Tests for InventoryUnit entity."""

    def test_default_status_available(self):
        unit = InventoryUnit(item_id="item-1")
        assert unit.status == UnitStatus.AVAILABLE
        assert unit.serial_number is None

    def test_status_from_string(self):
        unit = InventoryUnit(item_id="item-1", status="maintenance")
        assert unit.status == UnitStatus.MAINTENANCE


class TestInventoryStock:
    """Tests for InventoryStock entity."""

    def test_available_quantity(self):
        stock = InventoryStock(item_id="i", total_quantity=50, out_of_service_quantity=5)
        assert stock.available_quantity == 45

    def test_all_out_of_service(self):
        stock = InventoryStock(item_id="i", total_quantity=7, out_of_service_quantity=7)
        assert stock.available_quantity == 0

    def test_empty_stock(self):
        stock = InventoryStock(item_id="i")
        assert stock.total_quantity == 0
        assert stock.out_of_service_quantity == 0
        assert stock.available_quantity == 0

    def test_out_of_service_above_total_rejected(self):
        with pytest.raises(ValidationError, match="cannot exceed"):
            InventoryStock(item_id="i", total_quantity=3, out_of_service_quantity=4)

    def test_negative_total_rejected(self):
        with pytest.raises(ValidationError):
            InventoryStock(item_id="i", total_quantity=-1)

    def test_negative_out_of_service_rejected(self):
        with pytest.raises(ValidationError):
            InventoryStock(item_id="i", total_quantity=3, out_of_service_quantity=-1)


class TestTracking:
    """Tests for the tracking variants."""

    def test_serialized_defaults_to_no_units(self):
        assert SerializedTracking().units == []

    def test_bulk_defaults_to_no_stock(self):
        assert BulkTracking().stock is None

    def test_variants_are_immutable(self):
        tracking = BulkTracking()
        with pytest.raises(AttributeError):
            tracking.stock = InventoryStock(item_id="i")  # type: ignore[misc]
