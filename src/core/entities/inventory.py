"""Inventory domain entities."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, Field, model_validator


class UnitStatus(str, Enum):
    """Lifecycle status of a single serialized unit."""

    AVAILABLE = "available"
    CHECKED_OUT = "checked_out"
    MAINTENANCE = "maintenance"


class InventoryGroup(BaseModel):
    """A named, reorderable bucket of inventory items."""

    id: str | None = None
    name: str
    display_order: int = 0
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class InventoryItem(BaseModel):
    """
    A rentable item.

    `is_serialized` selects the tracking mode: serialized items are counted
    through their units, bulk items through a single stock record.
    """

    id: str | None = None
    name: str
    price: float = 0.0
    category: str = "General"
    group_id: str | None = None
    is_serialized: bool = False
    active: bool = True
    display_order: int = 0
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class InventoryUnit(BaseModel):
    """One physical unit of a serialized item."""

    id: str | None = None
    item_id: str
    serial_number: str | None = None
    status: UnitStatus = UnitStatus.AVAILABLE
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))


class InventoryStock(BaseModel):
    """Aggregate quantity counters of a bulk item."""

    item_id: str
    total_quantity: int = Field(default=0, ge=0)
    out_of_service_quantity: int = Field(default=0, ge=0)
    updated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @model_validator(mode="after")
    def check_out_of_service(self) -> "InventoryStock":
        if self.out_of_service_quantity > self.total_quantity:
            raise ValueError(
                "out_of_service_quantity cannot exceed total_quantity"
            )
        return self

    @property
    def available_quantity(self) -> int:
        return self.total_quantity - self.out_of_service_quantity


@dataclass(frozen=True)
class SerializedTracking:
    """Tracking data of a serialized item: its units."""

    units: list[InventoryUnit] = field(default_factory=list)


@dataclass(frozen=True)
class BulkTracking:
    """Tracking data of a bulk item: its stock record, if one exists."""

    stock: InventoryStock | None = None


Tracking = SerializedTracking | BulkTracking
