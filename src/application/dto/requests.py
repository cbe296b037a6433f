"""Request DTOs for API endpoints.

Pydantic v2 models for API request validation.
These are the ONLY contracts between the API layer and use cases.
"""

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from src.core.entities.inventory import UnitStatus
from src.core.entities.quote import QuoteStatus

# --- Inventory groups ---


class CreateGroupRequest(BaseModel):
    """Request to create an inventory group."""

    name: str = Field(..., min_length=1, description="Group name")


class UpdateGroupRequest(BaseModel):
    """Request to rename an inventory group."""

    name: str = Field(..., min_length=1, description="New group name")


class ReorderGroupsRequest(BaseModel):
    """New display order for groups, as produced by drag-and-drop."""

    group_orders: dict[str, int] = Field(
        ...,
        description=(
            "Mapping of group ID to its new display_order. Groups list in ascending "
            "order; new groups are appended at MAX+1, so orders start at 1."
        ),
    )


# --- Inventory items ---


class CreateItemRequest(BaseModel):
    """Request to create an inventory item."""

    name: str = Field(..., min_length=1, description="Item name")
    group_id: str | None = Field(default=None, description="Owning group ID")
    is_serialized: bool = Field(
        default=False,
        description="Track as individual units (true) or bulk quantity (false)",
    )
    price: float = Field(default=0.0, ge=0, description="Unit rental price")
    category: str = Field(default="General", description="Item category")


class UpdateItemRequest(BaseModel):
    """Partial update of an inventory item. Tracking mode cannot change."""

    name: str | None = Field(default=None, min_length=1)
    price: float | None = Field(default=None, ge=0)
    category: str | None = None
    group_id: str | None = None
    active: bool | None = None


class MoveItemRequest(BaseModel):
    """Move an item one position within its group."""

    direction: Literal["up", "down"]


# --- Units and stock ---


class AddUnitRequest(BaseModel):
    """Request to add a unit to a serialized item."""

    serial_number: str | None = Field(default=None, description="Serial number")
    status: UnitStatus = Field(default=UnitStatus.AVAILABLE)


class UpdateUnitStatusRequest(BaseModel):
    """Request to change a unit's status."""

    status: UnitStatus


class UpdateStockRequest(BaseModel):
    """Request to set the stock counters of a bulk item."""

    total_quantity: int = Field(..., ge=0, description="Total quantity owned")
    out_of_service_quantity: int = Field(
        default=0, ge=0, description="Quantity that cannot be rented out"
    )


# --- Quotes ---


class CreateQuoteRequest(BaseModel):
    """Request to create a quote."""

    name: str = Field(..., min_length=1, description="Quote / event name")
    start_date: date
    end_date: date

    @model_validator(mode="after")
    def check_dates(self) -> "CreateQuoteRequest":
        if self.end_date < self.start_date:
            raise ValueError("end_date cannot be before start_date")
        return self


class UpdateQuoteRequest(BaseModel):
    """Partial update of a quote."""

    name: str | None = Field(default=None, min_length=1)
    start_date: date | None = None
    end_date: date | None = None
    status: QuoteStatus | None = None


class AddQuoteItemRequest(BaseModel):
    """Request to add an inventory item to a quote."""

    item_id: str = Field(..., description="Inventory item ID")
    quantity: int = Field(default=1, ge=1, description="Requested quantity")


class UpdateQuoteItemRequest(BaseModel):
    """Request to change the quantity of a quote line."""

    quantity: int = Field(..., ge=1, description="Requested quantity")
