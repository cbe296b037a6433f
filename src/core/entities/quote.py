"""
Quote domain entities.

A quote is a dated proposal; its lines reference inventory items and keep
the unit price that was current when the line was added.
"""

from datetime import UTC, date, datetime
from enum import Enum

from pydantic import BaseModel, Field, model_validator


class QuoteStatus(str, Enum):
    """Quote lifecycle status. Transitions are not constrained."""

    DRAFT = "draft"
    SENT = "sent"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class Quote(BaseModel):
    """A named, dated price proposal."""

    id: str | None = None
    name: str
    start_date: date
    end_date: date
    status: QuoteStatus = QuoteStatus.DRAFT
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @model_validator(mode="after")
    def check_dates(self) -> "Quote":
        if self.end_date < self.start_date:
            raise ValueError("end_date cannot be before start_date")
        return self


class QuoteItem(BaseModel):
    """A quote line: an item, a requested quantity and a price snapshot."""

    id: str | None = None
    quote_id: str
    item_id: str
    quantity: int = Field(default=1, ge=1)
    unit_price_snapshot: float = 0.0
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    # Joined from inventory_items on read
    item_name: str | None = None
    item_price: float | None = None
    item_is_serialized: bool = False

    @property
    def line_total(self) -> float:
        return self.quantity * self.unit_price_snapshot


class QuoteWithItems(Quote):
    """A quote together with its lines, in insertion order."""

    items: list[QuoteItem] = Field(default_factory=list)

    @property
    def total(self) -> float:
        return sum(item.line_total for item in self.items)
