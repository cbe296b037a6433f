"""Core domain entities."""

from src.core.entities.availability import (
    AvailabilityBreakdown,
    FetchFailed,
    FetchResult,
    Found,
    NotFound,
    QuoteRiskLine,
    RiskLevel,
)
from src.core.entities.inventory import (
    BulkTracking,
    InventoryGroup,
    InventoryItem,
    InventoryStock,
    InventoryUnit,
    SerializedTracking,
    Tracking,
    UnitStatus,
)
from src.core.entities.quote import (
    Quote,
    QuoteItem,
    QuoteStatus,
    QuoteWithItems,
)

__all__ = [
    # Inventory entities
    "InventoryGroup",
    "InventoryItem",
    "InventoryUnit",
    "InventoryStock",
    "UnitStatus",
    "SerializedTracking",
    "BulkTracking",
    "Tracking",
    # Quote entities
    "Quote",
    "QuoteItem",
    "QuoteStatus",
    "QuoteWithItems",
    # Availability entities
    "AvailabilityBreakdown",
    "RiskLevel",
    "QuoteRiskLine",
    "Found",
    "NotFound",
    "FetchFailed",
    "FetchResult",
]
