"""
Availability & Risk Service.

Derives per-item availability breakdowns from the two tracking models
(serialized units, bulk stock) and folds per-line buffer checks into a
single quote-level risk level.

The computation functions are pure. `AvailabilityService` performs the
lookups, reports them as fetch results, and applies the zero-value
degradation for display callers.
"""

from __future__ import annotations

import asyncio
import math
from collections.abc import Iterable, Mapping

from src.config import get_logger
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
    SerializedTracking,
    Tracking,
    UnitStatus,
)
from src.core.interfaces.inventory_store import IInventoryStore
from src.core.interfaces.quote_store import IQuoteStore

logger = get_logger(__name__)

# Serialized pools smaller than this keep one spare unit
SMALL_POOL_THRESHOLD = 5

# Bulk buffer, in percent of the requested quantity
LARGE_ORDER_THRESHOLD = 10
SMALL_ORDER_BUFFER_PERCENT = 20
LARGE_ORDER_BUFFER_PERCENT = 10


def compute_breakdown(tracking: Tracking, reserved: int = 0) -> AvailabilityBreakdown:
    """
    Compute the availability breakdown of one item.

    Args:
        tracking: Units of a serialized item or stock record of a bulk item.
        reserved: Quantity committed across all quote lines for the item.

    Returns:
        Breakdown with available, reserved, in-transit, out-of-service
        and total counts.
    """
    if isinstance(tracking, SerializedTracking):
        statuses = [unit.status for unit in tracking.units]
        return AvailabilityBreakdown(
            available=statuses.count(UnitStatus.AVAILABLE),
            reserved=reserved,
            in_transit=statuses.count(UnitStatus.CHECKED_OUT),
            out_of_service=statuses.count(UnitStatus.MAINTENANCE),
            total=len(statuses),
        )

    if isinstance(tracking, BulkTracking):
        stock = tracking.stock
        total = stock.total_quantity if stock else 0
        out_of_service = stock.out_of_service_quantity if stock else 0
        return AvailabilityBreakdown(
            available=total - out_of_service,
            reserved=reserved,
            in_transit=0,
            out_of_service=out_of_service,
            total=total,
        )

    raise TypeError(f"Unknown tracking variant: {type(tracking).__name__}")


def calculate_buffer_quantity(
    is_serialized: bool, total: int, requested_quantity: int
) -> int:
    """
    Safety margin added to a requested quantity before flagging risk.

    Serialized items keep one spare unit when the pool is small. Bulk items
    keep a percentage of the request, rounded up.
    """
    if is_serialized:
        return 1 if total < SMALL_POOL_THRESHOLD else 0

    percent = (
        SMALL_ORDER_BUFFER_PERCENT
        if requested_quantity < LARGE_ORDER_THRESHOLD
        else LARGE_ORDER_BUFFER_PERCENT
    )
    return max(0, math.ceil(requested_quantity * percent / 100))


def classify_line_risk(
    requested_quantity: int,
    is_serialized: bool,
    breakdown: AvailabilityBreakdown | None,
) -> RiskLevel:
    """Risk of a single quote line. An unresolved breakdown is red."""
    if breakdown is None:
        return RiskLevel.RED

    if breakdown.available < requested_quantity:
        return RiskLevel.RED

    buffer = calculate_buffer_quantity(
        is_serialized, breakdown.total, requested_quantity
    )
    if breakdown.available < requested_quantity + buffer:
        return RiskLevel.YELLOW

    return RiskLevel.GREEN


def calculate_quote_risk(
    lines: Iterable[QuoteRiskLine],
    breakdowns_by_item_id: Mapping[str, AvailabilityBreakdown],
) -> RiskLevel:
    """
    Quote-level risk: the most severe line risk, green for no lines.

    Items missing from `breakdowns_by_item_id` count as red.
    """
    overall = RiskLevel.GREEN
    for line in lines:
        risk = classify_line_risk(
            line.quantity,
            line.is_serialized,
            breakdowns_by_item_id.get(line.item_id),
        )
        if risk is RiskLevel.RED:
            return RiskLevel.RED
        if risk.severity > overall.severity:
            overall = risk
    return overall


class AvailabilityService:
    """
    Resolves availability breakdowns from the inventory and quote stores.

    Each lookup is an independent read; a failure for one item never
    affects another.
    """

    def __init__(
        self,
        inventory_store: IInventoryStore,
        quote_store: IQuoteStore,
    ) -> None:
        self._inventory_store = inventory_store
        self._quote_store = quote_store

    async def fetch_tracking(self, item_id: str) -> FetchResult[Tracking]:
        """Look up the item and load the tracking data of its mode."""
        try:
            item = await self._inventory_store.get_item(item_id)
            if item is None:
                return NotFound()

            if item.is_serialized:
                units = await self._inventory_store.list_units(item_id)
                return Found(SerializedTracking(units=units))

            stock = await self._inventory_store.get_stock(item_id)
            return Found(BulkTracking(stock=stock))

        except Exception as e:
            logger.warning("tracking_lookup_failed", item_id=item_id, error=str(e))
            return FetchFailed(str(e))

    async def fetch_reserved(self, item_id: str) -> FetchResult[int]:
        """Total quantity of the item across all quote lines."""
        try:
            return Found(await self._quote_store.sum_reserved_quantity(item_id))
        except Exception as e:
            logger.warning("reserved_lookup_failed", item_id=item_id, error=str(e))
            return FetchFailed(str(e))

    async def resolve_breakdown(
        self, item_id: str
    ) -> FetchResult[AvailabilityBreakdown]:
        """Breakdown of one item, or why it could not be computed."""
        tracking, reserved = await asyncio.gather(
            self.fetch_tracking(item_id),
            self.fetch_reserved(item_id),
        )

        if not isinstance(tracking, Found):
            return tracking
        if not isinstance(reserved, Found):
            return reserved

        return Found(compute_breakdown(tracking.value, reserved.value))

    async def get_item_availability_breakdown(
        self, item_id: str
    ) -> AvailabilityBreakdown:
        """Breakdown of one item; all zeros when it cannot be resolved."""
        result = await self.resolve_breakdown(item_id)
        if isinstance(result, Found):
            return result.value

        if isinstance(result, FetchFailed):
            logger.warning(
                "availability_degraded_to_zero",
                item_id=item_id,
                error=result.error,
            )
        return AvailabilityBreakdown.zero()

    async def get_breakdowns(
        self, item_ids: Iterable[str]
    ) -> dict[str, AvailabilityBreakdown]:
        """
        Resolve breakdowns for distinct items concurrently.

        Only resolved items are present in the result, so that callers
        computing risk see unresolved items as missing.
        """
        unique_ids = list(dict.fromkeys(item_ids))
        results = await asyncio.gather(
            *(self.resolve_breakdown(item_id) for item_id in unique_ids)
        )

        breakdowns: dict[str, AvailabilityBreakdown] = {}
        for item_id, result in zip(unique_ids, results, strict=True):
            if isinstance(result, Found):
                breakdowns[item_id] = result.value
            else:
                logger.info(
                    "availability_unresolved",
                    item_id=item_id,
                    reason=type(result).__name__,
                )
        return breakdowns
