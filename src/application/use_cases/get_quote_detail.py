"""
Get Quote Detail Use Case.

Evaluates quote lines against live availability.
"""

from dataclasses import dataclass, field

from src.application.dto.responses import (
    AvailabilityBreakdownResponse,
    QuoteDetailResponse,
    QuoteLineDetailResponse,
    QuoteRiskResponse,
)
from src.config import get_logger
from src.core.entities.availability import (
    AvailabilityBreakdown,
    QuoteRiskLine,
    RiskLevel,
)
from src.core.entities.quote import QuoteItem, QuoteWithItems
from src.core.exceptions import QuoteNotFoundError
from src.core.interfaces.quote_store import IQuoteStore
from src.core.services.availability import (
    AvailabilityService,
    calculate_buffer_quantity,
    calculate_quote_risk,
    classify_line_risk,
)

logger = get_logger(__name__)


def breakdown_to_response(breakdown: AvailabilityBreakdown) -> AvailabilityBreakdownResponse:
    """Convert breakdown to response DTO."""
    return AvailabilityBreakdownResponse(**breakdown.model_dump())


@dataclass
class QuoteLineDetail:
    """A quote line with the availability it was classified against."""

    item: QuoteItem
    breakdown: AvailabilityBreakdown
    buffer: int
    risk: RiskLevel


@dataclass
class QuoteDetailResult:
    """Result of evaluating a quote."""

    quote: QuoteWithItems
    risk: RiskLevel
    lines: list[QuoteLineDetail] = field(default_factory=list)

    @property
    def total(self) -> float:
        return self.quote.total


class GetQuoteDetailUseCase:
    """
    Load a quote and classify its fulfilment risk.

    One breakdown is resolved per distinct item, concurrently. Lines whose
    item could not be resolved are shown with a zero breakdown and count
    as red.
    """

    def __init__(
        self,
        quote_store: IQuoteStore | None = None,
        availability_service: AvailabilityService | None = None,
    ):
        self._quote_store = quote_store
        self._availability_service = availability_service

    async def _get_quote_store(self) -> IQuoteStore:
        if self._quote_store is None:
            from src.infrastructure.storage.sqlite import get_quote_store

            self._quote_store = await get_quote_store()
        return self._quote_store

    async def _get_availability_service(self) -> AvailabilityService:
        if self._availability_service is None:
            from src.application.services import get_availability_service

            self._availability_service = await get_availability_service()
        return self._availability_service

    async def execute(self, quote_id: str) -> QuoteDetailResult:
        """Execute quote detail use case."""
        quote_store = await self._get_quote_store()
        service = await self._get_availability_service()

        quote = await quote_store.get_quote_with_items(quote_id)
        if quote is None:
            raise QuoteNotFoundError(quote_id)

        breakdowns = await service.get_breakdowns(line.item_id for line in quote.items)

        lines = []
        for line in quote.items:
            breakdown = breakdowns.get(line.item_id)
            shown = breakdown or AvailabilityBreakdown.zero()
            lines.append(
                QuoteLineDetail(
                    item=line,
                    breakdown=shown,
                    buffer=calculate_buffer_quantity(
                        line.item_is_serialized, shown.total, line.quantity
                    ),
                    risk=classify_line_risk(
                        line.quantity, line.item_is_serialized, breakdown
                    ),
                )
            )

        risk = calculate_quote_risk(
            (
                QuoteRiskLine(
                    item_id=line.item_id,
                    quantity=line.quantity,
                    is_serialized=line.item_is_serialized,
                )
                for line in quote.items
            ),
            breakdowns,
        )

        logger.info(
            "quote_risk_evaluated",
            quote_id=quote_id,
            lines=len(lines),
            risk=risk.value,
        )
        return QuoteDetailResult(quote=quote, risk=risk, lines=lines)

    def to_response(self, result: QuoteDetailResult) -> QuoteDetailResponse:
        """Convert result to API response."""
        quote = result.quote
        return QuoteDetailResponse(
            id=quote.id,  # type: ignore[arg-type]
            name=quote.name,
            start_date=quote.start_date,
            end_date=quote.end_date,
            status=quote.status.value,
            created_at=quote.created_at,
            items=[
                QuoteLineDetailResponse(
                    id=line.item.id,  # type: ignore[arg-type]
                    quote_id=line.item.quote_id,
                    item_id=line.item.item_id,
                    quantity=line.item.quantity,
                    unit_price_snapshot=line.item.unit_price_snapshot,
                    line_total=line.item.line_total,
                    item_name=line.item.item_name,
                    item_price=line.item.item_price,
                    item_is_serialized=line.item.item_is_serialized,
                    breakdown=breakdown_to_response(line.breakdown),
                    buffer=line.buffer,
                    risk=line.risk.value,
                )
                for line in result.lines
            ],
            risk=result.risk.value,
            total=result.total,
        )

    def to_risk_response(self, result: QuoteDetailResult) -> QuoteRiskResponse:
        """Convert result to the risk-only API response."""
        return QuoteRiskResponse(
            quote_id=result.quote.id,  # type: ignore[arg-type]
            risk=result.risk.value,
            line_count=len(result.lines),
        )
