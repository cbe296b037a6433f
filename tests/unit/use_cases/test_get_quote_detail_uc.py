"""Unit tests for GetQuoteDetailUseCase."""

from unittest.mock import AsyncMock

import pytest

from src.application.use_cases.get_quote_detail import GetQuoteDetailUseCase
from src.core.entities.availability import AvailabilityBreakdown, RiskLevel
from src.core.entities.quote import QuoteWithItems
from src.core.exceptions import QuoteNotFoundError
from src.core.services.availability import AvailabilityService


def _breakdown(available: int, total: int) -> AvailabilityBreakdown:
    return AvailabilityBreakdown(
        available=available,
        reserved=0,
        in_transit=0,
        out_of_service=total - available,
        total=total,
    )


@pytest.fixture
def mock_quote_store():
    return AsyncMock()


@pytest.fixture
def mock_availability():
    service = AsyncMock(spec=AvailabilityService)
    service.get_breakdowns = AsyncMock(return_value={})
    return service


@pytest.fixture
def use_case(mock_quote_store, mock_availability):
    return GetQuoteDetailUseCase(
        quote_store=mock_quote_store,
        availability_service=mock_availability,
    )


def _with_items(quote, *lines) -> QuoteWithItems:
    return QuoteWithItems(**quote.model_dump(), items=list(lines))


class TestGetQuoteDetail:
    """Tests for GetQuoteDetailUseCase."""

    async def test_empty_quote_is_green(self, use_case, mock_quote_store, sample_quote):
        mock_quote_store.get_quote_with_items.return_value = _with_items(sample_quote)

        result = await use_case.execute(sample_quote.id)

        assert result.risk == RiskLevel.GREEN
        assert result.lines == []
        assert result.total == 0

    async def test_lines_classified(
        self,
        use_case,
        mock_quote_store,
        mock_availability,
        sample_quote,
        serialized_item,
        bulk_item,
        make_line,
    ):
        mock_quote_store.get_quote_with_items.return_value = _with_items(
            sample_quote,
            make_line(serialized_item, 3),
            make_line(bulk_item, 40),
        )
        mock_availability.get_breakdowns.return_value = {
            # 3 of 4 available, small pool keeps one spare
            serialized_item.id: _breakdown(3, 4),
            bulk_item.id: _breakdown(90, 100),
        }

        result = await use_case.execute(sample_quote.id)

        projector, chairs = result.lines
        assert (projector.risk, projector.buffer) == (RiskLevel.YELLOW, 1)
        assert (chairs.risk, chairs.buffer) == (RiskLevel.GREEN, 4)
        assert result.risk == RiskLevel.YELLOW
        assert result.total == pytest.approx(3 * 120.0 + 40 * 2.5)

    async def test_unresolved_item_forces_red(
        self, use_case, mock_quote_store, mock_availability, sample_quote, bulk_item, make_line
    ):
        mock_quote_store.get_quote_with_items.return_value = _with_items(
            sample_quote, make_line(bulk_item, 1)
        )
        mock_availability.get_breakdowns.return_value = {}

        result = await use_case.execute(sample_quote.id)

        line = result.lines[0]
        assert line.risk == RiskLevel.RED
        assert line.breakdown == AvailabilityBreakdown.zero()
        assert result.risk == RiskLevel.RED

    async def test_breakdowns_requested_per_line_item(
        self, use_case, mock_quote_store, mock_availability, sample_quote, bulk_item, make_line
    ):
        mock_quote_store.get_quote_with_items.return_value = _with_items(
            sample_quote, make_line(bulk_item, 2)
        )

        await use_case.execute(sample_quote.id)

        requested = list(mock_availability.get_breakdowns.await_args.args[0])
        assert requested == [bulk_item.id]

    async def test_unknown_quote(self, use_case, mock_quote_store):
        mock_quote_store.get_quote_with_items.return_value = None

        with pytest.raises(QuoteNotFoundError):
            await use_case.execute("quote-x")

    async def test_to_response(
        self, use_case, mock_quote_store, mock_availability, sample_quote, bulk_item, make_line
    ):
        mock_quote_store.get_quote_with_items.return_value = _with_items(
            sample_quote, make_line(bulk_item, 95)
        )
        mock_availability.get_breakdowns.return_value = {bulk_item.id: _breakdown(90, 100)}

        result = await use_case.execute(sample_quote.id)
        response = use_case.to_response(result)

        assert response.id == sample_quote.id
        assert response.risk == "red"
        assert response.items[0].risk == "red"
        assert response.items[0].breakdown.available == 90
        assert response.total == pytest.approx(237.5)

    async def test_to_risk_response(self, use_case, mock_quote_store, sample_quote):
        mock_quote_store.get_quote_with_items.return_value = _with_items(sample_quote)

        response = use_case.to_risk_response(await use_case.execute(sample_quote.id))

        assert response.quote_id == sample_quote.id
        assert response.risk == "green"
        assert response.line_count == 0
