"""Unit tests for availability entities."""

import pytest
from pydantic import ValidationError

from src.core.entities.availability import (
    AvailabilityBreakdown,
    FetchFailed,
    Found,
    NotFound,
    RiskLevel,
)


class TestRiskLevel:
    """Tests for RiskLevel ordering."""

    def test_severity_order(self):
        assert RiskLevel.GREEN.severity < RiskLevel.YELLOW.severity < RiskLevel.RED.severity

    def test_string_values(self):
        assert RiskLevel.RED == "red"
        assert RiskLevel("yellow") is RiskLevel.YELLOW


class TestAvailabilityBreakdown:
    """Tests for AvailabilityBreakdown."""

    def test_zero(self):
        zero = AvailabilityBreakdown.zero()
        assert zero.model_dump() == {
            "available": 0,
            "reserved": 0,
            "in_transit": 0,
            "out_of_service": 0,
            "total": 0,
        }

    def test_frozen(self):
        breakdown = AvailabilityBreakdown(available=1, total=1)
        with pytest.raises(ValidationError):
            breakdown.available = 2  # type: ignore[misc]

    def test_equality_by_value(self):
        assert AvailabilityBreakdown(total=3) == AvailabilityBreakdown(total=3)


class TestFetchResult:
    """Tests for fetch result variants."""

    def test_found_carries_value(self):
        assert Found(5).value == 5

    def test_variants_are_distinct(self):
        assert not isinstance(NotFound(), Found)
        assert FetchFailed("boom").error == "boom"
        assert NotFound() == NotFound()
