"""
Availability and risk entities.

Breakdowns and risk levels are derived values: they are recomputed from
current inventory and quote data on every request and never persisted.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict

T = TypeVar("T")


class RiskLevel(str, Enum):
    """Fulfilment risk, ordered green < yellow < red."""

    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]


_SEVERITY = {RiskLevel.GREEN: 0, RiskLevel.YELLOW: 1, RiskLevel.RED: 2}


class AvailabilityBreakdown(BaseModel):
    """Availability snapshot of one item."""

    model_config = ConfigDict(frozen=True)

    available: int = 0
    reserved: int = 0
    in_transit: int = 0
    out_of_service: int = 0
    total: int = 0

    @classmethod
    def zero(cls) -> "AvailabilityBreakdown":
        return cls()


@dataclass(frozen=True)
class QuoteRiskLine:
    """The part of a quote line that risk classification looks at."""

    item_id: str
    quantity: int
    is_serialized: bool


# Fetch results


@dataclass(frozen=True)
class Found(Generic[T]):
    value: T


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class FetchFailed:
    error: str


FetchResult = Found[T] | NotFound | FetchFailed
