"""Response DTOs for API endpoints.

Pydantic v2 models for API response serialization.
These are the ONLY contracts between use cases and API layer.
"""

from datetime import date, datetime

from pydantic import BaseModel, Field

# --- Health / errors ---


class ProviderHealthResponse(BaseModel):
    """Dependency health status."""

    name: str
    available: bool
    latency_ms: float | None = None
    pool_size: int | None = None
    idle_connections: int | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str = "1.0.0"
    uptime_seconds: float
    database: ProviderHealthResponse | None = None


class ErrorResponse(BaseModel):
    """Standardized error response DTO.

    Every error response includes:
    - error_code: machine-readable code (e.g. QUOTE_NOT_FOUND)
    - message: human-readable description
    - hint: suggested recovery action
    - path: request path that triggered the error
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error description")
    hint: str | None = Field(default=None, description="Suggested recovery action")
    detail: str | None = Field(default=None, description="Additional details")
    path: str | None = Field(default=None, description="Request path")
    timestamp: datetime = Field(default_factory=datetime.now)


# --- Inventory ---


class InventoryGroupResponse(BaseModel):
    """Inventory group response DTO."""

    id: str
    name: str
    display_order: int


class InventoryItemResponse(BaseModel):
    """Inventory item response DTO."""

    id: str
    name: str
    price: float
    category: str
    group_id: str | None = None
    is_serialized: bool
    active: bool
    display_order: int
    created_at: datetime
    updated_at: datetime


class InventoryUnitResponse(BaseModel):
    """Serialized unit response DTO."""

    id: str
    item_id: str
    serial_number: str | None = None
    status: str


class InventoryStockResponse(BaseModel):
    """Bulk stock response DTO."""

    item_id: str
    total_quantity: int
    out_of_service_quantity: int
    available_quantity: int


class AvailabilityBreakdownResponse(BaseModel):
    """Availability snapshot of one item."""

    available: int
    reserved: int
    in_transit: int
    out_of_service: int
    total: int


class ItemAvailabilityResponse(BaseModel):
    """Availability breakdown of a single item."""

    item_id: str
    breakdown: AvailabilityBreakdownResponse


class OverviewItemResponse(BaseModel):
    """Item row of the inventory overview."""

    id: str
    name: str
    price: float
    is_serialized: bool
    available: int
    total: int
    group_id: str | None = None


class OverviewGroupResponse(BaseModel):
    """Group of the inventory overview with its items."""

    id: str | None = None
    name: str
    items: list[OverviewItemResponse]


class InventoryOverviewResponse(BaseModel):
    """Inventory grouped for display."""

    groups: list[OverviewGroupResponse]


class ReorderGroupsResponse(BaseModel):
    """Result of a group reorder."""

    updated: int


class MoveItemResponse(BaseModel):
    """Result of moving an item within its group."""

    moved: bool
    item: InventoryItemResponse


# --- Quotes ---


class QuoteResponse(BaseModel):
    """Quote header response DTO."""

    id: str
    name: str
    start_date: date
    end_date: date
    status: str
    created_at: datetime


class QuoteListResponse(BaseModel):
    """List of quotes, newest first."""

    quotes: list[QuoteResponse]
    total: int = Field(..., description="Number of stored quotes, independent of paging")


class QuoteItemResponse(BaseModel):
    """Quote line response DTO."""

    id: str
    quote_id: str
    item_id: str
    quantity: int
    unit_price_snapshot: float
    line_total: float
    item_name: str | None = None
    item_price: float | None = None
    item_is_serialized: bool = False


class QuoteLineDetailResponse(QuoteItemResponse):
    """Quote line with live availability and risk."""

    breakdown: AvailabilityBreakdownResponse
    buffer: int
    risk: str


class QuoteDetailResponse(QuoteResponse):
    """Quote with lines, availability and the quote-level risk."""

    items: list[QuoteLineDetailResponse]
    risk: str
    total: float


class QuoteRiskResponse(BaseModel):
    """Quote-level risk only."""

    quote_id: str
    risk: str
    line_count: int
