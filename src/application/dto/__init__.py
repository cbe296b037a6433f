"""Data Transfer Objects for API layer.

Request DTOs: Validate and parse incoming API requests.
Response DTOs: Structure and serialize API responses.

These are the ONLY contracts between API handlers and use cases.
"""

from src.application.dto.requests import (
    AddQuoteItemRequest,
    AddUnitRequest,
    CreateGroupRequest,
    CreateItemRequest,
    CreateQuoteRequest,
    MoveItemRequest,
    ReorderGroupsRequest,
    UpdateGroupRequest,
    UpdateItemRequest,
    UpdateQuoteItemRequest,
    UpdateQuoteRequest,
    UpdateStockRequest,
    UpdateUnitStatusRequest,
)
from src.application.dto.responses import (
    AvailabilityBreakdownResponse,
    ErrorResponse,
    HealthResponse,
    InventoryGroupResponse,
    InventoryItemResponse,
    InventoryOverviewResponse,
    InventoryStockResponse,
    InventoryUnitResponse,
    ItemAvailabilityResponse,
    MoveItemResponse,
    OverviewGroupResponse,
    OverviewItemResponse,
    ProviderHealthResponse,
    QuoteDetailResponse,
    QuoteItemResponse,
    QuoteLineDetailResponse,
    QuoteListResponse,
    QuoteResponse,
    QuoteRiskResponse,
    ReorderGroupsResponse,
)

__all__ = [
    # Requests
    "CreateGroupRequest",
    "UpdateGroupRequest",
    "ReorderGroupsRequest",
    "CreateItemRequest",
    "UpdateItemRequest",
    "MoveItemRequest",
    "AddUnitRequest",
    "UpdateUnitStatusRequest",
    "UpdateStockRequest",
    "CreateQuoteRequest",
    "UpdateQuoteRequest",
    "AddQuoteItemRequest",
    "UpdateQuoteItemRequest",
    # Responses
    "ErrorResponse",
    "HealthResponse",
    "ProviderHealthResponse",
    "InventoryGroupResponse",
    "InventoryItemResponse",
    "InventoryUnitResponse",
    "InventoryStockResponse",
    "AvailabilityBreakdownResponse",
    "ItemAvailabilityResponse",
    "OverviewItemResponse",
    "OverviewGroupResponse",
    "InventoryOverviewResponse",
    "ReorderGroupsResponse",
    "MoveItemResponse",
    "QuoteResponse",
    "QuoteListResponse",
    "QuoteItemResponse",
    "QuoteLineDetailResponse",
    "QuoteDetailResponse",
    "QuoteRiskResponse",
]
