"""
Application layer - Use cases, DTOs, and service factories.

This layer orchestrates business logic by:
1. Defining request/response DTOs for API contracts
2. Implementing use cases that coordinate core services
3. Providing factory functions for dependency injection

Use cases are the only entry point for API handlers.
"""

from src.application.dto.requests import (
    AddQuoteItemRequest,
    AddUnitRequest,
    CreateGroupRequest,
    CreateItemRequest,
    CreateQuoteRequest,
    MoveItemRequest,
    UpdateStockRequest,
)
from src.application.dto.responses import (
    ErrorResponse,
    HealthResponse,
    InventoryOverviewResponse,
    ProviderHealthResponse,
    QuoteDetailResponse,
    QuoteRiskResponse,
)
from src.application.services import get_availability_service, reset_services
from src.application.use_cases import (
    AddInventoryUnitUseCase,
    AddQuoteItemUseCase,
    CreateInventoryItemUseCase,
    GetInventoryOverviewUseCase,
    GetQuoteDetailUseCase,
    MoveInventoryItemUseCase,
    UpdateItemStockUseCase,
)

__all__ = [
    # Request DTOs
    "CreateGroupRequest",
    "CreateItemRequest",
    "MoveItemRequest",
    "AddUnitRequest",
    "UpdateStockRequest",
    "CreateQuoteRequest",
    "AddQuoteItemRequest",
    # Response DTOs
    "InventoryOverviewResponse",
    "QuoteDetailResponse",
    "QuoteRiskResponse",
    "HealthResponse",
    "ProviderHealthResponse",
    "ErrorResponse",
    # Use Cases
    "CreateInventoryItemUseCase",
    "MoveInventoryItemUseCase",
    "AddInventoryUnitUseCase",
    "UpdateItemStockUseCase",
    "GetInventoryOverviewUseCase",
    "AddQuoteItemUseCase",
    "GetQuoteDetailUseCase",
    # Service factories
    "get_availability_service",
    "reset_services",
]
