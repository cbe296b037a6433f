"""
Dependency injection container for FastAPI.

Provides store, service and use case instances to route handlers.
Tests replace these through `app.dependency_overrides`.
"""

from functools import lru_cache

from src.application.services import get_availability_service
from src.application.use_cases import (
    AddInventoryUnitUseCase,
    AddQuoteItemUseCase,
    CreateInventoryItemUseCase,
    GetInventoryOverviewUseCase,
    GetQuoteDetailUseCase,
    MoveInventoryItemUseCase,
    UpdateItemStockUseCase,
)
from src.config import Settings, get_settings
from src.core.services import AvailabilityService
from src.infrastructure.storage.sqlite import (
    SQLiteInventoryStore,
    SQLiteQuoteStore,
    get_inventory_store,
    get_quote_store,
)


@lru_cache
def get_app_settings() -> Settings:
    """Get cached application settings."""
    return get_settings()


# Store dependencies
async def get_inv_store() -> SQLiteInventoryStore:
    """Get inventory store."""
    return await get_inventory_store()


async def get_q_store() -> SQLiteQuoteStore:
    """Get quote store."""
    return await get_quote_store()


# Availability service dependency
async def get_availability() -> AvailabilityService:
    """Get availability service."""
    return await get_availability_service()


# Inventory use case dependencies
def get_create_item_use_case() -> CreateInventoryItemUseCase:
    """Get create inventory item use case."""
    return CreateInventoryItemUseCase()


def get_move_item_use_case() -> MoveInventoryItemUseCase:
    """Get move inventory item use case."""
    return MoveInventoryItemUseCase()


def get_add_unit_use_case() -> AddInventoryUnitUseCase:
    """Get add inventory unit use case."""
    return AddInventoryUnitUseCase()


def get_update_stock_use_case() -> UpdateItemStockUseCase:
    """Get update item stock use case."""
    return UpdateItemStockUseCase()


def get_overview_use_case() -> GetInventoryOverviewUseCase:
    """Get inventory overview use case."""
    return GetInventoryOverviewUseCase()


# Quote use case dependencies
def get_add_quote_item_use_case() -> AddQuoteItemUseCase:
    """Get add quote item use case."""
    return AddQuoteItemUseCase()


def get_quote_detail_use_case() -> GetQuoteDetailUseCase:
    """Get quote detail use case."""
    return GetQuoteDetailUseCase()
