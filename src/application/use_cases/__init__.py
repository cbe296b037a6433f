"""Application use cases."""

from src.application.use_cases.add_inventory_unit import AddInventoryUnitUseCase
from src.application.use_cases.add_quote_item import (
    AddQuoteItemResult,
    AddQuoteItemUseCase,
)
from src.application.use_cases.create_inventory_item import (
    CreateInventoryItemUseCase,
    CreateItemResult,
)
from src.application.use_cases.get_inventory_overview import (
    GetInventoryOverviewUseCase,
    OverviewGroup,
    OverviewItem,
)
from src.application.use_cases.get_quote_detail import (
    GetQuoteDetailUseCase,
    QuoteDetailResult,
    QuoteLineDetail,
)
from src.application.use_cases.move_inventory_item import (
    MoveInventoryItemUseCase,
    MoveItemResult,
)
from src.application.use_cases.update_item_stock import UpdateItemStockUseCase

__all__ = [
    "CreateInventoryItemUseCase",
    "CreateItemResult",
    "MoveInventoryItemUseCase",
    "MoveItemResult",
    "AddInventoryUnitUseCase",
    "UpdateItemStockUseCase",
    "GetInventoryOverviewUseCase",
    "OverviewGroup",
    "OverviewItem",
    "AddQuoteItemUseCase",
    "AddQuoteItemResult",
    "GetQuoteDetailUseCase",
    "QuoteDetailResult",
    "QuoteLineDetail",
]
