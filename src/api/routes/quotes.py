"""
Quote management endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import (
    get_add_quote_item_use_case,
    get_q_store,
    get_quote_detail_use_case,
)
from src.application.dto.requests import (
    AddQuoteItemRequest,
    CreateQuoteRequest,
    UpdateQuoteItemRequest,
    UpdateQuoteRequest,
)
from src.application.dto.responses import (
    ErrorResponse,
    QuoteDetailResponse,
    QuoteItemResponse,
    QuoteListResponse,
    QuoteResponse,
    QuoteRiskResponse,
)
from src.application.use_cases.add_quote_item import (
    AddQuoteItemUseCase,
    quote_item_to_response,
)
from src.application.use_cases.get_quote_detail import GetQuoteDetailUseCase
from src.core.entities.quote import Quote
from src.core.exceptions import ValidationError
from src.infrastructure.storage.sqlite import SQLiteQuoteStore

router = APIRouter(prefix="/api/quotes", tags=["quotes"])


def _entity_to_response(quote: Quote) -> QuoteResponse:
    """Convert entity to response DTO."""
    return QuoteResponse(
        id=quote.id,  # type: ignore[arg-type]
        name=quote.name,
        start_date=quote.start_date,
        end_date=quote.end_date,
        status=quote.status.value,
        created_at=quote.created_at,
    )


@router.post(
    "",
    response_model=QuoteResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
)
async def create_quote(
    request: CreateQuoteRequest,
    store: SQLiteQuoteStore = Depends(get_q_store),
) -> QuoteResponse:
    """Create a draft quote."""
    quote = Quote(
        name=request.name,
        start_date=request.start_date,
        end_date=request.end_date,
    )
    created = await store.create_quote(quote)
    return _entity_to_response(created)


@router.get(
    "",
    response_model=QuoteListResponse,
)
async def list_quotes(
    limit: int = 100,
    offset: int = 0,
    store: SQLiteQuoteStore = Depends(get_q_store),
) -> QuoteListResponse:
    """List quotes, newest first."""
    quotes = await store.list_quotes(limit=limit, offset=offset)
    return QuoteListResponse(
        quotes=[_entity_to_response(q) for q in quotes],
        total=await store.count_quotes(),
    )


@router.get(
    "/{quote_id}",
    response_model=QuoteDetailResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_quote(
    quote_id: str,
    use_case: GetQuoteDetailUseCase = Depends(get_quote_detail_use_case),
) -> QuoteDetailResponse:
    """Quote with its lines, live availability and risk."""
    result = await use_case.execute(quote_id)
    return use_case.to_response(result)


@router.get(
    "/{quote_id}/risk",
    response_model=QuoteRiskResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_quote_risk(
    quote_id: str,
    use_case: GetQuoteDetailUseCase = Depends(get_quote_detail_use_case),
) -> QuoteRiskResponse:
    """Quote-level risk only."""
    result = await use_case.execute(quote_id)
    return use_case.to_risk_response(result)


@router.patch(
    "/{quote_id}",
    response_model=QuoteResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
async def update_quote(
    quote_id: str,
    request: UpdateQuoteRequest,
    store: SQLiteQuoteStore = Depends(get_q_store),
) -> QuoteResponse:
    """Update quote name, dates or status."""
    existing = await store.get_quote(quote_id)
    if existing is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Quote not found: {quote_id}",
        )

    if request.name is not None:
        existing.name = request.name
    if request.start_date is not None:
        existing.start_date = request.start_date
    if request.end_date is not None:
        existing.end_date = request.end_date
    if request.status is not None:
        existing.status = request.status

    if existing.end_date < existing.start_date:
        raise ValidationError(
            field="end_date",
            message="end_date cannot be before start_date",
            value=existing.end_date,
        )

    updated = await store.update_quote(existing)
    return _entity_to_response(updated)


@router.delete(
    "/{quote_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_quote(
    quote_id: str,
    store: SQLiteQuoteStore = Depends(get_q_store),
) -> None:
    """Delete a quote and its lines."""
    if not await store.delete_quote(quote_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Quote not found: {quote_id}",
        )


@router.post(
    "/{quote_id}/items",
    response_model=QuoteItemResponse,
    status_code=status.HTTP_201_CREATED,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def add_quote_item(
    quote_id: str,
    request: AddQuoteItemRequest,
    use_case: AddQuoteItemUseCase = Depends(get_add_quote_item_use_case),
) -> QuoteItemResponse:
    """Add an item to a quote, or increase its quantity if already present."""
    result = await use_case.execute(quote_id, request)
    return use_case.to_response(result)


@router.patch(
    "/items/{quote_item_id}",
    response_model=QuoteItemResponse,
    responses={404: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
async def update_quote_item(
    quote_item_id: str,
    request: UpdateQuoteItemRequest,
    store: SQLiteQuoteStore = Depends(get_q_store),
) -> QuoteItemResponse:
    """Set the quantity of a quote line."""
    updated = await store.update_item_quantity(quote_item_id, request.quantity)
    if updated is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Quote item not found: {quote_item_id}",
        )
    return quote_item_to_response(updated)


@router.delete(
    "/items/{quote_item_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_quote_item(
    quote_item_id: str,
    store: SQLiteQuoteStore = Depends(get_q_store),
) -> None:
    """Remove a line from a quote."""
    if not await store.delete_item(quote_item_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Quote item not found: {quote_item_id}",
        )
