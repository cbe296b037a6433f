"""
Domain exceptions for the RentQuote application.

Provides specific exception types for different error scenarios.
"""

from typing import Any


class RentQuoteError(Exception):
    """Base exception for all RentQuote errors."""

    def __init__(
        self,
        message: str,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict:
        """Convert to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


# Storage Exceptions
class StorageError(RentQuoteError):
    """Base exception for storage operations."""

    pass


class NotFoundError(StorageError):
    """A requested record does not exist."""

    pass


class GroupNotFoundError(NotFoundError):
    """Inventory group not found."""

    def __init__(self, group_id: str):
        super().__init__(
            f"Inventory group not found: {group_id}",
            code="GROUP_NOT_FOUND",
            details={"group_id": group_id},
        )


class ItemNotFoundError(NotFoundError):
    """Inventory item not found."""

    def __init__(self, item_id: str):
        super().__init__(
            f"Inventory item not found: {item_id}",
            code="ITEM_NOT_FOUND",
            details={"item_id": item_id},
        )


class UnitNotFoundError(NotFoundError):
    """Serialized unit not found."""

    def __init__(self, unit_id: str):
        super().__init__(
            f"Inventory unit not found: {unit_id}",
            code="UNIT_NOT_FOUND",
            details={"unit_id": unit_id},
        )


class QuoteNotFoundError(NotFoundError):
    """Quote not found."""

    def __init__(self, quote_id: str):
        super().__init__(
            f"Quote not found: {quote_id}",
            code="QUOTE_NOT_FOUND",
            details={"quote_id": quote_id},
        )


class QuoteItemNotFoundError(NotFoundError):
    """Quote line not found."""

    def __init__(self, quote_item_id: str):
        super().__init__(
            f"Quote item not found: {quote_item_id}",
            code="QUOTE_ITEM_NOT_FOUND",
            details={"quote_item_id": quote_item_id},
        )


class DatabaseError(StorageError):
    """Database operation failed."""

    def __init__(self, operation: str, error: str):
        super().__init__(
            f"Database error during {operation}: {error}",
            code="DATABASE_ERROR",
            details={"operation": operation, "error": error},
        )


# Validation Exceptions
class ValidationError(RentQuoteError):
    """Input validation failed."""

    def __init__(self, field: str, message: str, value: Any = None):
        super().__init__(
            f"Validation error for '{field}': {message}",
            code="VALIDATION_ERROR",
            details={
                "field": field,
                "message": message,
                "value": str(value)[:100] if value is not None else None,
            },
        )


class InvalidStockError(ValidationError):
    """Stock counters violate 0 <= out_of_service <= total."""

    def __init__(self, total_quantity: int, out_of_service_quantity: int):
        super().__init__(
            field="out_of_service_quantity",
            message=(
                f"Out-of-service quantity ({out_of_service_quantity}) must be "
                f"between 0 and total quantity ({total_quantity})"
            ),
            value=out_of_service_quantity,
        )
        self.code = "INVALID_STOCK"
        self.details.update(
            {
                "total_quantity": total_quantity,
                "out_of_service_quantity": out_of_service_quantity,
            }
        )


class TrackingModeError(ValidationError):
    """Operation does not apply to the item's tracking mode."""

    def __init__(self, item_id: str, expected: str):
        super().__init__(
            field="item_id",
            message=f"Item {item_id} is not a {expected} item",
            value=item_id,
        )
        self.code = "WRONG_TRACKING_MODE"
        self.details.update({"item_id": item_id, "expected": expected})


class ConfigurationError(RentQuoteError):
    """Configuration error."""

    pass
