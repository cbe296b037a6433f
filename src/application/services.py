"""
Service factory functions for dependency injection.

This module provides factory functions that wire infrastructure
implementations to core services. Use cases should import from here.

Clean Architecture: Application layer orchestrates DI, not core layer.
"""

from typing import TYPE_CHECKING

from src.core.services import AvailabilityService

if TYPE_CHECKING:
    from src.core.interfaces import IInventoryStore, IQuoteStore


# Singleton service instances
_availability_service: AvailabilityService | None = None


async def get_availability_service(
    inventory_store: "IInventoryStore | None" = None,
    quote_store: "IQuoteStore | None" = None,
) -> AvailabilityService:
    """
    Get or create AvailabilityService instance.

    Creates infrastructure dependencies if not provided.
    Uses singleton pattern when no overrides are given.

    Args:
        inventory_store: Optional inventory store override
        quote_store: Optional quote store override

    Returns:
        Configured AvailabilityService
    """
    global _availability_service

    overridden = inventory_store is not None or quote_store is not None
    if _availability_service is not None and not overridden:
        return _availability_service

    # Lazy import infrastructure to avoid circular imports
    from src.infrastructure.storage.sqlite import get_inventory_store, get_quote_store

    service = AvailabilityService(
        inventory_store=inventory_store or await get_inventory_store(),
        quote_store=quote_store or await get_quote_store(),
    )

    if not overridden:
        _availability_service = service

    return service


def reset_services() -> None:
    """
    Reset all singleton service instances.

    Useful for testing or when configuration changes.
    """
    global _availability_service

    _availability_service = None


__all__ = [
    # Factory functions
    "get_availability_service",
    # Reset
    "reset_services",
]
