"""
Core business logic services.

Layer-pure services that depend only on:
- src/core/entities/*
- src/core/interfaces/*
- src/core/exceptions.py

NO infrastructure imports. All dependencies injected via constructor.
"""

from src.core.services.availability import (
    AvailabilityService,
    calculate_buffer_quantity,
    calculate_quote_risk,
    classify_line_risk,
    compute_breakdown,
)

__all__ = [
    "AvailabilityService",
    "calculate_buffer_quantity",
    "calculate_quote_risk",
    "classify_line_risk",
    "compute_breakdown",
]
