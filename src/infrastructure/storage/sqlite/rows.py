"""Row-level helpers shared by the SQLite stores."""

import uuid
from datetime import UTC, datetime


def generate_id() -> str:
    """Generate a new UUID text ID."""
    return str(uuid.uuid4())


def parse_datetime(value: str | None) -> datetime:
    """Parse a stored ISO timestamp, falling back to now for empty or bad values."""
    if value:
        try:
            return datetime.fromisoformat(value)
        except (ValueError, TypeError):
            pass
    return datetime.now(UTC)


def placeholders(count: int) -> str:
    """Build a ``?, ?, ...`` list for an IN clause."""
    return ", ".join("?" for _ in range(count))
