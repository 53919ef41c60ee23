from __future__ import annotations

import math
from collections.abc import Callable
from decimal import Decimal
from typing import Any

from hotel_pms.domain.currency import to_money


def contains_text(value: object, needle: str) -> bool:
    return needle.lower() in str(value or "").lower()


def as_money(value: object) -> Decimal:
    """Lenient money coercion for rows loaded from the data files."""
    try:
        return to_money(value or 0)
    except ValueError:
        return Decimal("0.00")


def sort_rows(
    rows: list[dict],
    key: Callable[[dict], Any],
    descending: bool = False,
) -> list[dict]:
    # Rows missing the sort value always go last regardless of direction.
    present = [row for row in rows if key(row) is not None]
    missing = [row for row in rows if key(row) is None]
    return sorted(present, key=key, reverse=descending) + missing


def paginate(rows: list[dict], page: int, page_size: int) -> tuple[list[dict], int]:
    """Return the requested page and the total page count (at least 1)."""
    total_pages = max(1, math.ceil(len(rows) / page_size))
    start = (page - 1) * page_size
    return rows[start : start + page_size], total_pages
