from __future__ import annotations

from decimal import Decimal

from hotel_pms.crud.listing import as_money, contains_text, paginate, sort_rows
from hotel_pms.db.store import JsonStore


def _guest_of(booking: dict) -> dict:
    return booking.get("guest") or {}


def _payment_of(booking: dict) -> dict:
    return booking.get("payment") or {}


BOOKING_SORT_KEYS = {
    "date": lambda row: row.get("arrival") or None,
    "name": lambda row: (_guest_of(row).get("full_name") or "").lower(),
    "status": lambda row: row.get("status") or "",
    "amount": lambda row: as_money(_payment_of(row).get("amount")),
}


def _matches_search(booking: dict, search: str) -> bool:
    guest = _guest_of(booking)
    return (
        contains_text(guest.get("full_name"), search)
        or contains_text(booking.get("res_id"), search)
        or search in str(guest.get("telephone") or "")
    )


def filter_bookings(
    bookings: list[dict],
    status: str | None = None,
    hotel_id: str | None = None,
    arrival_from: str | None = None,
    departure_to: str | None = None,
    search: str | None = None,
) -> list[dict]:
    """Filter operations-list rows. Dates compare as ISO strings."""
    search = search.strip() if search else None
    results = []
    for booking in bookings:
        if status and booking.get("status") != status:
            continue
        if hotel_id and booking.get("hotel_id") != hotel_id:
            continue
        if arrival_from and (booking.get("arrival") or "") < arrival_from:
            continue
        if departure_to and (booking.get("departure") or "") > departure_to:
            continue
        if search and not _matches_search(booking, search):
            continue
        results.append(booking)
    return results


def build_booking_stats(bookings: list[dict]) -> dict:
    def count(status: str) -> int:
        return sum(1 for booking in bookings if booking.get("status") == status)

    return {
        "total": len(bookings),
        "pending": count("pending"),
        "confirmed": count("confirmed"),
        "checked_in": count("checked-in"),
        "checked_out": count("checked-out"),
        "cancelled": count("cancelled"),
        "total_revenue": sum(
            (as_money(_payment_of(booking).get("amount")) for booking in bookings),
            Decimal("0.00"),
        ),
        "pending_payments": sum(
            (as_money(_payment_of(booking).get("remaining_balance")) for booking in bookings),
            Decimal("0.00"),
        ),
    }


async def get_bookings(
    store: JsonStore,
    status: str | None = None,
    hotel_id: str | None = None,
    arrival_from: str | None = None,
    departure_to: str | None = None,
    search: str | None = None,
    sort_by: str = "date",
    sort_order: str = "desc",
    page: int = 1,
    page_size: int = 10,
) -> dict:
    filtered = filter_bookings(
        store.all("bookings"),
        status=status,
        hotel_id=hotel_id,
        arrival_from=arrival_from,
        departure_to=departure_to,
        search=search,
    )
    ordered = sort_rows(
        filtered, BOOKING_SORT_KEYS.get(sort_by, BOOKING_SORT_KEYS["date"]), sort_order == "desc"
    )
    items, total_pages = paginate(ordered, page, page_size)
    return {
        "items": items,
        "total": len(filtered),
        "page": page,
        "page_size": page_size,
        "total_pages": total_pages,
    }


async def get_booking_stats(store: JsonStore) -> dict:
    return build_booking_stats(store.all("bookings"))


async def get_booking_by_id(store: JsonStore, booking_id: str) -> dict | None:
    return store.get("bookings", booking_id)


async def create_booking(store: JsonStore, data: dict) -> dict:
    return store.insert("bookings", data)


async def update_booking_status(store: JsonStore, booking_ids: list[str], status: str) -> int:
    updated = 0
    for booking_id in dict.fromkeys(booking_ids):
        if store.update("bookings", booking_id, {"status": status}) is not None:
            updated += 1
    return updated
