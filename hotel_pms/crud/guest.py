from __future__ import annotations

from datetime import date
from decimal import Decimal

from hotel_pms.crud.listing import as_money, contains_text, paginate, sort_rows
from hotel_pms.db.store import JsonStore

NULLABLE_GUEST_FIELDS = {"date_of_birth", "gender"}

GUEST_SORT_KEYS = {
    "name": lambda row: (row.get("full_name") or "").lower(),
    "last_stay": lambda row: row.get("last_stay") or None,
    "total_stays": lambda row: int(row.get("total_stays") or 0),
    "total_spent": lambda row: as_money(row.get("total_spent")),
}


def _matches_search(guest: dict, search: str) -> bool:
    return (
        contains_text(guest.get("full_name"), search)
        or contains_text(guest.get("email"), search)
        or search in str(guest.get("telephone") or "")
        or contains_text(guest.get("profile_id"), search)
    )


def filter_guests(
    guests: list[dict],
    search: str | None = None,
    nationality: str | None = None,
    vip: str | None = None,
    loyalty: str | None = None,
    gender: str | None = None,
) -> list[dict]:
    search = search.strip() if search else None
    results = []
    for guest in guests:
        if search and not _matches_search(guest, search):
            continue
        if nationality and guest.get("nationality") != nationality:
            continue
        if vip and bool(guest.get("vip")) != (vip == "vip"):
            continue
        if loyalty and (guest.get("loyalty_program") or {}).get("level") != loyalty:
            continue
        if gender and guest.get("gender") != gender:
            continue
        results.append(guest)
    return results


def list_nationalities(guests: list[dict]) -> list[str]:
    return sorted({guest["nationality"] for guest in guests if guest.get("nationality")})


def build_guest_stats(guests: list[dict]) -> dict:
    total = len(guests)
    total_stays = sum(int(guest.get("total_stays") or 0) for guest in guests)
    return {
        "total": total,
        "vip": sum(1 for guest in guests if guest.get("vip")),
        "loyalty_members": sum(
            1 for guest in guests if (guest.get("loyalty_program") or {}).get("member")
        ),
        "total_spent": sum(
            (as_money(guest.get("total_spent")) for guest in guests), Decimal("0.00")
        ),
        "average_stays": round(total_stays / total) if total else 0,
        "nationalities": len(list_nationalities(guests)),
    }


async def get_guests(
    store: JsonStore,
    search: str | None = None,
    nationality: str | None = None,
    vip: str | None = None,
    loyalty: str | None = None,
    gender: str | None = None,
    sort_by: str = "name",
    sort_order: str = "asc",
    page: int = 1,
    page_size: int = 12,
) -> dict:
    guests = store.all("guests")
    filtered = filter_guests(
        guests,
        search=search,
        nationality=nationality,
        vip=vip,
        loyalty=loyalty,
        gender=gender,
    )
    ordered = sort_rows(
        filtered, GUEST_SORT_KEYS.get(sort_by, GUEST_SORT_KEYS["name"]), sort_order == "desc"
    )
    items, total_pages = paginate(ordered, page, page_size)
    return {
        "items": items,
        "total": len(filtered),
        "page": page,
        "page_size": page_size,
        "total_pages": total_pages,
        "nationalities": list_nationalities(guests),
    }


async def get_guest_stats(store: JsonStore) -> dict:
    return build_guest_stats(store.all("guests"))


async def get_guest_by_id(store: JsonStore, guest_id: str) -> dict | None:
    return store.get("guests", guest_id)


async def create_guest(store: JsonStore, data: dict) -> dict:
    row = {
        "total_stays": 0,
        "total_spent": 0,
        "last_stay": None,
        **data,
        "created_at": date.today().isoformat(),
    }
    return store.insert("guests", row)


async def update_guest(store: JsonStore, guest_id: str, data: dict) -> dict | None:
    update_data = {
        k: v for k, v in data.items() if v is not None or k in NULLABLE_GUEST_FIELDS
    }
    if not update_data:
        return store.get("guests", guest_id)
    return store.update("guests", guest_id, update_data)


async def delete_guests(store: JsonStore, guest_ids: list[str]) -> int:
    return store.delete("guests", guest_ids)


async def get_guest_bookings(store: JsonStore, guest: dict) -> list[dict]:
    profile_id = guest.get("profile_id")
    if not profile_id:
        return []
    return [
        booking
        for booking in store.all("bookings")
        if (booking.get("guest") or {}).get("profile_id") == profile_id
    ]
