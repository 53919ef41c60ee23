from __future__ import annotations

from datetime import date

from hotel_pms.crud.listing import contains_text
from hotel_pms.db.store import JsonStore


def filter_hotels(
    hotels: list[dict], name: str | None = None, code: str | None = None
) -> list[dict]:
    results = []
    for hotel in hotels:
        if name and not (
            contains_text(hotel.get("name"), name) or contains_text(hotel.get("alt_name"), name)
        ):
            continue
        if code and not contains_text(hotel.get("code"), code):
            continue
        results.append(hotel)
    return results


async def get_hotels(
    store: JsonStore, name: str | None = None, code: str | None = None
) -> list[dict]:
    return filter_hotels(store.all("hotels"), name=name, code=code)


async def get_hotel_by_id(store: JsonStore, hotel_id: str) -> dict | None:
    return store.get("hotels", hotel_id)


async def create_hotel(store: JsonStore, data: dict) -> dict:
    row = {**data, "created_at": date.today().isoformat()}
    return store.insert("hotels", row)


async def update_hotel(store: JsonStore, hotel_id: str, data: dict) -> dict | None:
    filtered = {k: v for k, v in data.items() if v is not None}
    if not filtered:
        return store.get("hotels", hotel_id)
    return store.update("hotels", hotel_id, filtered)


def _delete_rooms_of(store: JsonStore, hotel_ids: set[str]) -> None:
    room_ids = [room["id"] for room in store.all("rooms") if room.get("hotel_id") in hotel_ids]
    if room_ids:
        store.delete("rooms", room_ids)


async def delete_hotels(store: JsonStore, hotel_ids: list[str]) -> int:
    """Delete hotels and their rooms. Returns the number of hotels removed."""
    deleted = store.delete("hotels", hotel_ids)
    if deleted:
        _delete_rooms_of(store, set(hotel_ids))
    return deleted


async def delete_all_hotels(store: JsonStore) -> int:
    store.clear("rooms")
    return store.clear("hotels")
