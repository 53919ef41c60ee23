from __future__ import annotations

from hotel_pms.db.store import JsonStore


async def get_rooms_by_hotel(store: JsonStore, hotel_id: str) -> list[dict]:
    return [room for room in store.all("rooms") if room.get("hotel_id") == hotel_id]


async def get_room_by_id(store: JsonStore, room_id: str) -> dict | None:
    return store.get("rooms", room_id)


async def create_room(store: JsonStore, hotel_id: str, data: dict) -> dict:
    return store.insert("rooms", {**data, "hotel_id": hotel_id})


async def update_room(store: JsonStore, room_id: str, data: dict) -> dict | None:
    filtered = {k: v for k, v in data.items() if v is not None}
    if not filtered:
        return store.get("rooms", room_id)
    return store.update("rooms", room_id, filtered)


async def delete_room(store: JsonStore, room_id: str) -> bool:
    return bool(store.delete("rooms", room_id))
