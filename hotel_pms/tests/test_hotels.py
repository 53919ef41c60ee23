from __future__ import annotations

from fastapi import FastAPI
from fastapi.testclient import TestClient

from hotel_pms.api import deps
import hotel_pms.api.routes.hotels as hotel_routes
import hotel_pms.api.routes.rooms as room_routes
from hotel_pms.db.store import get_store

hotel_test_app = FastAPI()
hotel_test_app.include_router(hotel_routes.router)
hotel_test_app.include_router(room_routes.router)


def _override_current_user():
    return {"id": "user-1", "username": "frontdesk", "full_name": "Front Desk", "language": "en"}


def _client(store) -> TestClient:
    hotel_test_app.dependency_overrides[deps.get_current_user] = _override_current_user
    hotel_test_app.dependency_overrides[get_store] = lambda: store
    return TestClient(hotel_test_app)


def test_hotel_routes_require_authentication(seeded_store):
    hotel_test_app.dependency_overrides[get_store] = lambda: seeded_store
    try:
        client = TestClient(hotel_test_app)
        response = client.get("/v1.0/hotels")
        assert response.status_code == 401
    finally:
        hotel_test_app.dependency_overrides = {}


def test_list_hotels_filters_by_name_and_code(seeded_store):
    try:
        client = _client(seeded_store)

        everything = client.get("/v1.0/hotels")
        by_name = client.get("/v1.0/hotels", params={"name": "ocean"})
        by_alt_name = client.get("/v1.0/hotels", params={"name": "الجبل"})
        by_code = client.get("/v1.0/hotels", params={"code": "cch"})

        assert everything.status_code == 200
        assert len(everything.json()["items"]) == 4
        assert [h["id"] for h in by_name.json()["items"]] == ["hotel-2"]
        assert [h["id"] for h in by_alt_name.json()["items"]] == ["hotel-3"]
        assert [h["id"] for h in by_code.json()["items"]] == ["hotel-4"]
    finally:
        hotel_test_app.dependency_overrides = {}


def test_create_hotel_strips_and_validates(seeded_store):
    try:
        client = _client(seeded_store)

        response = client.post(
            "/v1.0/hotels",
            json={"name": "  Desert Oasis  ", "code": "DO005", "alt_name": "واحة الصحراء"},
        )
        rejected = client.post(
            "/v1.0/hotels", json={"name": "   ", "code": "X", "alt_name": "Y"}
        )

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Desert Oasis"
        assert body["id"]
        assert body["created_at"]
        assert rejected.status_code == 422
        assert len(seeded_store.all("hotels")) == 5
    finally:
        hotel_test_app.dependency_overrides = {}


def test_get_and_patch_hotel(seeded_store):
    try:
        client = _client(seeded_store)

        patched = client.patch("/v1.0/hotels/hotel-1", json={"code": "GPH100"})
        fetched = client.get("/v1.0/hotels/hotel-1")
        missing = client.get("/v1.0/hotels/hotel-99")

        assert patched.status_code == 200
        assert fetched.json()["code"] == "GPH100"
        assert fetched.json()["name"] == "Grand Palace Hotel"
        assert missing.status_code == 404
        assert missing.json()["detail"] == "Hotel not found"
    finally:
        hotel_test_app.dependency_overrides = {}


def test_delete_hotel_removes_its_rooms(seeded_store):
    try:
        client = _client(seeded_store)

        response = client.delete("/v1.0/hotels/hotel-2")
        again = client.delete("/v1.0/hotels/hotel-2")

        assert response.status_code == 200
        assert response.json() == {"message": "Hotel deleted", "id": "hotel-2"}
        assert again.status_code == 404
        assert all(room["hotel_id"] != "hotel-2" for room in seeded_store.all("rooms"))
        assert len(seeded_store.all("rooms")) == 6
    finally:
        hotel_test_app.dependency_overrides = {}


def test_bulk_and_delete_all(seeded_store):
    try:
        client = _client(seeded_store)

        bulk = client.post("/v1.0/hotels/bulk-delete", json={"ids": ["hotel-3", "hotel-4", "nope"]})
        empty = client.post("/v1.0/hotels/bulk-delete", json={"ids": []})
        wipe = client.delete("/v1.0/hotels")

        assert bulk.json() == {"deleted": 2}
        assert empty.status_code == 422
        assert wipe.json() == {"deleted": 2}
        assert seeded_store.all("hotels") == []
        assert seeded_store.all("rooms") == []
    finally:
        hotel_test_app.dependency_overrides = {}


def test_list_rooms_reports_selectability(seeded_store):
    try:
        client = _client(seeded_store)

        response = client.get("/v1.0/hotels/hotel-1/rooms")
        unknown_hotel = client.get("/v1.0/hotels/hotel-99/rooms")

        assert response.status_code == 200
        rooms = {room["id"]: room for room in response.json()["items"]}
        assert set(rooms) == {"room-1", "room-2", "room-3", "room-4"}
        assert rooms["room-3"]["selectable"] is True
        assert rooms["room-4"]["selectable"] is False
        assert rooms["room-3"]["rate"] == 250.0
        assert unknown_hotel.status_code == 404
    finally:
        hotel_test_app.dependency_overrides = {}


def test_room_lifecycle(seeded_store):
    try:
        client = _client(seeded_store)

        created = client.post(
            "/v1.0/hotels/hotel-3/rooms",
            json={"type": "Loft", "rate": "210.50", "available_count": 2},
        )
        room_id = created.json()["id"]
        patched = client.patch(
            f"/v1.0/hotels/hotel-3/rooms/{room_id}",
            json={"status": "maintenance"},
        )
        wrong_hotel = client.get(f"/v1.0/hotels/hotel-1/rooms/{room_id}")
        negative = client.post(
            "/v1.0/hotels/hotel-3/rooms", json={"type": "Loft", "rate": -1}
        )
        deleted = client.delete(f"/v1.0/hotels/hotel-3/rooms/{room_id}")

        assert created.status_code == 201
        assert created.json()["hotel_id"] == "hotel-3"
        assert created.json()["rate"] == 210.5
        assert patched.json()["status"] == "maintenance"
        assert patched.json()["selectable"] is False
        assert wrong_hotel.status_code == 404
        assert negative.status_code == 422
        assert deleted.json() == {"message": "Room deleted", "id": room_id}
        assert seeded_store.get("rooms", room_id) is None
    finally:
        hotel_test_app.dependency_overrides = {}


def test_room_with_available_flag_off_is_not_selectable(seeded_store):
    try:
        client = _client(seeded_store)

        patched = client.patch("/v1.0/hotels/hotel-1/rooms/room-1", json={"available": False})

        assert patched.status_code == 200
        assert patched.json()["status"] == "available"
        assert patched.json()["available_count"] == 8
        assert patched.json()["selectable"] is False
    finally:
        hotel_test_app.dependency_overrides = {}
