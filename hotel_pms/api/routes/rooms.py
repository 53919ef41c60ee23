from fastapi import APIRouter, Depends, HTTPException, status

from hotel_pms.api import deps
from hotel_pms.crud.hotel import get_hotel_by_id
from hotel_pms.crud.room import (
    create_room,
    delete_room,
    get_room_by_id,
    get_rooms_by_hotel,
    update_room,
)
from hotel_pms.db.store import JsonStore, get_store
from hotel_pms.schemas.room import RoomCreate, RoomListResponse, RoomResponse, RoomUpdate

router = APIRouter(prefix="/v1.0/hotels/{hotel_id}/rooms", tags=["rooms"])


async def _check_hotel(store: JsonStore, hotel_id: str) -> None:
    if not await get_hotel_by_id(store, hotel_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Hotel not found")


async def _get_room_or_404(store: JsonStore, hotel_id: str, room_id: str) -> dict:
    room = await get_room_by_id(store, room_id)
    if not room or room.get("hotel_id") != hotel_id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Room not found")
    return room


@router.get("", response_model=RoomListResponse)
async def list_rooms(
    hotel_id: str,
    current_user: dict = Depends(deps.get_current_user),
    store: JsonStore = Depends(get_store),
):
    """List all rooms of a hotel."""
    await _check_hotel(store, hotel_id)
    rooms = await get_rooms_by_hotel(store, hotel_id)
    return RoomListResponse(items=rooms)


@router.post("", response_model=RoomResponse, status_code=status.HTTP_201_CREATED)
async def create_new_room(
    hotel_id: str,
    payload: RoomCreate,
    current_user: dict = Depends(deps.get_current_user),
    store: JsonStore = Depends(get_store),
):
    await _check_hotel(store, hotel_id)
    return await create_room(store, hotel_id, payload.model_dump(mode="json"))


@router.get("/{room_id}", response_model=RoomResponse)
async def get_single_room(
    hotel_id: str,
    room_id: str,
    current_user: dict = Depends(deps.get_current_user),
    store: JsonStore = Depends(get_store),
):
    return await _get_room_or_404(store, hotel_id, room_id)


@router.patch("/{room_id}", response_model=RoomResponse)
async def update_existing_room(
    hotel_id: str,
    room_id: str,
    payload: RoomUpdate,
    current_user: dict = Depends(deps.get_current_user),
    store: JsonStore = Depends(get_store),
):
    await _get_room_or_404(store, hotel_id, room_id)
    updated = await update_room(store, room_id, payload.model_dump(mode="json", exclude_unset=True))
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Room not found")
    return updated


@router.delete("/{room_id}", status_code=status.HTTP_200_OK)
async def delete_existing_room(
    hotel_id: str,
    room_id: str,
    current_user: dict = Depends(deps.get_current_user),
    store: JsonStore = Depends(get_store),
):
    await _get_room_or_404(store, hotel_id, room_id)
    await delete_room(store, room_id)
    return {"message": "Room deleted", "id": room_id}
