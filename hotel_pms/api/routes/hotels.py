from fastapi import APIRouter, Depends, HTTPException, Query, status

from hotel_pms.api import deps
from hotel_pms.crud.hotel import (
    create_hotel,
    delete_all_hotels,
    delete_hotels,
    get_hotel_by_id,
    get_hotels,
    update_hotel,
)
from hotel_pms.db.store import JsonStore, get_store
from hotel_pms.schemas.hotel import (
    DeleteResult,
    HotelBulkDelete,
    HotelCreate,
    HotelListResponse,
    HotelResponse,
    HotelUpdate,
)

router = APIRouter(prefix="/v1.0/hotels", tags=["hotels"])


@router.get("", response_model=HotelListResponse)
async def list_hotels(
    name: str | None = Query(None, max_length=200),
    code: str | None = Query(None, max_length=32),
    current_user: dict = Depends(deps.get_current_user),
    store: JsonStore = Depends(get_store),
):
    """List hotels, filtered by name (or alternative name) and code."""
    rows = await get_hotels(store, name=name, code=code)
    return HotelListResponse(items=rows)


@router.post("", response_model=HotelResponse, status_code=status.HTTP_201_CREATED)
async def create_new_hotel(
    payload: HotelCreate,
    current_user: dict = Depends(deps.get_current_user),
    store: JsonStore = Depends(get_store),
):
    return await create_hotel(store, payload.model_dump())


@router.post("/bulk-delete", response_model=DeleteResult)
async def delete_selected_hotels(
    payload: HotelBulkDelete,
    current_user: dict = Depends(deps.get_current_user),
    store: JsonStore = Depends(get_store),
):
    """Delete the selected hotels together with their rooms."""
    deleted = await delete_hotels(store, payload.ids)
    return DeleteResult(deleted=deleted)


@router.delete("", response_model=DeleteResult)
async def delete_every_hotel(
    current_user: dict = Depends(deps.get_current_user),
    store: JsonStore = Depends(get_store),
):
    deleted = await delete_all_hotels(store)
    return DeleteResult(deleted=deleted)


@router.get("/{hotel_id}", response_model=HotelResponse)
async def get_hotel(
    hotel_id: str,
    current_user: dict = Depends(deps.get_current_user),
    store: JsonStore = Depends(get_store),
):
    hotel = await get_hotel_by_id(store, hotel_id)
    if not hotel:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Hotel not found")
    return hotel


@router.patch("/{hotel_id}", response_model=HotelResponse)
async def update_existing_hotel(
    hotel_id: str,
    payload: HotelUpdate,
    current_user: dict = Depends(deps.get_current_user),
    store: JsonStore = Depends(get_store),
):
    hotel = await update_hotel(store, hotel_id, payload.model_dump(exclude_unset=True))
    if not hotel:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Hotel not found")
    return hotel


@router.delete("/{hotel_id}", status_code=status.HTTP_200_OK)
async def delete_existing_hotel(
    hotel_id: str,
    current_user: dict = Depends(deps.get_current_user),
    store: JsonStore = Depends(get_store),
):
    """Delete a hotel and its rooms."""
    deleted = await delete_hotels(store, [hotel_id])
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Hotel not found")
    return {"message": "Hotel deleted", "id": hotel_id}
