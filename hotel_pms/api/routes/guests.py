from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query, status

from hotel_pms.api import deps
from hotel_pms.crud.guest import (
    create_guest,
    delete_guests,
    get_guest_bookings,
    get_guest_by_id,
    get_guest_stats,
    get_guests,
    update_guest,
)
from hotel_pms.db.store import JsonStore, get_store
from hotel_pms.schemas.booking import Booking
from hotel_pms.schemas.guest import (
    Gender,
    GuestBulkDelete,
    GuestCreate,
    GuestListResponse,
    GuestResponse,
    GuestStatsResponse,
    GuestUpdate,
    LoyaltyLevel,
)
from hotel_pms.schemas.hotel import DeleteResult

router = APIRouter(prefix="/v1.0/guests", tags=["guests"])

DEFAULT_GUEST_PAGE_SIZE = 12


async def _get_guest_or_404(store: JsonStore, guest_id: str) -> dict:
    guest = await get_guest_by_id(store, guest_id)
    if not guest:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Guest not found")
    return guest


@router.get("", response_model=GuestListResponse)
async def list_guests(
    search: str | None = Query(None, min_length=1, max_length=200),
    nationality: str | None = Query(None, max_length=200),
    vip: Literal["vip", "regular"] | None = None,
    loyalty: LoyaltyLevel | None = None,
    gender: Gender | None = None,
    sort_by: Literal["name", "last_stay", "total_stays", "total_spent"] = "name",
    sort_order: Literal["asc", "desc"] = "asc",
    page: int = Query(1, ge=1),
    page_size: int = Query(DEFAULT_GUEST_PAGE_SIZE, ge=1, le=100),
    current_user: dict = Depends(deps.get_current_user),
    store: JsonStore = Depends(get_store),
):
    result = await get_guests(
        store,
        search=search,
        nationality=nationality,
        vip=vip,
        loyalty=loyalty,
        gender=gender,
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        page_size=page_size,
    )
    return GuestListResponse(**result)


@router.get("/stats", response_model=GuestStatsResponse)
async def guest_statistics(
    current_user: dict = Depends(deps.get_current_user),
    store: JsonStore = Depends(get_store),
):
    return await get_guest_stats(store)


@router.post("", response_model=GuestResponse, status_code=status.HTTP_201_CREATED)
async def create_new_guest(
    payload: GuestCreate,
    current_user: dict = Depends(deps.get_current_user),
    store: JsonStore = Depends(get_store),
):
    return await create_guest(store, payload.model_dump(mode="json"))


@router.post("/bulk-delete", response_model=DeleteResult)
async def delete_selected_guests(
    payload: GuestBulkDelete,
    current_user: dict = Depends(deps.get_current_user),
    store: JsonStore = Depends(get_store),
):
    deleted = await delete_guests(store, payload.ids)
    return DeleteResult(deleted=deleted)


@router.get("/{guest_id}", response_model=GuestResponse)
async def get_guest(
    guest_id: str,
    current_user: dict = Depends(deps.get_current_user),
    store: JsonStore = Depends(get_store),
):
    return await _get_guest_or_404(store, guest_id)


@router.get("/{guest_id}/bookings", response_model=list[Booking])
async def list_guest_bookings(
    guest_id: str,
    current_user: dict = Depends(deps.get_current_user),
    store: JsonStore = Depends(get_store),
):
    """Bookings made under the guest's profile id."""
    guest = await _get_guest_or_404(store, guest_id)
    return await get_guest_bookings(store, guest)


@router.patch("/{guest_id}", response_model=GuestResponse)
async def patch_guest(
    guest_id: str,
    payload: GuestUpdate,
    current_user: dict = Depends(deps.get_current_user),
    store: JsonStore = Depends(get_store),
):
    await _get_guest_or_404(store, guest_id)
    updated = await update_guest(
        store,
        guest_id,
        payload.model_dump(mode="json", exclude_unset=True),
    )
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Guest not found")
    return updated


@router.delete("/{guest_id}", status_code=status.HTTP_200_OK)
async def delete_existing_guest(
    guest_id: str,
    current_user: dict = Depends(deps.get_current_user),
    store: JsonStore = Depends(get_store),
):
    deleted = await delete_guests(store, [guest_id])
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Guest not found")
    return {"message": "Guest deleted", "id": guest_id}
