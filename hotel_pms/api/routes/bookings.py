from __future__ import annotations

import logging
from datetime import date
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query, status

from hotel_pms.api import deps
from hotel_pms.core.config import Settings, get_settings
from hotel_pms.crud.booking import (
    create_booking,
    get_booking_by_id,
    get_booking_stats,
    get_bookings,
    update_booking_status,
)
from hotel_pms.crud.room import get_room_by_id
from hotel_pms.db.store import JsonStore, get_store
from hotel_pms.domain.booking import build_booking, derive_quote
from hotel_pms.schemas.booking import (
    Booking,
    BookingBulkStatusResult,
    BookingBulkStatusUpdate,
    BookingDraft,
    BookingListResponse,
    BookingQuote,
    BookingStatsResponse,
    BookingStatus,
)
from hotel_pms.schemas.room import RoomSnapshot

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1.0/bookings", tags=["bookings"])

DEFAULT_BOOKING_PAGE_SIZE = 10


async def _resolve_room(store: JsonStore, room_id: str) -> RoomSnapshot:
    room = await get_room_by_id(store, room_id)
    if not room:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Room not found")
    snapshot = RoomSnapshot.model_validate(room)
    if not snapshot.selectable:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Room is not available for booking",
        )
    return snapshot


async def _get_booking_or_404(store: JsonStore, booking_id: str) -> dict:
    booking = await get_booking_by_id(store, booking_id)
    if not booking:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Booking not found")
    return booking


@router.post("/quote", response_model=BookingQuote)
async def quote_booking(
    draft: BookingDraft,
    current_user: dict = Depends(deps.get_current_user),
    store: JsonStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """Derive nights, totals and the payment split for the wizard's current inputs."""
    room = await _resolve_room(store, draft.room_id)
    return derive_quote(draft, room, settings.currency_code)


@router.post("", response_model=Booking, status_code=status.HTTP_201_CREATED)
async def confirm_booking(
    draft: BookingDraft,
    current_user: dict = Depends(deps.get_current_user),
    store: JsonStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    """Confirm the wizard and append the new booking to the operations list."""
    room = await _resolve_room(store, draft.room_id)
    booking, quote = build_booking(draft, room, currency_code=settings.currency_code)
    created = await create_booking(store, booking.model_dump(mode="json"))
    logger.info(
        f"Booking {booking.res_id} confirmed by {current_user['username']}: "
        f"{quote.number_of_rooms} x {room.type}, {quote.nights} nights, "
        f"total {quote.total} {quote.currency_code}"
    )
    return created


@router.get("", response_model=BookingListResponse)
async def list_bookings(
    status_filter: BookingStatus | None = Query(None, alias="status"),
    hotel_id: str | None = None,
    arrival_from: date | None = None,
    departure_to: date | None = None,
    search: str | None = Query(None, min_length=1, max_length=200),
    sort_by: Literal["date", "name", "status", "amount"] = "date",
    sort_order: Literal["asc", "desc"] = "desc",
    page: int = Query(1, ge=1),
    page_size: int = Query(DEFAULT_BOOKING_PAGE_SIZE, ge=1, le=100),
    current_user: dict = Depends(deps.get_current_user),
    store: JsonStore = Depends(get_store),
):
    """Operations list, filtered by status, hotel, stay window and free-text search."""
    result = await get_bookings(
        store,
        status=status_filter,
        hotel_id=hotel_id,
        arrival_from=arrival_from.isoformat() if arrival_from else None,
        departure_to=departure_to.isoformat() if departure_to else None,
        search=search,
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        page_size=page_size,
    )
    return BookingListResponse(**result)


@router.get("/stats", response_model=BookingStatsResponse)
async def booking_statistics(
    current_user: dict = Depends(deps.get_current_user),
    store: JsonStore = Depends(get_store),
):
    return await get_booking_stats(store)


@router.post("/bulk-status", response_model=BookingBulkStatusResult)
async def change_booking_status(
    payload: BookingBulkStatusUpdate,
    current_user: dict = Depends(deps.get_current_user),
    store: JsonStore = Depends(get_store),
):
    """Move the selected bookings to a new status."""
    updated = await update_booking_status(store, payload.ids, payload.status)
    return BookingBulkStatusResult(updated=updated)


@router.get("/{booking_id}", response_model=Booking)
async def get_single_booking(
    booking_id: str,
    current_user: dict = Depends(deps.get_current_user),
    store: JsonStore = Depends(get_store),
):
    return await _get_booking_or_404(store, booking_id)


@router.post("/{booking_id}/cancel", response_model=Booking)
async def cancel_booking(
    booking_id: str,
    current_user: dict = Depends(deps.get_current_user),
    store: JsonStore = Depends(get_store),
):
    await _get_booking_or_404(store, booking_id)
    await update_booking_status(store, [booking_id], "cancelled")
    logger.info("Booking %s cancelled by %s", booking_id, current_user["username"])
    return await _get_booking_or_404(store, booking_id)
