from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from hotel_pms.domain.currency import Money, NonNegativeMoney
from hotel_pms.schemas.room import RoomSnapshot

PaymentMethod = Literal["cash", "credit", "visa"]
BookingStatus = Literal["pending", "confirmed", "checked-in", "checked-out", "cancelled"]

BOOKING_STATUSES: tuple[str, ...] = (
    "pending",
    "confirmed",
    "checked-in",
    "checked-out",
    "cancelled",
)

# The wizard offers at most this many rooms of one type per booking.
MAX_ROOMS_PER_BOOKING = 10


class BookingGuest(BaseModel):
    """Guest data as typed into the wizard. Blank values are accepted."""

    model_config = ConfigDict(frozen=True)

    full_name: str = ""
    email: str = ""
    guest_classification: str = ""
    travel_agent: str = ""
    company: str = ""
    source: str = ""
    group: str = ""
    vip: bool = False
    nationality: str = ""
    telephone: str = ""
    room_no: str = ""
    rate_code: str = ""
    room_rate: NonNegativeMoney | None = None
    payment: str = ""
    res_id: str = ""
    profile_id: str = ""


class PaymentInput(BaseModel):
    model_config = ConfigDict(frozen=True)

    method: PaymentMethod = "cash"
    amount: NonNegativeMoney | None = None
    payment_date: date | None = None
    start_date: date | None = None
    completion_date: date | None = None
    amount_paid_today: NonNegativeMoney = Decimal("0.00")


class PaymentSplit(BaseModel):
    model_config = ConfigDict(frozen=True)

    paid_today: Money
    remaining_balance: Money


class PaymentRecord(BaseModel):
    method: PaymentMethod
    amount: Money
    payment_date: date | None = None
    start_date: date | None = None
    completion_date: date | None = None
    amount_paid_today: Money | None = None
    remaining_balance: Money | None = None


class BookingDraft(BaseModel):
    """Everything the wizard holds, as one immutable input."""

    model_config = ConfigDict(frozen=True)

    room_id: str
    number_of_rooms: int = Field(1, ge=1, le=MAX_ROOMS_PER_BOOKING)
    arrival: date | None = None
    departure: date | None = None
    rate_override: NonNegativeMoney | None = None
    guest: BookingGuest = Field(default_factory=BookingGuest)
    payment: PaymentInput = Field(default_factory=PaymentInput)


class BookingQuote(BaseModel):
    model_config = ConfigDict(frozen=True)

    nights: int
    number_of_rooms: int
    nightly_rate: Money
    total: Money
    payment: PaymentRecord
    currency_code: str


class Booking(BaseModel):
    id: str
    res_id: str
    hotel_id: str
    guest: BookingGuest
    room: RoomSnapshot
    number_of_rooms: int
    arrival: date | None = None
    departure: date | None = None
    nights: int = 0
    payment: PaymentRecord
    status: BookingStatus = "confirmed"
    created_at: datetime


class BookingListResponse(BaseModel):
    items: list[Booking]
    total: int
    page: int
    page_size: int
    total_pages: int


class BookingStatsResponse(BaseModel):
    total: int
    pending: int
    confirmed: int
    checked_in: int
    checked_out: int
    cancelled: int
    total_revenue: Money
    pending_payments: Money


class BookingBulkStatusUpdate(BaseModel):
    ids: list[str] = Field(..., min_length=1)
    status: BookingStatus


class BookingBulkStatusResult(BaseModel):
    updated: int
