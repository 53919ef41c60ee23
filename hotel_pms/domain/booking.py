"""Booking derivation: stay length, pricing, payment split and booking assembly.

Everything here is pure. Derived values are always recomputed from the whole
``BookingDraft`` so nothing goes stale when one input changes after another.
"""

from __future__ import annotations

import math
import time
import uuid
from collections.abc import Callable
from datetime import date, datetime, timezone
from decimal import Decimal

from hotel_pms.domain.currency import DEFAULT_CURRENCY_CODE, to_money
from hotel_pms.schemas.booking import (
    Booking,
    BookingDraft,
    BookingGuest,
    BookingQuote,
    PaymentInput,
    PaymentRecord,
    PaymentSplit,
)
from hotel_pms.schemas.room import RoomSnapshot

SECONDS_PER_DAY = 24 * 60 * 60
ZERO = Decimal("0.00")


def _as_datetime(value: date | datetime) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
    return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)


def compute_nights(arrival: date | datetime | None, departure: date | datetime | None) -> int:
    """Billable nights between two dates, rounded up; 0 when the range is empty or inverted."""
    if arrival is None or departure is None:
        return 0
    delta = _as_datetime(departure) - _as_datetime(arrival)
    nights = math.ceil(delta.total_seconds() / SECONDS_PER_DAY)
    return nights if nights > 0 else 0


def compute_total(rate: Decimal | float | int, nights: int, room_count: int) -> Decimal:
    return to_money(to_money(rate) * nights * room_count)


def clamp_room_count(requested: int, available_count: int) -> int:
    return max(1, min(requested, available_count))


def update_payment_split(
    total: Decimal | float | int, paid_today: Decimal | float | int
) -> PaymentSplit:
    total = to_money(total)
    paid_today = to_money(paid_today)
    remaining = total - paid_today
    return PaymentSplit(
        paid_today=paid_today,
        remaining_balance=remaining if remaining > ZERO else ZERO,
    )


def build_payment_record(payment: PaymentInput, amount: Decimal) -> PaymentRecord:
    record = PaymentRecord(
        method=payment.method,
        amount=amount,
        payment_date=payment.payment_date,
    )
    if payment.method != "credit":
        return record

    # Only the deferred method carries a schedule and a balance.
    split = update_payment_split(amount, payment.amount_paid_today)
    return record.model_copy(
        update={
            "start_date": payment.start_date,
            "completion_date": payment.completion_date,
            "amount_paid_today": split.paid_today,
            "remaining_balance": split.remaining_balance,
        }
    )


def derive_quote(
    draft: BookingDraft,
    room: RoomSnapshot,
    currency_code: str = DEFAULT_CURRENCY_CODE,
) -> BookingQuote:
    nights = compute_nights(draft.arrival, draft.departure)
    room_count = clamp_room_count(draft.number_of_rooms, room.available_count)
    nightly_rate = draft.rate_override if draft.rate_override is not None else room.rate
    total = compute_total(nightly_rate, nights, room_count)

    amount = draft.payment.amount if draft.payment.amount is not None else total
    return BookingQuote(
        nights=nights,
        number_of_rooms=room_count,
        nightly_rate=to_money(nightly_rate),
        total=total,
        payment=build_payment_record(draft.payment, to_money(amount)),
        currency_code=currency_code,
    )


def _default_res_id() -> str:
    return f"RES{time.time_ns() // 1_000_000}"


def _new_booking_id() -> str:
    return str(uuid.uuid4())


def assemble_booking(
    guest: BookingGuest,
    room: RoomSnapshot,
    room_count: int,
    payment: PaymentRecord,
    *,
    arrival: date | None = None,
    departure: date | None = None,
    nights: int | None = None,
    status: str = "confirmed",
    now: datetime | None = None,
    id_factory: Callable[[], str] | None = None,
) -> Booking:
    """Build a new booking from snapshots of the current inputs.

    No validation happens here; blank guest fields go through as typed.
    """
    room_rate = guest.room_rate if guest.room_rate is not None else room.rate
    return Booking(
        id=(id_factory or _new_booking_id)(),
        res_id=guest.res_id or _default_res_id(),
        hotel_id=room.hotel_id,
        guest=guest.model_copy(deep=True, update={"room_rate": room_rate}),
        room=room.model_copy(deep=True),
        number_of_rooms=room_count,
        arrival=arrival,
        departure=departure,
        nights=compute_nights(arrival, departure) if nights is None else nights,
        payment=payment.model_copy(deep=True),
        status=status,
        created_at=now or datetime.now(timezone.utc),
    )


def build_booking(
    draft: BookingDraft,
    room: RoomSnapshot,
    *,
    currency_code: str = DEFAULT_CURRENCY_CODE,
    now: datetime | None = None,
    id_factory: Callable[[], str] | None = None,
) -> tuple[Booking, BookingQuote]:
    quote = derive_quote(draft, room, currency_code)
    booking = assemble_booking(
        draft.guest.model_copy(update={"room_rate": quote.nightly_rate}),
        room,
        quote.number_of_rooms,
        quote.payment,
        arrival=draft.arrival,
        departure=draft.departure,
        nights=quote.nights,
        now=now,
        id_factory=id_factory,
    )
    return booking, quote
