from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from hotel_pms.domain.currency import Money

Gender = Literal["male", "female"]
LoyaltyLevel = Literal["bronze", "silver", "gold", "platinum"]
SmokingPreference = Literal["smoking", "non-smoking"]


class GuestPreferences(BaseModel):
    room_type: str = ""
    bed_type: str = ""
    smoking_preference: SmokingPreference = "non-smoking"
    floor_preference: str = ""
    special_requests: list[str] = Field(default_factory=list)


class LoyaltyProgram(BaseModel):
    member: bool = False
    level: LoyaltyLevel = "bronze"
    points: int = Field(0, ge=0)


class EmergencyContact(BaseModel):
    name: str = ""
    relationship: str = ""
    phone: str = ""


class GuestProfileBase(BaseModel):
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    guest_classification: str = ""
    telephone: str = ""
    nationality: str = ""
    passport_number: str = ""
    date_of_birth: date | None = None
    gender: Gender | None = None
    address: str = ""
    city: str = ""
    country: str = ""
    company: str = ""
    travel_agent: str = ""
    source: str = ""
    group: str = ""
    vip: bool = False
    profile_id: str = ""
    preferences: GuestPreferences = Field(default_factory=GuestPreferences)
    loyalty_program: LoyaltyProgram = Field(default_factory=LoyaltyProgram)
    emergency_contact: EmergencyContact = Field(default_factory=EmergencyContact)
    notes: str = Field("", max_length=4000)


class GuestCreate(GuestProfileBase):
    full_name: str = Field(..., min_length=1, max_length=200)

    @field_validator("full_name")
    @classmethod
    def normalize_name(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("full_name must not be blank")
        return normalized


class GuestUpdate(BaseModel):
    full_name: str | None = Field(None, min_length=1, max_length=200)
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = Field(None, max_length=320)
    guest_classification: str | None = None
    telephone: str | None = Field(None, max_length=64)
    nationality: str | None = None
    passport_number: str | None = None
    date_of_birth: date | None = None
    gender: Gender | None = None
    address: str | None = None
    city: str | None = None
    country: str | None = None
    company: str | None = None
    travel_agent: str | None = None
    source: str | None = None
    group: str | None = None
    vip: bool | None = None
    profile_id: str | None = None
    preferences: GuestPreferences | None = None
    loyalty_program: LoyaltyProgram | None = None
    emergency_contact: EmergencyContact | None = None
    notes: str | None = Field(None, max_length=4000)

    @field_validator("full_name")
    @classmethod
    def normalize_name(cls, value: str | None) -> str | None:
        if value is None:
            return None
        normalized = value.strip()
        if not normalized:
            raise ValueError("full_name must not be blank")
        return normalized

    @field_validator("email", "telephone")
    @classmethod
    def normalize_optional_contact(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip()


class GuestResponse(GuestProfileBase):
    id: str
    full_name: str
    created_at: date
    last_stay: date | None = None
    total_stays: int = 0
    total_spent: Money = Decimal("0.00")


class GuestListResponse(BaseModel):
    items: list[GuestResponse]
    total: int
    page: int
    page_size: int
    total_pages: int
    nationalities: list[str] = Field(default_factory=list)


class GuestStatsResponse(BaseModel):
    total: int
    vip: int
    loyalty_members: int
    total_spent: Money
    average_stays: int
    nationalities: int


class GuestBulkDelete(BaseModel):
    ids: list[str] = Field(..., min_length=1)
