from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field, field_validator


class HotelCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    code: str = Field(..., min_length=1, max_length=32)
    alt_name: str = Field(..., min_length=1, max_length=200)

    @field_validator("name", "code", "alt_name")
    @classmethod
    def normalize_required_text(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("must not be blank")
        return normalized


class HotelUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=200)
    code: str | None = Field(None, min_length=1, max_length=32)
    alt_name: str | None = Field(None, min_length=1, max_length=200)

    @field_validator("name", "code", "alt_name")
    @classmethod
    def normalize_optional_text(cls, value: str | None) -> str | None:
        if value is None:
            return None
        normalized = value.strip()
        if not normalized:
            raise ValueError("must not be blank")
        return normalized


class HotelResponse(BaseModel):
    id: str
    name: str
    code: str
    alt_name: str = ""
    created_at: date


class HotelListResponse(BaseModel):
    items: list[HotelResponse]


class HotelBulkDelete(BaseModel):
    ids: list[str] = Field(..., min_length=1)


class DeleteResult(BaseModel):
    deleted: int
